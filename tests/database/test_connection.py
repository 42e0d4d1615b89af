"""
Tests for shared session handling
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from startupboard.database import connection


@pytest.fixture
def session_factory():
    session = AsyncMock(spec=AsyncSession)
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = session
    factory.return_value.__aexit__.return_value = False
    with patch.object(connection, "_async_session_local", factory):
        yield session


@pytest.mark.asyncio
async def test_commits_on_success(session_factory):
    async with connection.get_async_session() as session:
        assert session is session_factory

    session_factory.commit.assert_awaited_once()
    session_factory.rollback.assert_not_awaited()
    session_factory.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_rolls_back_and_reraises(session_factory):
    error = RuntimeError("boom")

    with pytest.raises(RuntimeError) as exc_info:
        async with connection.get_async_session():
            raise error

    assert exc_info.value is error
    session_factory.rollback.assert_awaited_once()
    session_factory.commit.assert_not_awaited()


def test_to_async_url():
    assert (
        connection.to_async_url("postgresql://u:p@localhost/db")
        == "postgresql+asyncpg://u:p@localhost/db"
    )
    assert connection.to_async_url("postgresql+asyncpg://x/db") == "postgresql+asyncpg://x/db"


def test_database_url_prefers_environment(monkeypatch):
    monkeypatch.setenv("STARTUPBOARD_DATABASE_URL", "postgresql://env/db")

    assert connection.get_database_url() == "postgresql://env/db"


def test_init_database_is_idempotent():
    with patch.object(connection, "create_async_engine") as mock_create:
        connection.reset_database()
        try:
            connection.init_database("postgresql://u:p@localhost/db")
            connection.init_database()

            mock_create.assert_called_once()
            assert mock_create.call_args.args[0] == "postgresql+asyncpg://u:p@localhost/db"

            connection.init_database("postgresql://u:p@localhost/other", force_reinit=True)
            assert mock_create.call_count == 2
        finally:
            connection.reset_database()
