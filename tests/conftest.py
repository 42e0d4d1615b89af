"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Settings are read on first import of the package
os.environ.setdefault("STARTUPBOARD_APP_SECRET", "test-secret-key-for-testing-only")
os.environ.setdefault("STARTUPBOARD_DEBUG", "false")

TEST_SECRET = os.environ["STARTUPBOARD_APP_SECRET"]


@pytest.fixture
def secret_key() -> str:
    return TEST_SECRET


@pytest.fixture
def token_signer(secret_key: str):
    from startupboard.auth.tokens import TokenSigner

    return TokenSigner(secret_key)


@pytest.fixture
def mock_db() -> MagicMock:
    """Database client double exposing ``mutation``/``query`` coroutines."""
    db = MagicMock()
    db.mutation.create_user = AsyncMock()
    db.mutation.create_company = AsyncMock()
    db.query.user = AsyncMock()
    db.query.company = AsyncMock()
    db.query.companies = AsyncMock(return_value=[])
    return db


@pytest.fixture
def mock_info(mock_db: MagicMock, token_signer: Any) -> MagicMock:
    """Create a mock GraphQL info object with a resolver context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {
        "request": MagicMock(headers=MagicMock(get=MagicMock(return_value=None))),
        "db": mock_db,
        "tokens": token_signer,
    }
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
