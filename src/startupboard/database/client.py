"""
Database client handed to GraphQL resolvers through the request context.

Resolvers reach the database only through ``info.context["db"]``, which
exposes generated-style create operations under ``mutation`` and reads under
``query``. Each operation runs in its own session from the shared pool and
returns GraphQL-ready types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..dbmodels import Companies, Users
from ..graphql.types.company import Company
from ..graphql.types.user import User
from ..logging import get_logger
from .connection import get_async_session

if TYPE_CHECKING:
    import strawberry

logger = get_logger(__name__)


def requested_fields(info: strawberry.Info | None) -> list[str]:
    """Return the names of the fields the caller selected on the current result."""
    if info is None:
        return []

    names: list[str] = []
    for field in info.selected_fields:
        for selection in getattr(field, "selections", []):
            # Inline fragments carry no name
            if getattr(selection, "name", None):
                names.append(selection.name)
    return names


class MutationOperations:
    """Create operations (``db.mutation.*``)."""

    async def create_user(self, data: Mapping[str, Any]) -> User:
        """Insert a user row. Unique violations propagate as ``IntegrityError``."""
        async with get_async_session() as session:
            user = Users(**data)
            session.add(user)
            try:
                await session.flush()
            except IntegrityError as e:
                logger.warning("User insert rejected", error=str(e.orig))
                raise
            await session.refresh(user)

            logger.debug("User row created", user_id=str(user.id))
            return User.from_model(user)

    async def create_company(
        self, data: Mapping[str, Any], info: strawberry.Info | None = None
    ) -> Company:
        """Insert a company row and return it shaped as a GraphQL ``Company``."""
        async with get_async_session() as session:
            company = Companies(**data)
            session.add(company)
            try:
                await session.flush()
            except IntegrityError as e:
                logger.warning("Company insert rejected", error=str(e.orig))
                raise
            await session.refresh(company)

            logger.debug(
                "Company row created",
                company_id=str(company.id),
                requested_fields=requested_fields(info),
            )
            return Company.from_model(company)


class QueryOperations:
    """Read operations (``db.query.*``)."""

    async def user(self, id: UUID) -> User | None:
        async with get_async_session() as session:
            user = await session.get(Users, id)
            return User.from_model(user) if user else None

    async def company(self, id: UUID) -> Company | None:
        async with get_async_session() as session:
            company = await session.get(Companies, id)
            return Company.from_model(company) if company else None

    async def companies(self, limit: int = 50, offset: int = 0) -> list[Company]:
        """List companies, newest first."""
        async with get_async_session() as session:
            stmt = (
                select(Companies)
                .order_by(Companies.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            result = await session.execute(stmt)
            return [Company.from_model(company) for company in result.scalars().all()]


class DatabaseClient:
    """Per-request database handle exposing ``mutation`` and ``query`` operations."""

    def __init__(self) -> None:
        self.mutation = MutationOperations()
        self.query = QueryOperations()
