"""
Root GraphQL query definitions
"""

from uuid import UUID

import strawberry

from ..types.company import Company
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the user identified by the bearer token."""
        from ..resolvers.auth import resolve_current_user

        return await resolve_current_user(info)

    @strawberry.field
    async def company(self, info: strawberry.Info, id: UUID) -> Company | None:
        """Get a company by ID."""
        from ..resolvers.company import resolve_company_by_id

        return await resolve_company_by_id(info, id)

    @strawberry.field
    async def companies(
        self,
        info: strawberry.Info,
        limit: int | None = 50,
        offset: int | None = 0,
    ) -> list[Company]:
        """List companies, newest first."""
        from ..resolvers.company import resolve_companies

        return await resolve_companies(
            info, 50 if limit is None else limit, 0 if offset is None else offset
        )
