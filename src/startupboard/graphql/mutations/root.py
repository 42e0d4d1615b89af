"""
Root GraphQL mutation definitions
"""

from dataclasses import asdict

import strawberry

from ..types.auth import AuthPayload
from ..types.company import Company


# Input types for mutations
@strawberry.input
class SignupInput:
    """Input for creating a new user account."""

    email: str
    password: str
    name: str | None = None


@strawberry.input
class CompanyInput:
    """Input for creating a new company."""

    name: str | None = None
    url: str | None = None
    logo: str | None = None
    employees: int | None = None
    tranch: str | None = None
    description: str | None = None
    location: str | None = None
    address: str | None = None
    jobs: str | None = None
    jobslink: str | None = None
    sector: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    youtube: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def signup(self, info: strawberry.Info, input: SignupInput) -> AuthPayload:
        """Create a user account and return an auth token for it."""
        from ..resolvers.auth import signup

        return await signup(info, asdict(input))

    @strawberry.mutation
    async def post(self, info: strawberry.Info, input: CompanyInput) -> Company:
        """Create a company."""
        from ..resolvers.company import post

        return await post(info, asdict(input))
