"""
User GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Users


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: UUID
    name: str | None
    email: str
    created_at: datetime

    @classmethod
    def from_model(cls, user: "Users") -> "User":
        """Build the GraphQL type from a database row, leaving the password hash behind."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
