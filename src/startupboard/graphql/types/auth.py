"""
Authentication payload GraphQL type
"""

import strawberry

from .user import User


@strawberry.type
class AuthPayload:
    """Result of a successful signup: the issued token and the new user."""

    token: str
    user: User
