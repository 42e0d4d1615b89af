"""Signed identity tokens issued at signup."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from ..logging import get_logger

logger = get_logger(__name__)


class AuthenticationError(Exception):
    """Raised when a token cannot be verified."""


class TokenSigner:
    """Signs and verifies ``{"userId": ...}`` tokens with the application secret."""

    def __init__(self, secret_key: str | None, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("An application secret is required to sign tokens")
        self.secret_key = secret_key
        self.algorithm = algorithm

    def issue_token(self, user_id: UUID | str) -> str:
        """Issue a token embedding the user's id."""
        payload = {
            "userId": str(user_id),
            "iat": datetime.now(UTC),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> dict:
        """Decode a token and return its payload.

        Raises:
            AuthenticationError: If the signature is invalid or ``userId`` is missing
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except InvalidTokenError as e:
            logger.warning("Token validation failed", error=str(e))
            raise AuthenticationError("Invalid token") from e

        if not payload.get("userId"):
            raise AuthenticationError("Missing 'userId' claim in token")

        return payload
