from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from uuid import UUID

import strawberry

from ...auth.passwords import hash_password
from ...auth.tokens import AuthenticationError
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.auth import AuthPayload
    from ..types.user import User

logger = get_logger(__name__)


async def signup(info: strawberry.Info, args: Mapping[str, Any]) -> AuthPayload:
    """
    Create a user and issue a token for it.

    The password is replaced by its bcrypt hash before the arguments reach the
    database. Database failures (duplicate email, etc.) propagate unchanged.
    """
    password = await hash_password(args["password"])
    user = await info.context["db"].mutation.create_user(data={**args, "password": password})

    token = info.context["tokens"].issue_token(user.id)
    logger.info("User signed up", user_id=str(user.id))

    from ..types.auth import AuthPayload

    return AuthPayload(token=token, user=user)


def _bearer_token(info: strawberry.Info) -> str | None:
    request = info.context.get("request")
    if request is None:
        return None

    authorization = request.headers.get("authorization")
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer ") :].strip() or None


async def resolve_current_user(info: strawberry.Info) -> User | None:
    """Resolve the user identified by the request's bearer token, if any."""
    token = _bearer_token(info)
    if token is None:
        return None

    try:
        payload = info.context["tokens"].verify_token(token)
        user_id = UUID(payload["userId"])
    except (AuthenticationError, ValueError) as e:
        logger.warning("Ignoring unusable bearer token", error=str(e))
        return None

    return await info.context["db"].query.user(user_id)
