"""
Tests for signup and current-user GraphQL resolvers
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import bcrypt
import jwt
import pytest
from sqlalchemy.exc import IntegrityError

from startupboard.graphql.resolvers.auth import resolve_current_user, signup
from startupboard.graphql.types.auth import AuthPayload
from startupboard.graphql.types.user import User


@pytest.fixture
def sample_user():
    """Create a sample user as returned by the database client."""
    return User(
        id=uuid.uuid4(),
        name="Ada Lovelace",
        email="ada@example.com",
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def signup_args():
    return {"name": "Ada Lovelace", "email": "ada@example.com", "password": "correct horse"}


class TestSignup:
    """Tests for the signup resolver."""

    @pytest.mark.asyncio
    async def test_returns_token_and_user(self, mock_info, mock_db, sample_user, signup_args):
        """Test that signup returns the created user together with a token."""
        mock_db.mutation.create_user.return_value = sample_user

        result = await signup(mock_info, signup_args)

        assert isinstance(result, AuthPayload)
        assert result.user is sample_user
        assert isinstance(result.token, str)

    @pytest.mark.asyncio
    async def test_token_encodes_user_id(
        self, mock_info, mock_db, sample_user, signup_args, secret_key
    ):
        """Test that the token decodes with the secret to the new user's id."""
        mock_db.mutation.create_user.return_value = sample_user

        result = await signup(mock_info, signup_args)

        payload = jwt.decode(result.token, secret_key, algorithms=["HS256"])
        assert payload["userId"] == str(sample_user.id)

    @pytest.mark.asyncio
    async def test_token_rejected_with_wrong_secret(
        self, mock_info, mock_db, sample_user, signup_args
    ):
        """Test that the token is signed, not just encoded."""
        mock_db.mutation.create_user.return_value = sample_user

        result = await signup(mock_info, signup_args)

        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(result.token, "some-other-secret", algorithms=["HS256"])

    @pytest.mark.asyncio
    async def test_password_is_hashed_before_create(
        self, mock_info, mock_db, sample_user, signup_args
    ):
        """Test that the database never receives the plaintext password."""
        mock_db.mutation.create_user.return_value = sample_user

        await signup(mock_info, signup_args)

        data = mock_db.mutation.create_user.call_args.kwargs["data"]
        assert data["password"] != signup_args["password"]
        assert bcrypt.checkpw(signup_args["password"].encode(), data["password"].encode())

    @pytest.mark.asyncio
    async def test_hashes_exactly_once_with_cost_factor(
        self, mock_info, mock_db, sample_user, signup_args
    ):
        """Test that hashing runs once per call and its result is what gets stored."""
        mock_db.mutation.create_user.return_value = sample_user

        with patch(
            "startupboard.graphql.resolvers.auth.hash_password",
            new=AsyncMock(return_value="$2b$10$hashed"),
        ) as mock_hash:
            await signup(mock_info, signup_args)

        mock_hash.assert_awaited_once_with("correct horse")
        data = mock_db.mutation.create_user.call_args.kwargs["data"]
        assert data["password"] == "$2b$10$hashed"

    @pytest.mark.asyncio
    async def test_forwards_all_other_arguments(
        self, mock_info, mock_db, sample_user, signup_args
    ):
        """Test that every non-password argument reaches the database unchanged."""
        mock_db.mutation.create_user.return_value = sample_user
        signup_args["referrer"] = "newsletter"

        await signup(mock_info, signup_args)

        data = mock_db.mutation.create_user.call_args.kwargs["data"]
        assert data["name"] == "Ada Lovelace"
        assert data["email"] == "ada@example.com"
        assert data["referrer"] == "newsletter"
        assert set(data) == {"name", "email", "password", "referrer"}

    @pytest.mark.asyncio
    async def test_stored_hash_uses_cost_factor_ten(
        self, mock_info, mock_db, sample_user, signup_args
    ):
        """Test that the bcrypt hash carries a cost factor of 10."""
        mock_db.mutation.create_user.return_value = sample_user

        await signup(mock_info, signup_args)

        data = mock_db.mutation.create_user.call_args.kwargs["data"]
        assert data["password"].split("$")[2] == "10"

    @pytest.mark.asyncio
    async def test_signup_with_80_byte_password(self, mock_info, mock_db, sample_user):
        """Test that passwords past bcrypt's 72-byte input still sign up."""
        mock_db.mutation.create_user.return_value = sample_user
        password = "x" * 80

        result = await signup(mock_info, {"email": "ada@example.com", "password": password})

        assert result.user is sample_user
        data = mock_db.mutation.create_user.call_args.kwargs["data"]
        assert data["password"] != password
        assert bcrypt.checkpw(password.encode()[:72], data["password"].encode())

    @pytest.mark.asyncio
    async def test_database_failure_propagates(self, mock_info, mock_db, signup_args):
        """Test that a rejected insert surfaces as the same exception."""
        error = IntegrityError("INSERT INTO users", {}, Exception("duplicate key"))
        mock_db.mutation.create_user.side_effect = error

        with pytest.raises(IntegrityError) as exc_info:
            await signup(mock_info, signup_args)

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_no_token_when_create_fails(self, mock_info, mock_db, signup_args):
        """Test that no token is signed for a user that was never created."""
        mock_db.mutation.create_user.side_effect = RuntimeError("connection lost")
        tokens = MagicMock()
        mock_info.context["tokens"] = tokens

        with pytest.raises(RuntimeError):
            await signup(mock_info, signup_args)

        tokens.issue_token.assert_not_called()


class TestResolveCurrentUser:
    """Tests for resolve_current_user."""

    def _with_authorization(self, info, value):
        info.context["request"] = MagicMock(
            headers=MagicMock(get=MagicMock(side_effect=lambda key: {"authorization": value}.get(key)))
        )
        return info

    @pytest.mark.asyncio
    async def test_returns_user_for_valid_token(
        self, mock_info, mock_db, sample_user, token_signer
    ):
        """Test that a valid bearer token resolves to its user."""
        token = token_signer.issue_token(sample_user.id)
        self._with_authorization(mock_info, f"Bearer {token}")
        mock_db.query.user.return_value = sample_user

        result = await resolve_current_user(mock_info)

        assert result is sample_user
        mock_db.query.user.assert_awaited_once_with(sample_user.id)

    @pytest.mark.asyncio
    async def test_returns_none_without_header(self, mock_info, mock_db):
        """Test that anonymous requests resolve to no user."""
        result = await resolve_current_user(mock_info)

        assert result is None
        mock_db.query.user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_returns_none_for_invalid_token(self, mock_info, mock_db):
        """Test that a token signed with another secret is ignored."""
        forged = jwt.encode({"userId": str(uuid.uuid4())}, "wrong-secret", algorithm="HS256")
        self._with_authorization(mock_info, f"Bearer {forged}")

        result = await resolve_current_user(mock_info)

        assert result is None
        mock_db.query.user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_returns_none_for_non_uuid_user_id(self, mock_info, mock_db, token_signer):
        """Test that a well-signed token with a malformed id is ignored."""
        token = token_signer.issue_token("not-a-uuid")
        self._with_authorization(mock_info, f"Bearer {token}")

        result = await resolve_current_user(mock_info)

        assert result is None

    @pytest.mark.asyncio
    async def test_ignores_non_bearer_scheme(self, mock_info, mock_db):
        """Test that other authorization schemes are not treated as tokens."""
        self._with_authorization(mock_info, "Basic dXNlcjpwYXNz")

        result = await resolve_current_user(mock_info)

        assert result is None
        mock_db.query.user.assert_not_awaited()
