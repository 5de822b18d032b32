"""
ScholarHub Backend — Token Service & Auth Dependency Tests
============================================================

What:  Token issue/verify, bearer header parsing, role and self checks.
How:   TokenService is exercised directly; role checks against a mocked
       user_service so no database is involved.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import jwt
import pytest

from app.dependencies import (
    ensure_self,
    extract_bearer_token,
    require_admin,
    require_moderator,
    valid_object_id,
)
from app.exceptions import ForbiddenError, UnauthorizedError, ValidationError
from app.services.auth_service import TokenService

SECRET = "unit-test-signing-secret-at-least-32-bytes"


class TestTokenService:

    def setup_method(self):
        self.service = TokenService(secret=SECRET)

    def test_issue_then_verify_returns_claims(self):
        token = self.service.issue({"email": "a@x.com", "name": "Ada"})
        claims = self.service.verify(token)
        assert claims["email"] == "a@x.com"
        assert claims["name"] == "Ada"

    def test_token_expires_after_one_hour(self):
        claims = self.service.verify(self.service.issue({"email": "a@x.com"}))
        assert claims["exp"] - claims["iat"] == 3600

    def test_caller_cannot_extend_expiry(self):
        token = self.service.issue({"email": "a@x.com", "exp": 9999999999})
        claims = self.service.verify(token)
        assert claims["exp"] - claims["iat"] == 3600

    def test_registered_claims_round_trip(self):
        token = self.service.issue({
            "email": "a@x.com",
            "aud": "web",
            "iss": "scholarhub-web",
            "sub": "user-42",
            "jti": "once",
        })
        claims = self.service.verify(token)
        assert claims["aud"] == "web"
        assert claims["iss"] == "scholarhub-web"
        assert claims["sub"] == "user-42"

    def test_caller_cannot_postpone_validity(self):
        token = self.service.issue({"email": "a@x.com", "nbf": 9999999999})
        claims = self.service.verify(token)
        assert "nbf" not in claims

    def test_expired_token_rejected(self):
        expired = TokenService(secret=SECRET, lifetime=timedelta(seconds=-10))
        token = expired.issue({"email": "a@x.com"})
        with pytest.raises(UnauthorizedError) as exc_info:
            self.service.verify(token)
        assert exc_info.value.context["reason"] == "expired"

    def test_wrong_secret_rejected(self):
        other = TokenService(secret="another-service-signing-secret-0123")
        token = other.issue({"email": "a@x.com"})
        with pytest.raises(UnauthorizedError):
            self.service.verify(token)

    def test_garbage_rejected(self):
        with pytest.raises(UnauthorizedError):
            self.service.verify("not.a.token")

    def test_unsigned_token_rejected(self):
        token = jwt.encode({"email": "a@x.com"}, key=None, algorithm="none")
        with pytest.raises(UnauthorizedError):
            self.service.verify(token)


class TestBearerHeader:

    def test_extracts_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("bearer abc") == "abc"

    def test_missing_header(self):
        with pytest.raises(UnauthorizedError):
            extract_bearer_token(None)

    def test_token_without_scheme(self):
        with pytest.raises(UnauthorizedError):
            extract_bearer_token("abc.def.ghi")

    def test_scheme_without_token(self):
        with pytest.raises(UnauthorizedError):
            extract_bearer_token("Bearer")


class TestRoleChecks:

    def test_ensure_self_allows_own_email(self):
        ensure_self("a@x.com", {"email": "a@x.com"})

    def test_ensure_self_rejects_other_email(self):
        with pytest.raises(ForbiddenError):
            ensure_self("b@x.com", {"email": "a@x.com"})

    @pytest.mark.asyncio
    async def test_require_admin_passes_for_admin(self, mock_db_session):
        with patch("app.dependencies.user_service") as mock_users:
            mock_users.has_role = AsyncMock(return_value=True)
            claims = await require_admin(claims={"email": "a@x.com"}, db=mock_db_session)
        assert claims == {"email": "a@x.com"}
        mock_users.has_role.assert_awaited_once_with(mock_db_session, "a@x.com", "admin")

    @pytest.mark.asyncio
    async def test_require_admin_rejects_non_admin(self, mock_db_session):
        with patch("app.dependencies.user_service") as mock_users:
            mock_users.has_role = AsyncMock(return_value=False)
            with pytest.raises(ForbiddenError):
                await require_admin(claims={"email": "a@x.com"}, db=mock_db_session)

    @pytest.mark.asyncio
    async def test_require_moderator_checks_moderator_role(self, mock_db_session):
        with patch("app.dependencies.user_service") as mock_users:
            mock_users.has_role = AsyncMock(return_value=True)
            await require_moderator(claims={"email": "m@x.com"}, db=mock_db_session)
        mock_users.has_role.assert_awaited_once_with(mock_db_session, "m@x.com", "moderator")

    @pytest.mark.asyncio
    async def test_claims_without_email_are_forbidden(self, mock_db_session):
        with patch("app.dependencies.user_service") as mock_users:
            mock_users.has_role = AsyncMock(return_value=True)
            with pytest.raises(ForbiddenError):
                await require_moderator(claims={"sub": "x"}, db=mock_db_session)
        mock_users.has_role.assert_not_awaited()


class TestObjectIdParsing:

    def test_lowercases_valid_id(self):
        assert valid_object_id("0123456789ABCDEF01234567") == "0123456789abcdef01234567"

    @pytest.mark.parametrize("bad_id", [
        "0123456789abcdef01234567\n",
        "\n0123456789abcdef01234567",
        "0123456789abcdef0123456",
    ])
    def test_rejects_anything_but_24_hex(self, bad_id):
        with pytest.raises(ValidationError):
            valid_object_id(bad_id)
