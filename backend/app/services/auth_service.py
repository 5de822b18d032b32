"""
ScholarHub Backend — Access Token Service
===========================================

What:  Issues and verifies the signed access tokens sent as
       `Authorization: Bearer <token>`.
How:   PyJWT, HMAC (HS256 by default) with the ACCESS_TOKEN_SECRET.
       verify() either returns the decoded claims or raises
       UnauthorizedError; callers never inspect an error value.
Who:   POST /jwt issues; app.dependencies.current_claims verifies.

Tokens carry the caller's claims (at least `email`) plus `iat` and `exp`.
Lifetime is fixed at issuance (one hour by default) and there is no refresh:
clients request a new token after sign-in.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from app.config import Settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# Set by issue() alone; caller-supplied values are discarded
VALIDITY_CLAIMS = ("iat", "exp", "nbf")

# Signature, exp and iat are checked; audience, issuer, subject and jti are
# passed through to callers unvalidated
DECODE_OPTIONS = {
    "require": ["exp", "iat"],
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


class TokenService:
    """Signs and verifies access tokens with one shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=1),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.access_token_secret,
            algorithm=settings.access_token_algorithm,
            lifetime=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(self, claims: Dict[str, Any]) -> str:
        """
        Sign `claims` into a token valid for `lifetime`.

        Caller-supplied `iat`, `exp` and `nbf` are dropped, so every token is
        valid from issuance for exactly `lifetime`. Other claims, registered
        ones such as `aud` or `sub` included, are signed as given.
        """
        now = datetime.now(timezone.utc)
        payload = {k: v for k, v in claims.items() if k not in VALIDITY_CLAIMS}
        payload.update(iat=now, exp=now + self.lifetime)
        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)
        logger.info("Issued access token for %s", claims.get("email", "<no email>"))
        return token

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Return the decoded claims of a valid token.

        Raises:
            UnauthorizedError: bad signature, malformed token or expired.
        """
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options=DECODE_OPTIONS,
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired access token")
            raise UnauthorizedError(context={"reason": "expired"})
        except jwt.InvalidTokenError as e:
            logger.info("Rejected invalid access token: %s", type(e).__name__)
            raise UnauthorizedError(context={"reason": type(e).__name__})
