"""Password hashing and JWT issuance/verification for authentication."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


class TokenError(Exception):
    """Base class for token verification failures."""


class InvalidSignature(TokenError):
    """Signature mismatch or a token that cannot be decoded at all."""


class TokenExpired(TokenError):
    pass


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    subject_id: str
    role: str


class TokenIssuer:
    """
    Signs and verifies session tokens (JWT with sub, role, iat, exp).

    The signing secret is passed in explicitly; tokens are stateless and their
    validity depends only on signature and expiry. `clock` returns the current
    UTC time and exists so expiry can be checked against a controlled clock.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 10080,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, subject_id: str, role: str) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "sub": str(subject_id),
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expire).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Return the embedded claims.

        Raises InvalidSignature when the token does not decode or verify,
        TokenExpired once the clock has reached the embedded expiry.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "exp"],
                },
            )
        except jwt.PyJWTError as e:
            raise InvalidSignature(str(e)) from e

        try:
            exp = int(payload["exp"])
        except (TypeError, ValueError) as e:
            raise InvalidSignature("Invalid exp claim") from e
        if self._clock().timestamp() >= exp:
            raise TokenExpired("Token has expired")

        role = payload.get("role")
        if not isinstance(role, str):
            raise InvalidSignature("Invalid role claim")
        return TokenClaims(subject_id=str(payload["sub"]), role=role)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Process-wide issuer built from settings (safe to use as a dependency)."""
    return TokenIssuer(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
