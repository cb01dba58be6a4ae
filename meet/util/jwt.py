"""Bearer token helpers.

People sign in through the identity provider in front of this service. The
tokens it issues are HS256 JWTs whose ``user_id`` claim is the person ID;
this module only checks them. ``create_token`` mints the same shape for tests
and local tooling.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from meet.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims read from a token. Other claims are ignored."""

    user_id: str
    exp: datetime


class JWTError(Exception):
    """Token is missing claims, badly signed or expired."""

    pass


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Mint a token for a person ID, valid for ``jwt_expiry_days``."""
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    return jwt.encode(
        {"user_id": user_id, "exp": expiry},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry, then read the claims.

    Raises:
        JWTError: If the token is expired, malformed or lacks ``user_id``
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload(**claims)
    except ValueError as e:
        raise JWTError("Invalid token") from e
