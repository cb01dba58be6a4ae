"""Token verification service."""

import logfire

from meet.config import AuthSettings
from meet.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Resolves bearer tokens to the acting person's ID."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token rejected", error=str(e))
                raise
            logfire.debug("Token verified", user_id=payload.user_id)
            return payload
