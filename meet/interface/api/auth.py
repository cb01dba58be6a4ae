"""Actor resolution for API routes."""

from fastapi import HTTPException, status

from meet.domain.service import JWTService
from meet.util.jwt import JWTError


def authenticate(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> str:
    """Return the person ID carried by the request's JWT.

    The token is read from an ``Authorization: Bearer`` header first, then
    from the ``auth_token`` cookie.

    Raises:
        HTTPException: 401 if no token is present or it does not verify
    """
    token = None
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token = credentials.strip()
    if token is None:
        token = auth_token

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return payload.user_id
