from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from tasktrack.core.jwt import decode_access_token
from tasktrack.models.user import UserRole
from tasktrack.schemas.auth import AuthContext

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def _extract_jwt(request: Request, token: str | None) -> str | None:
    return token or request.cookies.get("access_token")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    request: Request, token: str | None = Depends(oauth2_scheme)
) -> AuthContext:
    """Strict auth dependency; raises 401 when the token is missing or invalid."""
    jwt_token = _extract_jwt(request, token)
    if not jwt_token:
        raise _unauthorized("Authentication required")

    payload = decode_access_token(jwt_token)
    if payload is None:
        raise _unauthorized("Invalid authentication credentials")

    try:
        return AuthContext(user_id=int(payload["sub"]), role=UserRole(payload["role"]))
    except (TypeError, ValueError):
        raise _unauthorized("Invalid authentication credentials")
