from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from tasktrack.core.config import settings
from tasktrack.core.jwt import create_access_token
from tasktrack.db.session import get_session
from tasktrack.schemas.auth import AuthContext, AuthTokenModel, LoginRequest
from tasktrack.services.auth_service import authenticate

auth_router = APIRouter(prefix="/auth", tags=["auth"])

COOKIE_MAX_AGE = 60 * settings.access_token_expire_minutes


def _build_auth_response(ctx: AuthContext) -> AuthTokenModel:
    return AuthTokenModel(
        access_token=create_access_token(ctx.user_id, ctx.role.value),
        expires_in=COOKIE_MAX_AGE,
        user_id=ctx.user_id,
        role=ctx.role,
    )


@auth_router.post("/token", response_model=AuthTokenModel)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_session),
):
    """OAuth2 password flow (Swagger "Authorize" button)."""
    ctx = authenticate(db, form_data.username, form_data.password)
    return _build_auth_response(ctx)


@auth_router.post("/login", response_model=AuthTokenModel)
def login(body: LoginRequest, db: Session = Depends(get_session)):
    ctx = authenticate(db, body.username, body.password)
    return _build_auth_response(ctx)

