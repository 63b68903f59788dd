from pydantic import BaseModel

from tasktrack.models.user import UserRole


class LoginRequest(BaseModel):
    username: str
    password: str


class AuthContext(BaseModel):
    """Authenticated caller identity attached to every request after login."""
    user_id: int
    role: UserRole


class AuthTokenModel(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user_id: int
    role: UserRole
