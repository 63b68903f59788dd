from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from tasktrack.core.security import MAX_PASSWORD_BYTES, password_too_long
from tasktrack.models.user import UserRole


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6)
    role: UserRole

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
        return value


# password_hash never leaves the server
class UserOut(BaseModel):
    id: int
    username: str
    email: str
    role: UserRole
    created_at: datetime
