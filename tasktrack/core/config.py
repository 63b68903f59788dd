# tasktrack/core/config.py
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = Field("local", alias="APP_ENV")
    app_version: str = Field("0.1.0", alias="APP_VERSION")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # JWT access tokens
    jwt_secret_key: str = Field("tasktrack-secret-key", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(120, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Password hashing cost
    bcrypt_rounds: int = Field(12, alias="BCRYPT_ROUNDS")

    cors_allow_origins: str = Field(
        "http://localhost:3000,http://localhost:5173", alias="CORS_ALLOW_ORIGINS"
    )

    # First admin account; users are never self-registered
    bootstrap_admin_username: Optional[str] = Field(None, alias="BOOTSTRAP_ADMIN_USERNAME")
    bootstrap_admin_email: Optional[str] = Field(None, alias="BOOTSTRAP_ADMIN_EMAIL")
    bootstrap_admin_password: Optional[str] = Field(None, alias="BOOTSTRAP_ADMIN_PASSWORD")

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
