"""Application configuration using Pydantic Settings."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # Region
    region_name: str = Field(default="Marche", alias="REGION_NAME")

    # Storage
    data_file: str = Field(default="database/covid-marche.json", alias="DATA_FILE")

    # Security
    secret_key: str = Field(default="change-this-in-production", alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_password: str = Field(default="admin", alias="ADMIN_PASSWORD")
    # bcrypt hash, takes precedence over ADMIN_PASSWORD when set
    admin_password_hash: str = Field(default="", alias="ADMIN_PASSWORD_HASH")

    # HTTP
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Observability
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get list of allowed CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
