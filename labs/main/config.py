"""
Runtime settings read from the environment and an optional `.env` file.

Each group has its own prefix (`DB_`, `API_`, `JWT_`, `LOG_`, `ROOT_`); nested
overrides such as `API__PORT` also work through `AppSettings`.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from labs.shared import EnumEnvironment, EnumLogLevel


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/labs",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="labs", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class APISettings(BaseSettings):
    """HTTP server and OpenAPI metadata."""

    title: str = Field(default="Labs HR API", description="API title")
    description: str = Field(
        default="Multi-tenant human resources and recruitment API",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(
        default=8080,
        description="Port to bind the server",
        validation_alias=AliasChoices("API_PORT", "PORT"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"], description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class AuthSettings(BaseSettings):
    """Access token and password hashing settings."""

    secret: str = Field(
        default="labs-development-secret-change-me-in-production",
        description="Secret used to sign access tokens",
    )
    duration: int = Field(
        default=24, ge=1, description="Access token lifetime in hours"
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt cost factor",
        validation_alias=AliasChoices("JWT_BCRYPT_ROUNDS", "BCRYPT_ROUNDS"),
    )

    model_config = SettingsConfigDict(
        env_prefix="JWT_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class RootSettings(BaseSettings):
    """Root account seeded by ``--root``, as comma separated values."""

    company: Optional[str] = Field(default=None, description="name")
    user: Optional[str] = Field(
        default=None, description="first,last,email,password,country,status"
    )
    role: Optional[str] = Field(default=None, description="name")

    model_config = SettingsConfigDict(
        env_prefix="ROOT_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: APISettings = Field(default_factory=APISettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    root: RootSettings = Field(default_factory=RootSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """Fresh settings on every call; tests patch this to inject their own."""
    return AppSettings()
