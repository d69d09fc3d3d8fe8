"""Configuration management for validstr."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    service_name: str = Field(default="validstr", description="Service name reported to Logfire")
    environment: str = Field(default="development", description="Deployment environment name")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")

    @property
    def is_production(self) -> bool:
        """Check if running in the production environment."""
        return self.environment.lower() == "production"


# Application Constants
class Constants:
    """Application-wide constants."""

    # Builtin namespace
    BUILTIN_NAME: str = "validatestring"

    # Calling convention of the validatestring builtin
    MIN_NARGIN: int = 2
    MAX_NARGIN: int = 5
    MAX_CHARACTER_INPUTS: int = 2  # funcname, varname
    FIRST_OPTIONAL_ARG_INDEX: int = 2

    # Error message rendering
    ENTRY_SEPARATOR: str = ", "

    # HTTP Status Codes
    HTTP_OK: int = 200
    HTTP_UNPROCESSABLE_ENTITY: int = 422


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
