"""Pydantic Settings model for the CI environment context."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings provided by the CI runner."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TOKEN: str | None = None

    # Repository context
    GITHUB_WORKSPACE: str | None = None
    GITHUB_REPOSITORY: str | None = None
    GITHUB_REF: str | None = None
    GITHUB_SHA: str | None = None
