"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the profile store.
        dep_server_url: Base URL of the DEP API. Device fetch fails when unset.
        dep_session_token: Session token sent as X-ADM-Auth-Session.
        dep_fetch_limit: Page size requested from the DEP API.
        dep_timeout_seconds: Timeout for each DEP HTTP call.
        dep_max_pages: Most pages followed in a single device fetch.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "MDM Management"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./mdm_management.db"

    dep_server_url: Optional[str] = None
    dep_session_token: Optional[str] = None
    dep_fetch_limit: int = 100
    dep_timeout_seconds: float = 30.0
    dep_max_pages: int = 1000


settings = Settings()
