"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the price checker.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Products and store templates
    CONFIG_PATH: str = "config.json"

    # HTTP parameters
    USER_AGENT: Optional[str] = None
    REQUEST_TIMEOUT: float = 15.0
    HTML_PARSER: str = "html.parser"

    # Desktop notifications
    NOTIFICATION_TITLE: str = "Price Alert"
    NOTIFICATION_APP_NAME: str = "price-alert"
    NOTIFICATION_TIMEOUT: int = 10

    # When true, a page without a recognizable price is skipped instead of
    # being compared as 0.00.
    SKIP_UNMATCHED_PRICES: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
