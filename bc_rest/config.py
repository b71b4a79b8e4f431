"""Configuration management for the BigCommerce REST client."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Allow extra fields in .env file (ignore them)
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Store credentials
    bigcommerce_store_hash: str = os.getenv("BIGCOMMERCE_STORE_HASH", "")
    bigcommerce_access_token: str = os.getenv("BIGCOMMERCE_ACCESS_TOKEN", "")
    bigcommerce_api_base_url: str = os.getenv(
        "BIGCOMMERCE_API_BASE_URL", "https://api.bigcommerce.com"
    )

    # Pagination retry budget (consecutive failed page fetches)
    bigcommerce_max_retries: int = int(os.getenv("BIGCOMMERCE_MAX_RETRIES", "3"))

    # Transport timeouts
    bigcommerce_timeout_seconds: float = float(
        os.getenv("BIGCOMMERCE_TIMEOUT_SECONDS", "30")
    )
    bigcommerce_connect_timeout_seconds: float = float(
        os.getenv("BIGCOMMERCE_CONNECT_TIMEOUT_SECONDS", "10")
    )

    # Logging Configuration
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the client's format."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=LOG_FORMAT,
    )
