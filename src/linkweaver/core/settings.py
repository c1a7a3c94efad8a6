# Logging adapter for application-wide logging
from linkweaver.adapters.logging_adapter import LoggingAdapter

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from rich import print

from linkweaver.core.interfaces.logging import LoggingPort

# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place
class LinkweaverSettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore"
    }
    LINKWEAVER_LOG_LEVEL: str = "INFO"
    # Prefix for links whose template does not set a base-url
    LINKWEAVER_BASE_URL: str | None = None
    LINKWEAVER_LINK_TEMPLATES_FILE: Path | None = None
    LINKWEAVER_DEFAULT_LINK_TYPE: str | None = None

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("Linkweaver Settings:")
        print(self)

    @field_validator("LINKWEAVER_BASE_URL", mode="before")
    def strip_trailing_slash(cls, value):
        """Patterns start with '/', so drop a trailing slash from the base URL."""
        if isinstance(value, str):
            value = value.rstrip("/")
        return value or None


app_settings = LinkweaverSettings()

logger = LoggingAdapter(log_level=app_settings.LINKWEAVER_LOG_LEVEL)
