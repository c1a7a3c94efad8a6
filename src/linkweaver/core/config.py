"""Configuration models for link construction.

This module provides Pydantic-based configuration classes that consolidate
defaults applied when link builders are created from templates, enabling
dependency injection and testability.
"""

from typing import Optional
from pydantic import BaseModel, Field


class LinkBuilderConfig(BaseModel):
    """Defaults for LinkBuilder instances created from templates.

    Attributes:
        base_url: Prefix used when a template does not set its own base URL
        default_type: Media type used when a template does not set 'type'
    """

    base_url: Optional[str] = Field(
        default=None,
        description="URL prefix for templates without a base-url, e.g. 'http://api.example.com'"
    )

    default_type: Optional[str] = Field(
        default=None,
        description="Value of the 'type' attribute for templates that do not set one"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @classmethod
    def from_app_settings(cls, settings) -> "LinkBuilderConfig":
        """Factory method to construct config from LinkweaverSettings instance.

        Args:
            settings: LinkweaverSettings instance from core.settings

        Returns:
            LinkBuilderConfig with values from app settings
        """
        return cls(
            base_url=settings.LINKWEAVER_BASE_URL,
            default_type=settings.LINKWEAVER_DEFAULT_LINK_TYPE,
        )
