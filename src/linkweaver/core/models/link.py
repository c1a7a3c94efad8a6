from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class Link(BaseModel):
    """A built hypermedia link.

    Created once per ``LinkBuilder.build`` call and never changed afterwards.
    The relation type is held in ``rel`` only; ``attributes`` carries every
    other named value, including ``title`` and ``type``, as a read-only
    mapping.
    """

    model_config = {"frozen": True}

    href: str
    rel: Optional[str] = None
    attributes: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("attributes", mode="after")
    @classmethod
    def freeze_attributes(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @property
    def title(self) -> Optional[str]:
        return self.attributes.get("title")

    @property
    def type(self) -> Optional[str]:
        return self.attributes.get("type")

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)
