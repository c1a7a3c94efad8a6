from typing import Dict, List

from pydantic import BaseModel, Field


class LinkTemplate(BaseModel):
    """Declarative definition of a link builder"""

    model_config = {"populate_by_name": True}

    name: str = Field(description="The unique identifier for this link template")
    href: str = Field(
        description=(
            "URL pattern with placeholders of the form '{token}'. "
            "When base-url is set this should be the path only, "
            "starting with a slash."
        ),
    )
    base_url: str | None = Field(
        default=None,
        alias="base-url",
        description="Prefix prepended to the resolved href, e.g. 'http://api.example.com'.",
    )
    rel: str | None = None
    title: str | None = None
    type: str | None = None
    query: List[str] = Field(
        default_factory=list,
        description=(
            "Optional query-string segments without '?' or '&'. "
            "A segment is only emitted when all of its tokens are bound."
        ),
    )
    attributes: Dict[str, str] = Field(default_factory=dict)


class LinkTemplatesConfig(BaseModel):
    """Top level of the link templates file"""

    links: List[LinkTemplate] = Field(default_factory=list)

    def template_names(self) -> List[str]:
        return [template.name for template in self.links]
