"""Resource representation that built links are attached to.

A resource is a bag of named properties plus a list of links. Property
names are unique: a second write to the same name is rejected.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from linkweaver.core.exceptions import DuplicatePropertyError
from linkweaver.core.interfaces.field_source import FieldSource
from linkweaver.core.models.link import Link


class Resource:
    def __init__(self) -> None:
        self._properties: Dict[str, Any] = {}
        self._links: List[Link] = []

    def with_property(self, name: str, value: Any) -> Resource:
        if name in self._properties:
            raise DuplicatePropertyError(name)
        self._properties[name] = value
        return self

    def with_fields(self, source: FieldSource) -> Resource:
        """Copy every field the source enumerates into this resource.

        Raises:
            DuplicatePropertyError: if a field name is already present,
                including names enumerated twice by the source itself.
        """
        for name, value in source.resource_fields():
            self.with_property(name, value)
        return self

    def with_link(self, link: Link) -> Resource:
        self._links.append(link)
        return self

    def with_link_values(
        self,
        rel: str,
        href: str,
        title: Optional[str] = None,
        type: Optional[str] = None,
    ) -> Resource:
        attributes = {}
        if title is not None:
            attributes["title"] = title
        if type is not None:
            attributes["type"] = type
        return self.with_link(Link(rel=rel, href=href, attributes=attributes))

    @property
    def links(self) -> List[Link]:
        return list(self._links)

    def links_by_rel(self, rel: str) -> List[Link]:
        return [link for link in self._links if link.rel == rel]

    @property
    def properties(self) -> Dict[str, Any]:
        return dict(self._properties)

    def get(self, name: str, default: Any = None) -> Any:
        return self._properties.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"Resource(properties={self._properties!r}, links={len(self._links)})"
