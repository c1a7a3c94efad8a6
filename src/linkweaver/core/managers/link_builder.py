"""Build Link instances from a URL pattern and a set of link attributes.

``LinkBuilder`` delegates the href to a ``UrlBuilder`` and adds attributes
such as 'rel', 'title' and 'type'. The builder is a reusable template; every
``build`` call returns a new, independent ``Link``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from linkweaver.core.config import LinkBuilderConfig
from linkweaver.core.managers.token_resolver import TokenResolver
from linkweaver.core.managers.url_builder import UrlBuilder
from linkweaver.core.models.link import Link
from linkweaver.core.models.link_template import LinkTemplate

logger = logging.getLogger(__name__)

REL_TYPE = "rel"
TITLE = "title"
TYPE = "type"

# matched case-insensitively and stored lower-cased
RESERVED_ATTRIBUTES = (REL_TYPE, TITLE, TYPE)


def _attribute_key(name: str) -> str:
    lowered = name.lower()
    return lowered if lowered in RESERVED_ATTRIBUTES else name


class LinkBuilder:
    def __init__(self, url_pattern: Optional[str] = None, base_url: Optional[str] = None):
        """Create a builder for the given URL pattern.

        The pattern may be the entire URL (``'http://www.example.com/api/users/{userId}'``)
        or, together with a base URL, just the path (``'/users/{userId}'``).
        Without a pattern, ``build`` must be given a ``url_pattern`` override.
        """
        self._url_builder = UrlBuilder(url_pattern, base_url)
        self._attributes: Dict[str, str] = {}

    @classmethod
    def from_template(
        cls, template: LinkTemplate, config: Optional[LinkBuilderConfig] = None
    ) -> LinkBuilder:
        config = config or LinkBuilderConfig()
        builder = cls(template.href, template.base_url or config.base_url)
        for query in template.query:
            builder.with_query(query)
        for name, value in template.attributes.items():
            builder.set(name, value)
        builder.with_rel(template.rel or builder.rel)
        builder.with_title(template.title or builder.title)
        builder.with_type(template.type or builder.type or config.default_type)
        return builder

    # URL configuration

    @property
    def url_pattern(self) -> Optional[str]:
        return self._url_builder.url_pattern

    @property
    def base_url(self) -> Optional[str]:
        return self._url_builder.base_url

    @property
    def queries(self) -> Tuple[str, ...]:
        return self._url_builder.queries

    def with_url_pattern(self, pattern: Optional[str]) -> LinkBuilder:
        self._url_builder.with_url_pattern(pattern)
        return self

    def with_base_url(self, url: Optional[str]) -> LinkBuilder:
        """Set the prefix prepended to the URL pattern, e.g. 'http://www.example.com:8080'."""
        self._url_builder.with_base_url(url)
        return self

    def with_query(self, query: str) -> LinkBuilder:
        """Add an optional query-string segment.

        The segment is included in built hrefs only when all of its tokens
        are bound. Do not include '?' or '&'.
        """
        self._url_builder.with_query(query)
        return self

    def clear_queries(self) -> LinkBuilder:
        self._url_builder.clear_queries()
        return self

    # Attributes

    @property
    def rel(self) -> Optional[str]:
        return self.get(REL_TYPE)

    @property
    def title(self) -> Optional[str]:
        return self.get(TITLE)

    @property
    def type(self) -> Optional[str]:
        return self.get(TYPE)

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def with_rel(self, rel: Optional[str]) -> LinkBuilder:
        return self.set(REL_TYPE, rel)

    def with_title(self, title: Optional[str]) -> LinkBuilder:
        return self.set(TITLE, title)

    def with_type(self, type: Optional[str]) -> LinkBuilder:
        return self.set(TYPE, type)

    def get(self, name: str) -> Optional[str]:
        return self._attributes.get(_attribute_key(name))

    def set(self, name: str, value: Optional[str]) -> LinkBuilder:
        """Set a named attribute, overwriting any earlier value.

        A None value removes the attribute.
        """
        key = _attribute_key(name)
        if value is None:
            self._attributes.pop(key, None)
        else:
            self._attributes[key] = value
        return self

    def clear_attributes(self) -> LinkBuilder:
        """Remove all attributes. The URL pattern, base URL and queries are kept."""
        self._attributes.clear()
        return self

    # Building

    def build(
        self,
        resolver: Optional[TokenResolver] = None,
        obj: Any = None,
        *,
        url_pattern: Optional[str] = None,
    ) -> Link:
        """Build a new Link.

        Args:
            resolver: Token bindings for the href; an empty resolver is used if None
            obj: If not None, the resolver's binders are applied to it first
            url_pattern: Pattern to use for this call instead of the configured one

        Raises:
            LinkConfigurationError: if no URL pattern is available
        """
        href = self._url_builder.build(resolver, obj, url_pattern=url_pattern)
        attributes = {
            name: value
            for name, value in self._attributes.items()
            if name != REL_TYPE
        }
        link = Link(rel=self._attributes.get(REL_TYPE), href=href, attributes=attributes)
        logger.debug("Built link rel=%s href=%s", link.rel, link.href)
        return link

    def clone(self) -> LinkBuilder:
        """Return a copy that shares no mutable state with this builder."""
        that = LinkBuilder()
        that._url_builder = self._url_builder.clone()
        that._attributes = dict(self._attributes)
        return that

    __copy__ = clone

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name}={value}" for name, value in self._attributes.items())
        return f"{type(self).__name__}{{{pairs}}}"
