"""Build URLs from a pattern, an optional base URL and optional query segments."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from linkweaver.core.exceptions import LinkConfigurationError
from linkweaver.core.managers.token_resolver import TokenResolver
from linkweaver.core.utils.pattern_format import has_unresolved_tokens

logger = logging.getLogger(__name__)


class UrlBuilder:
    """Mutable URL template.

    The URL pattern may be the entire URL or only the path. If a base URL is
    set, it is prepended to the resolved pattern as-is; duplicate or missing
    slashes are not corrected.

    Query segments (e.g. ``'limit={limit}'``) are resolved independently and
    only emitted when none of their tokens remain unbound.
    """

    def __init__(self, url_pattern: Optional[str] = None, base_url: Optional[str] = None):
        self._url_pattern = url_pattern
        self._base_url = base_url
        self._queries: List[str] = []

    @property
    def url_pattern(self) -> Optional[str]:
        return self._url_pattern

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    @property
    def queries(self) -> Tuple[str, ...]:
        return tuple(self._queries)

    def with_url_pattern(self, pattern: Optional[str]) -> UrlBuilder:
        self._url_pattern = pattern
        return self

    def with_base_url(self, url: Optional[str]) -> UrlBuilder:
        self._base_url = url
        return self

    def with_query(self, query: str) -> UrlBuilder:
        """Add an optional query-string segment, without a leading '?' or '&'."""
        self._queries.append(query)
        return self

    def clear_queries(self) -> UrlBuilder:
        self._queries.clear()
        return self

    def build(
        self,
        resolver: Optional[TokenResolver] = None,
        obj: Any = None,
        *,
        url_pattern: Optional[str] = None,
    ) -> str:
        """Build a URL string, substituting tokens from resolver.

        Args:
            resolver: Token bindings to substitute; an empty resolver is used if None
            obj: If not None, the resolver's binders are applied to it once
                before the path and query segments are resolved
            url_pattern: Pattern to use for this call instead of the configured one

        Raises:
            LinkConfigurationError: if no URL pattern is available
        """
        pattern = url_pattern if url_pattern is not None else self._url_pattern
        if pattern is None:
            raise LinkConfigurationError(
                "Cannot build a URL without a URL pattern",
                diagnostic=f"base_url={self._base_url!r} queries={self._queries!r}",
            )

        if resolver is None:
            resolver = TokenResolver()
        resolver.apply_binders(obj)

        url = (self._base_url or "") + resolver.resolve(pattern)
        query_string = self._build_query_string(resolver)
        if query_string:
            url = f"{url}?{query_string}"

        logger.debug("Built URL %s from pattern %s", url, pattern)
        return url

    def _build_query_string(self, resolver: TokenResolver) -> str:
        included = []
        for segment in resolver.resolve_all(self._queries):
            if has_unresolved_tokens(segment):
                logger.debug("Dropping unresolved query segment %s", segment)
                continue
            included.append(segment)
        return "&".join(included)

    def clone(self) -> UrlBuilder:
        """Return a copy that shares no mutable state with this builder."""
        that = UrlBuilder(self._url_pattern, self._base_url)
        that._queries = list(self._queries)
        return that

    __copy__ = clone

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"url_pattern={self._url_pattern!r}, queries={self._queries!r})"
        )
