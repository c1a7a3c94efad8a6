# linkweaver/core/managers/link_manager.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from linkweaver.core.config import LinkBuilderConfig
from linkweaver.core.exceptions import LinkTemplateNotFoundError
from linkweaver.core.interfaces.link_templates import LinkTemplatesPort
from linkweaver.core.managers.link_builder import LinkBuilder
from linkweaver.core.managers.token_resolver import TokenResolver
from linkweaver.core.models.link import Link
from linkweaver.core.models.resource import Resource

logger = logging.getLogger(__name__)


class LinkManager:
    """Builds links from named templates.

    A LinkBuilder is created per template on first use and cached; callers
    always receive a clone, so configuring a returned builder never changes
    the cached one.
    """

    def __init__(
        self,
        templates: LinkTemplatesPort,
        config: LinkBuilderConfig | None = None,
    ) -> None:
        self.templates = templates
        self.config = config or LinkBuilderConfig()
        self._builders: Dict[str, LinkBuilder] = {}

    def builder(self, name: str) -> LinkBuilder:
        """Return an independent LinkBuilder for the named template.

        Raises:
            LinkTemplateNotFoundError: if no template has that name
        """
        cached = self._builders.get(name)
        if cached is None:
            template = self.templates.get_template(name)
            if template is None:
                raise LinkTemplateNotFoundError(name)
            cached = LinkBuilder.from_template(template, self.config)
            self._builders[name] = cached
            logger.debug("Created link builder for template %s: %r", name, cached)
        return cached.clone()

    def build_link(self, name: str, resolver: TokenResolver, obj: Any = None) -> Link:
        return self.builder(name).build(resolver, obj)

    def build_links(
        self,
        resolver: TokenResolver,
        obj: Any = None,
        names: Optional[Iterable[str]] = None,
    ) -> List[Link]:
        """Build one link per template, in template order or in the order of names.

        Binders are applied to obj once, before any link is built, so every
        link sees the same bindings.
        """
        names = list(names) if names is not None else self.templates.list_templates()
        builders = [self.builder(name) for name in names]
        resolver.apply_binders(obj)
        return [builder.build(resolver) for builder in builders]

    def attach_links(
        self,
        resource: Resource,
        resolver: TokenResolver,
        obj: Any = None,
        names: Optional[Iterable[str]] = None,
    ) -> Resource:
        for link in self.build_links(resolver, obj, names):
            resource.with_link(link)
        return resource

    def invalidate(self) -> None:
        """Drop cached builders, e.g. after the templates were reloaded."""
        self._builders.clear()
