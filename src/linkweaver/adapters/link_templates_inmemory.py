"""In-memory implementation of LinkTemplatesPort.

Suitable for tests and for composition roots that define templates in code.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from linkweaver.core.interfaces.link_templates import LinkTemplatesPort
from linkweaver.core.models.link_template import LinkTemplate


class InMemoryLinkTemplates(LinkTemplatesPort):
    def __init__(self, templates: Iterable[LinkTemplate] = ()) -> None:
        self._templates: Dict[str, LinkTemplate] = {}
        for template in templates:
            self.add(template)

    def add(self, template: LinkTemplate) -> None:
        if template.name in self._templates:
            raise ValueError(f"Link template already exists: {template.name}")
        self._templates[template.name] = template

    def remove(self, name: str) -> None:
        self._templates.pop(name, None)

    def get_templates(self) -> List[LinkTemplate]:
        return list(self._templates.values())

    def get_template(self, name: str) -> Optional[LinkTemplate]:
        return self._templates.get(name)

    def list_templates(self) -> List[str]:
        return list(self._templates)
