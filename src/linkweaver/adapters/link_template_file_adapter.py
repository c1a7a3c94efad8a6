import threading
from typing import List, Optional

import yaml
from pydantic import ValidationError

from linkweaver.core.exceptions import LinkTemplateConfigError
from linkweaver.core.interfaces.link_templates import LinkTemplatesPort
from linkweaver.core.models.link_template import LinkTemplate, LinkTemplatesConfig
from linkweaver.core.settings import logger


class LinkTemplateFileAdapter(LinkTemplatesPort):
    """Link templates read from a YAML file.

    Expected layout::

        links:
          - name: user
            rel: self
            href: /users/{userId}
            query:
              - expand={expand}
    """

    def __init__(self, config_path: str):
        self._config_path = str(config_path)
        self._lock = threading.Lock()
        self._templates: LinkTemplatesConfig = LinkTemplatesConfig(links=[])

        self.load_templates()

    def _atomic_update(self, new_templates: LinkTemplatesConfig):
        """Replace the template set under the lock."""
        names = new_templates.template_names()
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise LinkTemplateConfigError(
                self._config_path, diagnostic=f"duplicate template names: {duplicates}"
            )
        with self._lock:
            self._templates = LinkTemplatesConfig(
                links=[template.model_copy(deep=True) for template in new_templates.links]
            )

    def load_templates(self):
        logger.info("(Re)Loading link templates from %s", self._config_path)

        try:
            with open(self._config_path, encoding="UTF-8") as file:
                content = yaml.safe_load(file)
        except FileNotFoundError as e:
            logger.error("Link templates file not found: %s", self._config_path)
            raise LinkTemplateConfigError(self._config_path, diagnostic=str(e)) from e
        except yaml.YAMLError as e:
            logger.error("Failed to parse link templates file: %s", e)
            raise LinkTemplateConfigError(self._config_path, diagnostic=str(e)) from e

        try:
            validated = LinkTemplatesConfig(**(content or {}))
        except (TypeError, ValidationError) as e:
            logger.error("Validation error in link templates file: %s", e)
            raise LinkTemplateConfigError(self._config_path, diagnostic=str(e)) from e

        self._atomic_update(validated)
        logger.info("Link templates (re)loaded successfully")

    def get_templates(self) -> List[LinkTemplate]:
        with self._lock:
            return list(self._templates.links)

    def get_template(self, name: str) -> Optional[LinkTemplate]:
        with self._lock:
            for template in self._templates.links:
                if template.name == name:
                    return template
            return None

    def list_templates(self) -> List[str]:
        with self._lock:
            return self._templates.template_names()
