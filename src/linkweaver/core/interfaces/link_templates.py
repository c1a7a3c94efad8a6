from abc import ABC, abstractmethod
from typing import List, Optional

from linkweaver.core.models.link_template import LinkTemplate

class LinkTemplatesPort(ABC):
    @abstractmethod
    def get_templates(self) -> List[LinkTemplate]:
        pass

    @abstractmethod
    def get_template(self, name: str) -> Optional[LinkTemplate]:
        pass

    @abstractmethod
    def list_templates(self) -> List[str]:
        pass
