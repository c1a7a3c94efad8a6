from typing import Optional


class LinkweaverError(Exception):
    """Base exception for link construction failures.

    Attributes:
        message: Human-readable error description
        diagnostic: Technical diagnostic information for debugging
    """
    def __init__(self, message: str, diagnostic: Optional[str] = None):
        self.message = message
        self.diagnostic = diagnostic
        super().__init__(message)


class LinkConfigurationError(LinkweaverError):
    """Raised when a URL or link is built from an incomplete builder.

    Typically the builder has no URL pattern and no pattern override was
    passed to ``build``.
    """


class ResourceError(LinkweaverError):
    """Base exception for resource property storage failures."""


class DuplicatePropertyError(ResourceError):
    """Raised when a resource property name is written twice.

    Attributes:
        name: The property name that already exists
    """
    def __init__(self, name: str):
        self.name = name
        super().__init__(message=f"Duplicate property: {name}")


class LinkTemplateNotFoundError(LinkweaverError):
    """Raised when a named link template is not configured."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(message=f"Link template not found: {name}")


class LinkTemplateConfigError(LinkweaverError):
    """Raised when the link templates file cannot be read or validated.

    Attributes:
        path: Location of the templates file
    """
    def __init__(self, path: str, diagnostic: Optional[str] = None):
        self.path = path
        super().__init__(
            message=f"Invalid link templates file: {path}", diagnostic=diagnostic
        )
