from typing import Any, Iterable, Protocol, Tuple, runtime_checkable


@runtime_checkable
class FieldSource(Protocol):
    """An object that enumerates its own resource properties.

    Subclasses include inherited fields by extending the parent's result,
    e.g. ``[*super().resource_fields(), ("email", self.email)]``.
    """

    def resource_fields(self) -> Iterable[Tuple[str, Any]]:  # pragma: no cover - protocol
        ...
