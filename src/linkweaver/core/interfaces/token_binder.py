"""Token binder protocol.

A token binder extracts token values from a domain object and binds them on
the resolver it was registered with. Binders are called in registration
order, so a later binder may overwrite a value bound by an earlier one.
"""

from typing import Any, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class TokenBinder(Protocol):
    """Extracts token bindings from an arbitrary object.

    Implementations hold a reference to the resolver they bind into and call
    its ``bind(name, value)`` for every value they extract. Failures are
    raised to the caller unchanged.
    """

    def bind(self, obj: Any) -> None:
        """Bind token values taken from obj.

        Args:
            obj: The object passed to ``resolve``/``build``, never None
        """
        ...


BinderLike = Union[TokenBinder, Callable[[Any], None]]
