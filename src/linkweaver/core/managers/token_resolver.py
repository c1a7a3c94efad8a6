"""Token bindings and binder callbacks used to resolve URL patterns.

A ``TokenResolver`` keeps one value per token name and an ordered list of
token binders. Resolving a pattern substitutes the current bindings into it;
resolving with an object first lets every binder extract further values
from that object.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from linkweaver.core.interfaces.token_binder import BinderLike
from linkweaver.core.utils.pattern_format import format_pattern

logger = logging.getLogger(__name__)


class TokenResolver:
    def __init__(self, bindings: Optional[Dict[str, str]] = None):
        self._bindings: Dict[str, str] = {}
        self._binders: List[BinderLike] = []
        for name, value in (bindings or {}).items():
            self.bind(name, value)

    def bind(self, name: str, value: Any) -> TokenResolver:
        """Bind a token name (without braces) to a value.

        Values are stored as strings, so ``bind("userId", 42)`` substitutes
        ``"42"``. A None value removes any existing binding for the name.
        """
        if value is None:
            self._bindings.pop(name, None)
        else:
            self._bindings[name] = str(value)
        return self

    def remove(self, name: str) -> None:
        self._bindings.pop(name, None)

    def clear(self) -> None:
        """Remove all bindings. Registered binders are kept."""
        self._bindings.clear()

    def add_binder(self, binder: Optional[BinderLike]) -> TokenResolver:
        """Register a binder called by the object-taking resolve methods.

        Accepts an object with a ``bind(obj)`` method or a plain callable.
        """
        if binder is None:
            return self
        self._binders.append(binder)
        return self

    def reset(self) -> None:
        """Remove all bindings and binders, as if newly created."""
        self.clear()
        self._binders.clear()

    def apply_binders(self, obj: Any) -> None:
        """Call every binder with obj, in registration order.

        Nothing happens for a None object. A binder that raises stops the
        remaining binders from running and the exception reaches the caller.
        """
        if obj is None:
            return
        for binder in self._binders:
            bind = getattr(binder, "bind", binder)
            bind(obj)
        logger.debug(
            "Applied %d token binder(s) to %s, bindings=%s",
            len(self._binders), type(obj).__name__, self._bindings,
        )

    def resolve(self, pattern: str, obj: Any = None) -> str:
        """Substitute bound tokens in pattern.

        Args:
            pattern: A string optionally containing '{token}' placeholders
            obj: If not None, binders are applied to it before substituting

        Returns:
            The pattern with bound tokens replaced. Unbound tokens are left
            in place.
        """
        self.apply_binders(obj)
        return format_pattern(pattern, self._bindings)

    def resolve_all(self, patterns: Iterable[str], obj: Any = None) -> List[str]:
        """Resolve several patterns against the same bindings.

        Binders run once for obj, not once per pattern. The result has the
        same order and length as patterns.
        """
        self.apply_binders(obj)
        return [format_pattern(pattern, self._bindings) for pattern in patterns]

    @property
    def bindings(self) -> Dict[str, str]:
        return dict(self._bindings)

    @property
    def binders(self) -> List[BinderLike]:
        return list(self._binders)

    def get(self, name: str) -> Optional[str]:
        return self._bindings.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name}={value}" for name, value in self._bindings.items())
        return f"{type(self).__name__}{{{pairs}}}"
