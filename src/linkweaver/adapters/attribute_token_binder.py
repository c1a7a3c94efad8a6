"""Token binder that reads token values from object attributes or mapping keys."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from linkweaver.core.interfaces.token_binder import TokenBinder
from linkweaver.core.managers.token_resolver import TokenResolver

_MISSING = object()


class AttributeTokenBinder(TokenBinder):
    """Bind tokens from named attributes of an object.

    ``tokens`` maps a token name to the attribute (or mapping key) holding
    its value, e.g. ``{"userId": "id"}`` binds ``{userId}`` to ``obj.id``.
    Dotted names walk nested attributes (``"owner.id"``).

    Values are converted with ``str``. A None value unbinds the token. A
    missing attribute raises ``AttributeError`` unless ``strict`` is False,
    in which case the token is left untouched.
    """

    def __init__(
        self,
        resolver: TokenResolver,
        tokens: Dict[str, str],
        strict: bool = True,
    ):
        self._resolver = resolver
        self._tokens = dict(tokens)
        self._strict = strict

    def bind(self, obj: Any) -> None:
        for token, path in self._tokens.items():
            value = self._lookup(obj, path)
            if value is _MISSING:
                continue
            self._resolver.bind(token, None if value is None else str(value))

    def _lookup(self, obj: Any, path: str) -> Any:
        current = obj
        for part in path.split("."):
            current = self._get(current, part)
            if current is _MISSING:
                if self._strict:
                    raise AttributeError(
                        f"{type(obj).__name__} has no value for '{path}'"
                    )
                return _MISSING
            if current is None:
                return None
        return current

    @staticmethod
    def _get(obj: Any, name: str) -> Optional[Any]:
        if isinstance(obj, Mapping):
            return obj.get(name, _MISSING)
        return getattr(obj, name, _MISSING)
