"""Placeholder substitution for URL patterns.

Placeholders are delimited by curly braces, e.g. ``/users/{userId}``. A
placeholder name is any run of characters other than braces; an unbalanced
brace is ordinary text.
"""
import re
from typing import List, Mapping

TOKEN_PATTERN = re.compile(r"\{([^{}]+)\}")


def format_pattern(pattern: str, bindings: Mapping[str, str]) -> str:
    """Replace every bound ``{name}`` in pattern with its value.

    Unbound placeholders are kept verbatim, braces included. Substituted
    values are never scanned again for placeholders.
    """
    if not pattern or not bindings:
        return pattern

    def _substitute(match: re.Match) -> str:
        value = bindings.get(match.group(1))
        return match.group(0) if value is None else value

    return TOKEN_PATTERN.sub(_substitute, pattern)


def find_tokens(pattern: str) -> List[str]:
    """Return placeholder names in order of appearance."""
    if not pattern:
        return []
    return TOKEN_PATTERN.findall(pattern)


def has_unresolved_tokens(text: str) -> bool:
    return bool(text) and TOKEN_PATTERN.search(text) is not None
