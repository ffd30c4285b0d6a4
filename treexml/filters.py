"""Substitution filters for text content and attribute values."""

from __future__ import annotations

import datetime as dt
import re
from functools import lru_cache
from typing import Any, Mapping, Optional, Tuple

XML_TEXT_FILTER = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

XML_ATTRIBUTE_FILTER = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


class FilterPatternError(ValueError):
    """Raised when the keys of a filter map do not compile into a pattern."""


def stringify(value: Any) -> str:
    """Convert a scalar to the text written into the document."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    return str(value)


@lru_cache(maxsize=128)
def _compile(keys: Tuple[str, ...]) -> re.Pattern[str]:
    joined = "|".join(keys)
    try:
        return re.compile(f"({joined})")
    except re.error as exc:
        raise FilterPatternError(f"Invalid filter pattern {joined!r}: {exc}") from exc


def compile_filter(filter_map: Mapping[str, Any]) -> re.Pattern[str]:
    """Compile the alternation pattern matching any key of ``filter_map``.

    Keys are joined unescaped, so regex metacharacters keep their regex
    meaning: ``{".": "x"}`` matches every character, and ``{"(": ""}`` fails
    with :class:`FilterPatternError`. Pass keys through :func:`re.escape`
    when a literal match is wanted.
    """
    return _compile(tuple(str(key) for key in filter_map))


def filter_text(value: Any, filter_map: Optional[Mapping[str, Any]] = None) -> str:
    """Stringify ``value`` and replace every filter match.

    A match without a (truthy) replacement is removed from the text.
    """
    text = stringify(value)
    if not filter_map:
        return text

    def _replace(match: re.Match[str]) -> str:
        replacement = filter_map.get(match.group(1))
        return str(replacement) if replacement else ""

    return compile_filter(filter_map).sub(_replace, text)


__all__ = [
    "FilterPatternError",
    "XML_ATTRIBUTE_FILTER",
    "XML_TEXT_FILTER",
    "compile_filter",
    "filter_text",
    "stringify",
]
