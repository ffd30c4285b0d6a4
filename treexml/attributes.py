"""Attribute rendering for tag descriptors."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional, Tuple

from .filters import filter_text
from .tag_model import AttributeSet


def attribute_pairs(attrs: Optional[AttributeSet]) -> Iterator[Tuple[str, Any]]:
    """Yield ``(key, value)`` pairs from a mapping or a list of single-key mappings."""

    if not attrs:
        return
    if isinstance(attrs, Mapping):
        yield from attrs.items()
        return
    # List form keeps duplicates and the caller's ordering.
    for attr in attrs:
        yield from attr.items()


def _format_pair(key: str, value: Any, filter_map: Optional[Mapping[str, Any]]) -> str:
    if value is True:
        return str(key)
    return f'{key}="{filter_text(value, filter_map)}"'


def format_attributes(
    attrs: Optional[AttributeSet], filter_map: Optional[Mapping[str, Any]] = None
) -> str:
    """Render attributes as ``' k1="v1" k2="v2"'``, or ``""`` when there are none.

    Boolean ``True`` renders as a bare key. Every other value is passed
    through ``filter_map`` before quoting.
    """

    parts = [_format_pair(key, value, filter_map) for key, value in attribute_pairs(attrs)]
    if not parts:
        return ""
    return " " + " ".join(parts)


__all__ = ["attribute_pairs", "format_attributes"]
