"""Conversion of plain mappings into ordered tag descriptors."""

from __future__ import annotations

from typing import Any, List, Mapping

from .tag_model import CONTENT_KEY, HOISTED_KEYS, Tag
from .types_node import NodeKind, classify


def to_tag_sequence(mapping: Mapping[Any, Any]) -> List[Tag]:
    """One descriptor per key, in iteration order, holding the key's value."""
    return [Tag(name=key, content=value) for key, value in mapping.items()]


def _normalize_entry(key: Any, value: Any) -> Tag:
    if classify(value) is not NodeKind.MAPPING:
        return Tag(name=key, content=value)

    # Work on a copy; the caller's mapping is left untouched.
    inner = dict(value)
    tag = Tag(name=key, content=inner)
    for key_name, field_name in HOISTED_KEYS.items():
        if key_name in inner:
            setattr(tag, field_name, inner.pop(key_name))
    if CONTENT_KEY in inner:
        content = inner.pop(CONTENT_KEY)
        tag.content = [*to_tag_sequence(inner), content] if inner else content
    return tag


def normalize_mapping(mapping: Mapping[Any, Any]) -> List[Tag]:
    """Turn each key of ``mapping`` into a tag, hoisting markers of nested mappings.

    ``{"foo": {"_attrs": {"a": 1}}}`` becomes ``Tag("foo", {}, attrs={"a": 1})``.
    A nested ``_content`` next to other keys is appended after the tags built
    from those keys.
    """
    return [_normalize_entry(key, value) for key, value in mapping.items()]


__all__ = ["normalize_mapping", "to_tag_sequence"]
