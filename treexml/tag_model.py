"""Tag descriptor model for XML serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union

NAME_KEY = "_name"
CONTENT_KEY = "_content"
ATTRS_KEY = "_attrs"
SELF_CLOSE_KEY = "_self_close"

# Keys moved from a nested mapping onto the tag that wraps it, by Tag field.
HOISTED_KEYS = {ATTRS_KEY: "attrs", SELF_CLOSE_KEY: "self_close"}
PRIVATE_KEYS = frozenset({NAME_KEY, CONTENT_KEY, ATTRS_KEY, SELF_CLOSE_KEY})

AttributeSet = Union[Mapping[str, Any], List[Mapping[str, Any]]]


@dataclass
class Tag:
    """Explicit element: name, content, attributes and self-close override.

    ``content=None`` is the verbatim sentinel: the name is written out as-is
    and no element is produced. Leaving ``content`` out gives an empty
    element instead.
    """

    name: Any
    content: Any = field(default_factory=dict)
    attrs: AttributeSet | None = None
    self_close: bool | None = None

    @property
    def is_verbatim(self) -> bool:
        return self.content is None


def raw(text: str) -> Tag:
    """Build a descriptor whose text is emitted unescaped, without a tag wrapper."""

    return Tag(name=text, content=None)


def as_tag(node: Union[Tag, Mapping[str, Any]]) -> Tag:
    """Return ``node`` as a :class:`Tag`, reading the ``_``-prefixed keys of a mapping."""

    if isinstance(node, Tag):
        return node
    return Tag(
        name=node[NAME_KEY],
        content=node.get(CONTENT_KEY, {}),
        attrs=node.get(ATTRS_KEY),
        self_close=node.get(SELF_CLOSE_KEY),
    )


__all__ = [
    "ATTRS_KEY",
    "AttributeSet",
    "CONTENT_KEY",
    "HOISTED_KEYS",
    "NAME_KEY",
    "PRIVATE_KEYS",
    "SELF_CLOSE_KEY",
    "Tag",
    "as_tag",
    "raw",
]
