"""Node type definitions and classification."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, List, TypedDict, Union

from .tag_model import NAME_KEY, AttributeSet, Tag


class TagDict(TypedDict, total=False):
    _name: str
    _content: Any
    _attrs: AttributeSet
    _self_close: bool


Scalar = Union[str, int, float, bool, dt.date, None]
Node = Union[Scalar, Tag, TagDict, Mapping[str, Any], List[Any], Callable[..., Any]]


class NodeKind(str, Enum):
    SEQUENCE = "sequence"
    TAG = "tag"
    DATE = "date"
    ABSENT = "absent"
    CALLABLE = "callable"
    MAPPING = "mapping"
    SCALAR = "scalar"


# Kinds that render as one self-contained piece of output.
UNIT_KINDS = frozenset({NodeKind.SCALAR, NodeKind.DATE, NodeKind.TAG})


def classify(value: Any) -> NodeKind:
    """Return the kind of ``value``; order of the checks is significant."""
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, Tag):
        return NodeKind.TAG
    if isinstance(value, Mapping) and value.get(NAME_KEY):
        return NodeKind.TAG
    if isinstance(value, dt.date):
        return NodeKind.DATE
    if value is None:
        return NodeKind.ABSENT
    if callable(value):
        return NodeKind.CALLABLE
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    return NodeKind.SCALAR


def is_unit(value: Any) -> bool:
    return classify(value) in UNIT_KINDS


__all__ = ["Node", "NodeKind", "Scalar", "TagDict", "UNIT_KINDS", "classify", "is_unit"]
