"""Recursive renderer turning node trees into XML text."""

from __future__ import annotations

import inspect
from typing import Any, Callable, List, Mapping, Optional, Union

from .attributes import format_attributes
from .filters import filter_text
from .models import RenderConfig
from .normalize import normalize_mapping
from .tag_model import PRIVATE_KEYS, Tag, as_tag
from .types_node import Node, NodeKind, classify, is_unit

DEFAULT_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'


def indent_string(indent: Optional[str], depth: int = 0) -> str:
    return (indent or "") * depth


def header_string(config: RenderConfig) -> str:
    """Return the XML declaration requested by ``config``, or ``""``."""

    if not config.header:
        return ""
    header = DEFAULT_HEADER if isinstance(config.header, bool) else config.header
    if config.pretty:
        header += "\n"
    return header


def _is_output_start(node: Any, config: RenderConfig) -> bool:
    # Every depth-0 tag counts, so depth-0 siblings are never separated by
    # line breaks; only content nested inside a tag is.
    return config.depth == 0 and (is_unit(node) or config.is_first_item)


def _invoke(func: Callable[..., Any], config: RenderConfig) -> Any:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return func(config)
    if not signature.parameters:
        return func()
    return func(config)


def _render_siblings(nodes: List[Any], config: RenderConfig) -> str:
    count = len(nodes)
    return "".join(
        render(node, config.sibling(index, count)) for index, node in enumerate(nodes)
    )


def _render_tag(tag: Tag, config: RenderConfig, output_start: bool) -> str:
    if tag.is_verbatim:
        return str(tag.name)
    if isinstance(tag.name, str) and tag.name in PRIVATE_KEYS:
        return ""

    child = render(tag.content, config.nested())
    child_is_simple = "<" not in child
    is_empty = child == ""
    if isinstance(tag.self_close, bool):
        self_closing = is_empty and tag.self_close
    else:
        self_closing = is_empty

    indent = indent_string(config.indent, config.depth)
    lead = "" if not config.pretty or output_start else f"\n{indent}"
    attributes = format_attributes(tag.attrs, config.attribute_filter)
    if self_closing:
        return f"{lead}<{tag.name}{attributes}/>"

    close_lead = f"\n{indent}" if config.pretty and not child_is_simple else ""
    return f"{lead}<{tag.name}{attributes}>{child}{close_lead}</{tag.name}>"


def render(node: Node, config: Optional[RenderConfig] = None) -> str:
    """Render ``node`` without the XML declaration.

    Mappings and sequences render their members at the current depth; only
    tag content moves one level deeper. Callables are called on every pass
    with the current config and their result is rendered in their place.
    """

    config = config or RenderConfig()
    kind = classify(node)
    if kind is NodeKind.TAG:
        return _render_tag(as_tag(node), config, _is_output_start(node, config))
    if kind is NodeKind.MAPPING:
        return _render_siblings(normalize_mapping(node), config)
    if kind is NodeKind.SEQUENCE:
        return _render_siblings(list(node), config)
    if kind is NodeKind.CALLABLE:
        return render(_invoke(node, config), config)
    return filter_text(node, config.text_filter)


def to_xml(
    node: Node,
    config: Union[RenderConfig, Mapping[str, Any], None] = None,
    **options: Any,
) -> str:
    """Render ``node`` into an XML document string.

    ``config`` may be a :class:`RenderConfig` or a mapping of options;
    keyword ``options`` override it. The declaration, when requested, is
    written once at the start of a non-empty output.
    """

    resolved = RenderConfig.from_options(config, **options)
    body = render(node, resolved)
    if not body:
        return ""
    return header_string(resolved) + body


__all__ = ["DEFAULT_HEADER", "header_string", "indent_string", "render", "to_xml"]
