"""Render nested Python data into XML text."""

from .attributes import attribute_pairs, format_attributes
from .filters import (
    XML_ATTRIBUTE_FILTER,
    XML_TEXT_FILTER,
    FilterPatternError,
    compile_filter,
    filter_text,
)
from .models import RenderConfig
from .normalize import normalize_mapping, to_tag_sequence
from .render import DEFAULT_HEADER, header_string, indent_string, render, to_xml
from .tag_model import PRIVATE_KEYS, Tag, as_tag, raw
from .types_node import NodeKind, classify, is_unit

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_HEADER",
    "FilterPatternError",
    "NodeKind",
    "PRIVATE_KEYS",
    "RenderConfig",
    "Tag",
    "XML_ATTRIBUTE_FILTER",
    "XML_TEXT_FILTER",
    "as_tag",
    "attribute_pairs",
    "classify",
    "compile_filter",
    "filter_text",
    "format_attributes",
    "header_string",
    "indent_string",
    "is_unit",
    "normalize_mapping",
    "raw",
    "render",
    "to_tag_sequence",
    "to_xml",
]
