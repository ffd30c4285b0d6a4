"""Command-line interface for treexml."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml
from bs4 import BeautifulSoup
from pydantic import ValidationError

from .filters import XML_ATTRIBUTE_FILTER, XML_TEXT_FILTER
from .io_utils import read_config, read_node, warn, write_text
from .models import RenderConfig
from .render import to_xml


def _load_node(source: str) -> Any:
    if source != "-" and not Path(source).exists():
        raise SystemExit(f"Input file not found: {source}")
    try:
        return read_node(source)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid input file {source}: {exc}") from exc


def _parse_indent(value: str) -> str:
    """Accept a space count (``2``) or a literal unit, with ``\\t`` meaning a tab."""
    if value.isdigit():
        return " " * int(value)
    return value.replace("\\t", "\t")


def _build_config(args: argparse.Namespace) -> RenderConfig:
    options: Dict[str, Any] = {}
    try:
        if args.config:
            options = RenderConfig.model_validate(read_config(args.config)).model_dump()
        if args.indent is not None:
            options["indent"] = _parse_indent(args.indent)
        if args.header_text:
            options["header"] = args.header_text
        elif args.header:
            options["header"] = True
        if args.escape:
            # Filters from the config file take precedence over the presets.
            if not options.get("text_filter"):
                options["text_filter"] = XML_TEXT_FILTER
            if not options.get("attribute_filter"):
                options["attribute_filter"] = XML_ATTRIBUTE_FILTER
        return RenderConfig.model_validate(options)
    except (OSError, ValueError, ValidationError) as exc:
        raise SystemExit(f"Invalid render config: {exc}") from exc


def _render(args: argparse.Namespace) -> str:
    node = _load_node(args.input)
    config = _build_config(args)
    try:
        return to_xml(node, config)
    except RecursionError as exc:
        raise SystemExit(f"Rendering {args.input} failed: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    output = _render(args)
    if args.output:
        write_text(args.output, output + "\n")
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        print(output)


def _handle_check(args: argparse.Namespace) -> None:
    output = _render(args)
    soup = BeautifulSoup(output, "html.parser")
    elements = soup.find_all(True)
    top_level = soup.find_all(True, recursive=False)

    if not elements:
        warn(f"{args.input}: no elements rendered.")
        raise SystemExit(1)

    names = ", ".join(element.name for element in top_level)
    print(
        f"{args.input}: {len(elements)} elements, "
        f"{len(top_level)} top-level ({names})."
    )


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        help="JSON or YAML file holding the node tree ('-' reads stdin).",
    )
    parser.add_argument(
        "--config",
        help="YAML file with render options (header, indent, text_filter, attribute_filter).",
    )
    parser.add_argument(
        "--indent",
        help="Indent unit: a number of spaces or a literal string such as '\\t'.",
    )
    parser.add_argument(
        "--header",
        action="store_true",
        help="Emit the default XML declaration.",
    )
    parser.add_argument(
        "--header-text",
        dest="header_text",
        help="Emit this literal declaration instead of the default one.",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape XML special characters in text and attribute values.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treexml",
        description="Render nested JSON or YAML data as XML.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a node tree to XML.",
        description="Render a JSON or YAML node tree and print or save the XML.",
    )
    _add_render_options(render_parser)
    render_parser.add_argument(
        "--out",
        dest="output",
        help="File to write the XML to (defaults to stdout).",
    )
    render_parser.set_defaults(func=_handle_render)

    check_parser = subparsers.add_parser(
        "check",
        help="Render a node tree and summarize the resulting elements.",
        description="Render a node tree, parse the output back and report its elements.",
    )
    _add_render_options(check_parser)
    check_parser.set_defaults(func=_handle_check)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
