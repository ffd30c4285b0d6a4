"""Utility helpers for reading node trees and writing output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Union

import yaml

PathLike = Union[str, Path]

JSON_SUFFIXES = (".json",)


def read_node(path: PathLike) -> Any:
    """Load a node tree from a JSON or YAML file, or from stdin when ``path`` is ``-``."""
    if str(path) == "-":
        return yaml.safe_load(sys.stdin.read())
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() in JSON_SUFFIXES:
        return json.loads(text)
    return yaml.safe_load(text)


def read_config(path: PathLike) -> Dict[str, Any]:
    """Load render options from a YAML mapping; an empty file gives no options."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of render options.")
    return data


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_config", "read_node", "warn", "write_text"]
