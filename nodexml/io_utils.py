"""Utility helpers for reading node trees and writing documents."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

YAML_SUFFIXES = {".yaml", ".yml"}


def read_tree(path: Path) -> Any:
    """Load a raw node tree from a JSON or YAML file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write a rendered document, creating missing parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    """Report a problem on stderr, keeping stdout for documents."""
    print(msg, file=sys.stderr)


__all__ = ["read_tree", "warn", "write_text"]
