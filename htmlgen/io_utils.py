"""Utility helpers for payload IO and diagnostics."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def parse_payload(text: str, *, suffix: str = "") -> Any:
    """Parse JSON, or YAML when the suffix says so."""
    if suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def read_payload(source: str | Path, *, stdin: TextIO | None = None) -> Any:
    """Read a JSON/YAML document from a path, or from stdin when source is '-'."""
    if str(source) == "-":
        return parse_payload((stdin or sys.stdin).read())
    path = Path(source)
    return parse_payload(path.read_text(encoding="utf-8"), suffix=path.suffix)


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
