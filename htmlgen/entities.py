"""Entity encoding helpers shared by every markup builder."""

from __future__ import annotations

import html
import random
import re
from html.entities import codepoint2name
from typing import Any

_ENTITY_REF = r"&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);"
_ENCODE_PATTERN = re.compile(rf"{_ENTITY_REF}|[&<>\"'\u0080-\U0010ffff]")

_NAMED_ENTITIES = {chr(code): f"&{name};" for code, name in codepoint2name.items()}
_NAMED_ENTITIES["'"] = "&#039;"


class _Absent:
    """Marker for a parameter declared without a default."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""

    def __html__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def is_null(value: Any) -> bool:
    """True for values that suppress an attribute or description."""

    return value is None or value is ABSENT


def stringify(value: Any) -> str:
    """Convert a scalar to text the way attribute and list values are written."""

    if value is None:
        return ""
    if value is True:
        return "1"
    if value is False:
        return ""
    return str(value)


def e(value: Any) -> str:
    """Quote-safe escape for attribute values and element bodies.

    Objects implementing ``__html__`` (e.g. ``markupsafe.Markup``) are trusted
    and returned unchanged.
    """

    if hasattr(value, "__html__"):
        return value.__html__()
    return html.escape(stringify(value), quote=True)


def _encode_match(match: re.Match[str]) -> str:
    token = match.group(0)
    if len(token) > 1:
        return token
    return _NAMED_ENTITIES.get(token, token)


def encode(value: Any) -> str:
    """Replace every character that has a named entity, keeping existing entities."""

    return _ENCODE_PATTERN.sub(_encode_match, stringify(value))


def decode(value: Any) -> str:
    """Convert entity references back to characters."""

    return html.unescape(stringify(value))


def obfuscate(value: str, rng: random.Random | None = None) -> str:
    """Randomly write each ASCII character as a decimal entity, hex entity or itself."""

    rng = rng or random.Random()
    parts: list[str] = []
    for letter in value:
        code = ord(letter)
        if code >= 128:
            parts.append(letter)
            continue
        choice = rng.randint(1, 3)
        if choice == 1:
            parts.append(f"&#{code};")
        elif choice == 2:
            parts.append(f"&#x{code:x};")
        else:
            parts.append(letter)
    return "".join(parts)


__all__ = ["ABSENT", "decode", "e", "encode", "is_null", "obfuscate", "stringify"]
