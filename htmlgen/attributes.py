"""Serialization of attribute maps into HTML attribute strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Union

from .entities import e, is_null, stringify

_NUMERIC = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


@dataclass(frozen=True)
class Positional:
    """Attribute given by position; its value is written as a bare token."""

    value: Any


@dataclass(frozen=True)
class Named:
    """Attribute written as ``key="value"``."""

    key: str
    value: Any


AttributeItem = Union[Positional, Named]
AttributeMap = Union[Mapping[Any, Any], Iterable[Any], str, None]


def is_numeric_key(key: Any) -> bool:
    """Return True for keys that came from a sequence slot rather than a name."""

    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    if isinstance(key, str):
        return bool(_NUMERIC.match(key))
    return False


def _item_for(key: Any, value: Any) -> AttributeItem:
    if is_numeric_key(key):
        return Positional(value)
    return Named(str(key), value)


def attribute_items(attrs: AttributeMap) -> Iterator[AttributeItem]:
    """Normalize the accepted attribute shapes into tagged items, keeping order.

    Mappings are split on their keys; sequences may mix bare tokens,
    ``(key, value)`` pairs and already-tagged items. A lone string behaves like
    a one-element sequence.
    """

    if attrs is None:
        return
    if isinstance(attrs, str):
        yield Positional(attrs)
        return
    if isinstance(attrs, Mapping):
        for key, value in attrs.items():
            yield _item_for(key, value)
        return
    for entry in attrs:
        if isinstance(entry, (Positional, Named)):
            yield entry
        elif isinstance(entry, tuple) and len(entry) == 2:
            yield _item_for(*entry)
        else:
            yield Positional(entry)


def attribute_element(item: AttributeItem) -> str | None:
    """Render one attribute, or None when it should be left out."""

    if isinstance(item, Positional):
        if is_null(item.value):
            return None
        return stringify(item.value)
    if is_null(item.value):
        return None
    return f'{item.key}="{e(item.value)}"'


def attributes(attrs: AttributeMap) -> str:
    """Build an HTML attribute string with a leading space, or "" when empty."""

    elements = [
        element
        for element in (attribute_element(item) for item in attribute_items(attrs))
        if element is not None
    ]
    return " " + " ".join(elements) if elements else ""


def merge_defaults(attrs: AttributeMap, defaults: Mapping[str, Any]) -> dict[Any, Any]:
    """Return attrs followed by any default keys the caller did not provide."""

    merged = _as_dict(attrs)
    for key, value in defaults.items():
        merged.setdefault(key, value)
    return merged


def merge_over(base: Mapping[str, Any], attrs: AttributeMap) -> dict[Any, Any]:
    """Return base with the caller's attributes laid over it."""

    merged: dict[Any, Any] = dict(base)
    merged.update(_as_dict(attrs))
    return merged


def _as_dict(attrs: AttributeMap) -> dict[Any, Any]:
    """Flatten any accepted attribute shape into an ordered dict.

    Positional tokens are numbered in order so they survive later merges.
    """

    result: dict[Any, Any] = {}
    if isinstance(attrs, Mapping):
        result.update(attrs)
        return result
    index = 0
    for item in attribute_items(attrs):
        if isinstance(item, Positional):
            while index in result:
                index += 1
            result[index] = item.value
        else:
            result[item.key] = item.value
    return result


__all__ = [
    "AttributeItem",
    "AttributeMap",
    "Named",
    "Positional",
    "attribute_element",
    "attribute_items",
    "attributes",
    "is_numeric_key",
    "merge_defaults",
    "merge_over",
]
