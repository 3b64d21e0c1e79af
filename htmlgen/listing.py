"""Ordered, unordered and description list rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Literal, Mapping, Union

from markupsafe import Markup

from .attributes import AttributeMap, attributes
from .entities import e, is_null, stringify

ListTag = Literal["ol", "ul"]

_INDEX = re.compile(r"^(0|-?[1-9][0-9]*)$")


@dataclass(frozen=True)
class Leaf:
    """A scalar list item."""

    key: Any
    value: Any


@dataclass(frozen=True)
class Nested:
    """A nested collection under a positional index or an explicit label."""

    key: Any
    items: Any

    @property
    def positional(self) -> bool:
        return is_index(self.key)


ListEntry = Union[Leaf, Nested]


def is_index(key: Any) -> bool:
    """True when the key is a sequence position rather than a label."""

    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and bool(_INDEX.match(key))


def is_collection(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def list_entries(items: Any) -> Iterator[ListEntry]:
    """Tag each (key, value) pair of a list input as a leaf or a nested list."""

    pairs: Iterable[tuple[Any, Any]]
    if isinstance(items, Mapping):
        pairs = items.items()
    else:
        pairs = enumerate(items)
    for key, value in pairs:
        if is_collection(value):
            yield Nested(key, value)
        else:
            yield Leaf(key, value)


def _render_entry(tag: ListTag, entry: ListEntry) -> str:
    if isinstance(entry, Leaf):
        return f"<li>{e(entry.value)}</li>"
    nested = listing(tag, entry.items)
    if entry.positional:
        return str(nested)
    return f"<li>{stringify(entry.key)}{nested}</li>"


def listing(tag: ListTag, items: Any, attrs: AttributeMap = None) -> Markup | str:
    """Render a possibly nested list; an empty input renders as ""."""

    entries = list(list_entries(items))
    if not entries:
        return ""

    # Unlabeled sublists are spliced in as sibling lists, labeled ones share
    # an <li> with their label.
    body = "".join(_render_entry(tag, entry) for entry in entries)
    return Markup(f"<{tag}{attributes(attrs)}>{body}</{tag}>")


def ol(items: Any, attrs: AttributeMap = None) -> Markup | str:
    return listing("ol", items, attrs)


def ul(items: Any, attrs: AttributeMap = None) -> Markup | str:
    return listing("ul", items, attrs)


def _descriptions(value: Any) -> list[Any]:
    if is_null(value):
        return []
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def dl(items: Mapping[Any, Any], attrs: AttributeMap = None) -> Markup:
    """Render a flat description list: one <dt> per label, one <dd> per value."""

    parts = [f"<dl{attributes(attrs)}>"]
    for label, value in items.items():
        parts.append(f"<dt>{stringify(label)}</dt>")
        for description in _descriptions(value):
            parts.append(f"<dd>{stringify(description)}</dd>")
    parts.append("</dl>")
    return Markup("".join(parts))


__all__ = [
    "Leaf",
    "ListEntry",
    "ListTag",
    "Nested",
    "dl",
    "is_collection",
    "is_index",
    "list_entries",
    "listing",
    "ol",
    "ul",
]
