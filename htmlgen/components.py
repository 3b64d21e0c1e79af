"""Component registration and positional argument binding."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Mapping, Sequence

from .attributes import is_numeric_key
from .entities import ABSENT
from .errors import ComponentNotFound

if TYPE_CHECKING:  # pragma: no cover
    from .views import ViewFactory

FallbackPolicy = Literal["falsy", "absent"]
FALLBACK_POLICIES: tuple[str, ...] = ("falsy", "absent")


@dataclass(frozen=True)
class Parameter:
    """One declared component parameter."""

    name: str
    default: Any = ABSENT

    @property
    def has_default(self) -> bool:
        return self.default is not ABSENT


def _parameter(entry: Any) -> Parameter:
    if isinstance(entry, Parameter):
        return entry
    if isinstance(entry, str):
        return Parameter(entry)
    if isinstance(entry, Mapping) and len(entry) == 1:
        ((name, default),) = entry.items()
        return Parameter(str(name), default)
    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        return Parameter(str(entry[0]), entry[1])
    raise TypeError(f"Unsupported parameter declaration: {entry!r}")


@dataclass(frozen=True)
class ComponentSignature:
    """Ordered parameter declarations of a component."""

    parameters: tuple[Parameter, ...] = ()

    @classmethod
    def parse(cls, declaration: Any) -> "ComponentSignature":
        """Accept a signature, a list of declarations, or a mapping.

        In a mapping, numeric keys mark bare names (``{0: "color", "size": "m"}``).
        """

        if isinstance(declaration, ComponentSignature):
            return declaration
        if declaration is None:
            return cls()
        if isinstance(declaration, Mapping):
            parameters = [
                Parameter(str(value)) if is_numeric_key(key) else Parameter(str(key), value)
                for key, value in declaration.items()
            ]
            return cls(tuple(parameters))
        if isinstance(declaration, str):
            return cls((Parameter(declaration),))
        return cls(tuple(_parameter(entry) for entry in declaration))

    @property
    def names(self) -> list[str]:
        return [parameter.name for parameter in self.parameters]

    def __iter__(self):
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)


def _is_supplied(value: Any, fallback: FallbackPolicy) -> bool:
    if fallback == "absent":
        return value is not None
    # Loose truthiness: the string "0" counts as empty too.
    if isinstance(value, str) and value == "0":
        return False
    return bool(value)


def bind(
    signature: Any,
    args: Sequence[Any],
    *,
    fallback: FallbackPolicy = "falsy",
) -> dict[str, Any]:
    """Bind positional arguments to parameter names, falling back to defaults."""

    if fallback not in FALLBACK_POLICIES:
        raise ValueError(f"Unknown fallback policy: {fallback!r}")

    data: dict[str, Any] = {}
    for index, parameter in enumerate(ComponentSignature.parse(signature)):
        value = args[index] if index < len(args) else None
        data[parameter.name] = value if _is_supplied(value, fallback) else parameter.default
    return data


@dataclass(frozen=True)
class ComponentSpec:
    """A registered component: the view it renders and its signature."""

    name: str
    view: str
    signature: ComponentSignature = field(default_factory=ComponentSignature)


class ComponentRegistry:
    """Component name to view/signature mapping, last registration wins."""

    def __init__(self, fallback: FallbackPolicy = "falsy") -> None:
        if fallback not in FALLBACK_POLICIES:
            raise ValueError(f"Unknown fallback policy: {fallback!r}")
        self.fallback = fallback
        self._components: dict[str, ComponentSpec] = {}
        self._lock = threading.Lock()

    def register(self, name: str, view: str, signature: Any = None) -> ComponentSpec:
        spec = ComponentSpec(name=name, view=view, signature=ComponentSignature.parse(signature))
        with self._lock:
            self._components[name] = spec
        return spec

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._components

    def get(self, name: str) -> ComponentSpec:
        with self._lock:
            spec = self._components.get(name)
        if spec is None:
            raise ComponentNotFound(name)
        return spec

    def names(self) -> list[str]:
        with self._lock:
            return list(self._components)

    def bind(self, name: str, args: Sequence[Any]) -> tuple[ComponentSpec, dict[str, Any]]:
        """Look up a component and bind arguments against its signature."""

        spec = self.get(name)
        return spec, bind(spec.signature, args, fallback=self.fallback)

    def render(self, name: str, args: Sequence[Any], views: "ViewFactory") -> Any:
        spec, data = self.bind(name, args)
        return views.make(spec.view, data)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._components)


__all__ = [
    "ABSENT",
    "FALLBACK_POLICIES",
    "ComponentRegistry",
    "ComponentSignature",
    "ComponentSpec",
    "FallbackPolicy",
    "Parameter",
    "bind",
]
