"""Exception types raised by htmlgen."""

from __future__ import annotations


class HtmlGenError(Exception):
    """Base class for htmlgen failures."""


class ComponentNotFound(HtmlGenError, LookupError):
    """Raised when a component name was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Component '{name}' is not registered.")
        self.name = name


class MethodNotFound(HtmlGenError, AttributeError):
    """Raised when a dynamic builder call matches no component or macro."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Method '{name}' does not exist.")
        self.name = name


class CollaboratorMissing(HtmlGenError, RuntimeError):
    """Raised when a helper needs a URL or view collaborator that was not provided."""


class RouteNotDefined(HtmlGenError, LookupError):
    """Raised when a named route or controller action is unknown."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind.capitalize()} '{name}' is not defined.")
        self.kind = kind
        self.name = name


class ViewNotFound(HtmlGenError, LookupError):
    """Raised when no template exists for a view name."""

    def __init__(self, view: str, candidates: list[str]) -> None:
        tried = ", ".join(candidates)
        super().__init__(f"View '{view}' not found (tried: {tried}).")
        self.view = view
        self.candidates = candidates


class ConfigError(HtmlGenError, ValueError):
    """Raised when a configuration file cannot be loaded or validated."""


__all__ = [
    "CollaboratorMissing",
    "ComponentNotFound",
    "ConfigError",
    "HtmlGenError",
    "MethodNotFound",
    "RouteNotDefined",
    "ViewNotFound",
]
