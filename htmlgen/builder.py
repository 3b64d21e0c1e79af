"""HTML builder facade: tag helpers, lists, components and macros."""

from __future__ import annotations

import random
from typing import Any, Callable, Mapping, Optional

from markupsafe import Markup

from . import entities, listing
from .attributes import AttributeMap, attributes, merge_defaults, merge_over
from .components import ComponentRegistry, FallbackPolicy
from .errors import CollaboratorMissing, MethodNotFound
from .urls import Parameters, UrlGenerator
from .views import ViewFactory

EOL = "\n"

STYLE_DEFAULTS = {"media": "all", "type": "text/css", "rel": "stylesheet"}
FAVICON_DEFAULTS = {"rel": "shortcut icon", "type": "image/x-icon"}


class HtmlBuilder:
    """Build HTML fragments from URLs, attribute maps, lists and components.

    The URL generator and view factory are optional; helpers that need one
    raise :class:`CollaboratorMissing` when it was not provided. Components
    live in the injected registry, so separate builders can share or isolate
    registrations.
    """

    def __init__(
        self,
        url: UrlGenerator | None = None,
        view: ViewFactory | None = None,
        components: ComponentRegistry | None = None,
        *,
        fallback: FallbackPolicy | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.url = url
        self.view = view
        if components is None:
            components = ComponentRegistry(fallback or "falsy")
        elif fallback is not None and fallback != components.fallback:
            raise ValueError(
                f"fallback={fallback!r} conflicts with the injected registry's "
                f"fallback={components.fallback!r}; set it on the registry instead."
            )
        self.components = components
        self.rng = rng or random.Random()
        self._macros: dict[str, Callable[..., Any]] = {}

    @property
    def urls(self) -> UrlGenerator:
        if self.url is None:
            raise CollaboratorMissing("No URL generator configured for this builder.")
        return self.url

    @property
    def views(self) -> ViewFactory:
        if self.view is None:
            raise CollaboratorMissing("No view factory configured for this builder.")
        return self.view

    def entities(self, value: Any) -> str:
        return entities.encode(value)

    def decode(self, value: Any) -> str:
        return entities.decode(value)

    def attributes(self, attrs: AttributeMap) -> str:
        return attributes(attrs)

    def script(self, url: str, attrs: AttributeMap = None, secure: Optional[bool] = None) -> Markup:
        merged = merge_over({}, attrs)
        merged["src"] = self.urls.asset(url, secure)
        return Markup(f"<script{attributes(merged)}></script>{EOL}")

    def style(self, url: str, attrs: AttributeMap = None, secure: Optional[bool] = None) -> Markup:
        merged = merge_defaults(attrs, STYLE_DEFAULTS)
        merged["href"] = self.urls.asset(url, secure)
        return Markup(f"<link{attributes(merged)}>{EOL}")

    def image(
        self,
        url: str,
        alt: Optional[str] = None,
        attrs: AttributeMap = None,
        secure: Optional[bool] = None,
    ) -> Markup:
        merged = merge_over({}, attrs)
        merged["alt"] = alt
        src = self.urls.asset(url, secure)
        return Markup(f'<img src="{src}"{attributes(merged)}>')

    def favicon(self, url: str, attrs: AttributeMap = None, secure: Optional[bool] = None) -> Markup:
        merged = merge_defaults(attrs, FAVICON_DEFAULTS)
        merged["href"] = self.urls.asset(url, secure)
        return Markup(f"<link{attributes(merged)}>{EOL}")

    def link(
        self,
        url: str,
        title: Any = None,
        attrs: AttributeMap = None,
        secure: Optional[bool] = None,
    ) -> Markup:
        url = self.urls.to(url, [], secure)
        if title is None or title is False:
            title = url
        return Markup(f'<a href="{url}"{attributes(attrs)}>{entities.encode(title)}</a>')

    def secure_link(self, url: str, title: Any = None, attrs: AttributeMap = None) -> Markup:
        return self.link(url, title, attrs, True)

    def link_asset(
        self,
        url: str,
        title: Any = None,
        attrs: AttributeMap = None,
        secure: Optional[bool] = None,
    ) -> Markup:
        url = self.urls.asset(url, secure)
        return self.link(url, title or url, attrs, secure)

    def link_secure_asset(self, url: str, title: Any = None, attrs: AttributeMap = None) -> Markup:
        return self.link_asset(url, title, attrs, True)

    def link_route(
        self,
        name: str,
        title: Any = None,
        parameters: Parameters = None,
        attrs: AttributeMap = None,
    ) -> Markup:
        return self.link(self.urls.route(name, parameters), title, attrs)

    def link_action(
        self,
        action: str,
        title: Any = None,
        parameters: Parameters = None,
        attrs: AttributeMap = None,
    ) -> Markup:
        return self.link(self.urls.action(action, parameters), title, attrs)

    def mailto(self, email: str, title: Any = None, attrs: AttributeMap = None) -> Markup:
        email = self.email(email)
        title = title or email
        href = self.obfuscate("mailto:") + email
        return Markup(f'<a href="{href}"{attributes(attrs)}>{entities.encode(title)}</a>')

    def email(self, email: str) -> str:
        """Obfuscate an address so it is harder to harvest from the page."""

        return self.obfuscate(email).replace("@", "&#64;")

    def obfuscate(self, value: str) -> str:
        return entities.obfuscate(value, self.rng)

    def ol(self, items: Any, attrs: AttributeMap = None) -> Markup | str:
        return listing.ol(items, attrs)

    def ul(self, items: Any, attrs: AttributeMap = None) -> Markup | str:
        return listing.ul(items, attrs)

    def dl(self, items: Mapping[Any, Any], attrs: AttributeMap = None) -> Markup:
        return listing.dl(items, attrs)

    def meta(self, name: str, content: str, attrs: AttributeMap = None) -> Markup:
        merged = merge_over({"name": name, "content": content}, attrs)
        return Markup(f"<meta{attributes(merged)}>{EOL}")

    def component(self, name: str, view: str, signature: Any = None) -> None:
        self.components.register(name, view, signature)

    def has_component(self, name: str) -> bool:
        return self.components.has(name)

    def render_component(self, name: str, *args: Any) -> Any:
        # Lookup happens before the view collaborator is touched.
        self.components.get(name)
        return self.components.render(name, args, self.views)

    def macro(self, name: str, func: Callable[..., Any]) -> None:
        """Register a callable reachable as ``builder.<name>(...)``."""

        self._macros[name] = func

    def has_macro(self, name: str) -> bool:
        return name in self._macros

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_") or "components" not in self.__dict__:
            raise AttributeError(name)
        if self.components.has(name):
            return lambda *args: self.render_component(name, *args)
        macro = self.__dict__.get("_macros", {}).get(name)
        if macro is not None:
            return lambda *args, **kwargs: macro(self, *args, **kwargs)
        raise MethodNotFound(name)


__all__ = ["EOL", "FAVICON_DEFAULTS", "HtmlBuilder", "STYLE_DEFAULTS"]
