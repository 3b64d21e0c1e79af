"""URL resolution used by link, script, style and image helpers."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Protocol, Sequence, Union
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .errors import RouteNotDefined

Parameters = Union[Mapping[str, Any], Sequence[Any], None]

_ABSOLUTE_PREFIXES = ("http://", "https://", "//", "mailto:", "tel:", "#")
_PLACEHOLDER = re.compile(r"\{(\w+)(\?)?\}")


class UrlGenerator(Protocol):
    def asset(self, path: str, secure: Optional[bool] = None) -> str: ...

    def to(self, path: str, parameters: Parameters = None, secure: Optional[bool] = None) -> str: ...

    def route(self, name: str, parameters: Parameters = None) -> str: ...

    def action(self, name: str, parameters: Parameters = None) -> str: ...


def is_absolute_url(path: str) -> bool:
    return path.startswith(_ABSOLUTE_PREFIXES)


def _secure_variant(base_url: str) -> str:
    parts = urlsplit(base_url)
    if not parts.scheme:
        return base_url
    return urlunsplit(("https", parts.netloc, parts.path, parts.query, parts.fragment))


def _fill_placeholders(template: str, parameters: Parameters) -> tuple[str, dict[str, Any]]:
    """Substitute ``{name}`` / ``{name?}`` segments and return unused parameters."""

    if isinstance(parameters, Mapping):
        named = dict(parameters)
        positional: list[Any] = []
    else:
        named = {}
        positional = list(parameters or [])

    def _replace(match: re.Match[str]) -> str:
        key, optional = match.group(1), match.group(2)
        if key in named:
            return quote(str(named.pop(key)), safe="")
        if positional:
            return quote(str(positional.pop(0)), safe="")
        if optional:
            return ""
        return match.group(0)

    path = _PLACEHOLDER.sub(_replace, template)
    path = re.sub(r"(?<!:)//+", "/", path)
    if len(path) > 1:
        path = path.rstrip("/")
    return path, named


class StaticUrlGenerator:
    """URL generator backed by a base URL and static route/action tables."""

    def __init__(
        self,
        base_url: str = "",
        *,
        secure_base_url: str | None = None,
        routes: Mapping[str, str] | None = None,
        actions: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.secure_base_url = (secure_base_url or _secure_variant(base_url)).rstrip("/")
        self.routes = dict(routes or {})
        self.actions = dict(actions or {})

    def _root(self, secure: Optional[bool]) -> str:
        return self.secure_base_url if secure else self.base_url

    def _join(self, path: str, secure: Optional[bool]) -> str:
        if is_absolute_url(path):
            return path
        return f"{self._root(secure)}/{path.lstrip('/')}"

    def asset(self, path: str, secure: Optional[bool] = None) -> str:
        return self._join(path, secure)

    def to(self, path: str, parameters: Parameters = None, secure: Optional[bool] = None) -> str:
        if is_absolute_url(path):
            return path
        values = parameters.values() if isinstance(parameters, Mapping) else (parameters or [])
        segments = [quote(str(value), safe="") for value in values]
        tail = "/".join([path.strip("/"), *segments]).strip("/")
        return self._join(tail, secure)

    def _named(self, kind: str, table: Mapping[str, str], name: str, parameters: Parameters) -> str:
        if name not in table:
            raise RouteNotDefined(kind, name)
        path, extra = _fill_placeholders(table[name], parameters)
        url = self._join(path, None)
        if extra:
            url = f"{url}?{urlencode(extra)}"
        return url

    def route(self, name: str, parameters: Parameters = None) -> str:
        return self._named("route", self.routes, name, parameters)

    def action(self, name: str, parameters: Parameters = None) -> str:
        return self._named("action", self.actions, name, parameters)


__all__ = ["Parameters", "StaticUrlGenerator", "UrlGenerator", "is_absolute_url"]
