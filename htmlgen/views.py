"""View rendering for registered components."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol, Sequence, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup

from .errors import ViewNotFound

TEMPLATE_SUFFIXES: tuple[str, ...] = (".jinja", ".html")


class ViewFactory(Protocol):
    def make(self, view: str, data: Mapping[str, Any]) -> Any: ...


def view_candidates(view: str, suffixes: Sequence[str] = TEMPLATE_SUFFIXES) -> list[str]:
    """Map a dotted view name to template paths: ``a.b`` -> ``a/b.jinja``."""

    if any(view.endswith(suffix) for suffix in suffixes):
        return [view]
    relative = view.replace(".", "/")
    return [f"{relative}{suffix}" for suffix in suffixes]


class JinjaViewFactory:
    """Render views from template directories with a strict Jinja environment."""

    def __init__(
        self,
        template_dirs: Union[Path, str, Iterable[Union[Path, str]]],
        *,
        shared: Mapping[str, Any] | None = None,
    ) -> None:
        if isinstance(template_dirs, (str, Path)):
            template_dirs = [template_dirs]
        self.template_dirs = [Path(path) for path in template_dirs]
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        if shared:
            self.env.globals.update(shared)

    def share(self, key: str, value: Any) -> None:
        """Expose a value to every template."""

        self.env.globals[key] = value

    def make(self, view: str, data: Mapping[str, Any]) -> Markup:
        candidates = view_candidates(view)
        try:
            template = self.env.select_template(candidates)
        except TemplateNotFound as exc:
            raise ViewNotFound(view, candidates) from exc
        return Markup(template.render(**data))


__all__ = ["JinjaViewFactory", "TEMPLATE_SUFFIXES", "ViewFactory", "view_candidates"]
