"""Loading builder configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .builder import HtmlBuilder
from .components import ComponentRegistry
from .errors import ConfigError
from .io_utils import read_yaml
from .models import BuilderConfig
from .urls import StaticUrlGenerator
from .views import JinjaViewFactory

DEFAULT_CONFIG_NAME = "htmlgen.yaml"


def load_config(path: Path) -> BuilderConfig:
    """Read and validate a configuration file.

    Relative template directories are resolved against the file's directory.
    """

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = read_yaml(path) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping.")
    try:
        config = BuilderConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc

    base = path.parent
    config.templates = [
        template if template.is_absolute() else base / template for template in config.templates
    ]
    return config


def build_registry(config: BuilderConfig) -> ComponentRegistry:
    registry = ComponentRegistry(config.fallback)
    for name, component in config.components.items():
        registry.register(name, component.view, component.signature)
    return registry


def build_from_config(config: BuilderConfig) -> HtmlBuilder:
    """Assemble a builder with URL generator, views and registered components."""

    url = StaticUrlGenerator(
        config.base_url,
        secure_base_url=config.secure_base_url,
        routes=config.routes,
        actions=config.actions,
    )
    views = JinjaViewFactory(config.templates) if config.templates else None
    builder = HtmlBuilder(url, views, build_registry(config))
    if views is not None:
        views.share("html", builder)
    return builder


__all__ = ["DEFAULT_CONFIG_NAME", "build_from_config", "build_registry", "load_config"]
