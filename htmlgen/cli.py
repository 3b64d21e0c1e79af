"""Command-line interface for htmlgen."""

import argparse
import json
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from .attributes import attributes
from .builder import HtmlBuilder
from .config import DEFAULT_CONFIG_NAME, build_from_config, load_config
from .entities import decode, encode
from .errors import HtmlGenError
from .io_utils import read_payload, warn
from .listing import dl, listing


def _parse_attr_options(values: Optional[list[str]]) -> dict[Any, Any]:
    """Turn repeated ``--attr key=value`` / ``--attr token`` options into a map."""
    attrs: dict[Any, Any] = {}
    position = 0
    for raw in values or []:
        if "=" in raw:
            key, value = raw.split("=", 1)
            attrs[key] = value
        else:
            attrs[position] = raw
            position += 1
    return attrs


def _read(source: str) -> Any:
    try:
        return read_payload(source)
    except FileNotFoundError as exc:
        raise SystemExit(f"Payload not found: {source}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid payload {source}: {exc}") from exc


def _emit(fragment: Any) -> None:
    print(str(fragment))


def _handle_attributes(args: argparse.Namespace) -> None:
    payload = _read(args.payload)
    if not isinstance(payload, (dict, list)):
        raise SystemExit("Attribute payload must be a JSON object or array.")
    _emit(attributes(payload))


def _handle_list(args: argparse.Namespace) -> None:
    payload = _read(args.payload)
    if not isinstance(payload, (dict, list)):
        raise SystemExit("List payload must be a JSON object or array.")
    tag = "ol" if args.ordered else "ul"
    _emit(listing(tag, payload, _parse_attr_options(args.attrs)))


def _handle_dl(args: argparse.Namespace) -> None:
    payload = _read(args.payload)
    if not isinstance(payload, dict):
        raise SystemExit("Description list payload must be a JSON object.")
    _emit(dl(payload, _parse_attr_options(args.attrs)))


def _load_builder(config_path: Path) -> HtmlBuilder:
    try:
        return build_from_config(load_config(config_path))
    except HtmlGenError as exc:
        raise SystemExit(str(exc)) from exc


def _handle_component(args: argparse.Namespace) -> None:
    builder = _load_builder(Path(args.config))
    if not builder.components.names():
        warn(f"No components registered in {args.config}.")
    try:
        values = [json.loads(raw) if args.json_args else raw for raw in args.arguments]
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON argument: {exc}") from exc
    try:
        _emit(builder.render_component(args.name, *values))
    except HtmlGenError as exc:
        raise SystemExit(str(exc)) from exc


def _handle_entities(args: argparse.Namespace) -> None:
    _emit(encode(args.text))


def _handle_decode(args: argparse.Namespace) -> None:
    _emit(decode(args.text))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlgen",
        description="Render HTML fragments from attribute maps, lists and components.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="htmlgen 0.1.0",
        help="Show the htmlgen version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    attributes_parser = subparsers.add_parser(
        "attributes",
        help="Serialize an attribute map.",
        description="Render a JSON/YAML attribute map as an HTML attribute string.",
    )
    attributes_parser.add_argument("payload", help="Path to a JSON/YAML payload, or - for stdin.")
    attributes_parser.set_defaults(func=_handle_attributes)

    list_parser = subparsers.add_parser(
        "list",
        help="Render a nested ol/ul list.",
        description="Render a JSON/YAML array or object as an HTML list.",
    )
    list_parser.add_argument("payload", help="Path to a JSON/YAML payload, or - for stdin.")
    list_parser.add_argument(
        "--ordered",
        action="store_true",
        help="Render an <ol> instead of a <ul>.",
    )
    list_parser.add_argument(
        "--attr",
        action="append",
        dest="attrs",
        help="Attribute for the outer list as key=value, or a bare token (repeatable).",
    )
    list_parser.set_defaults(func=_handle_list)

    dl_parser = subparsers.add_parser(
        "dl",
        help="Render a description list.",
        description="Render a JSON/YAML object as an HTML description list.",
    )
    dl_parser.add_argument("payload", help="Path to a JSON/YAML payload, or - for stdin.")
    dl_parser.add_argument(
        "--attr",
        action="append",
        dest="attrs",
        help="Attribute for the <dl> as key=value, or a bare token (repeatable).",
    )
    dl_parser.set_defaults(func=_handle_dl)

    component_parser = subparsers.add_parser(
        "component",
        help="Render a registered component.",
        description="Bind positional arguments to a configured component and render its view.",
    )
    component_parser.add_argument("name", help="Registered component name.")
    component_parser.add_argument("arguments", nargs="*", help="Positional component arguments.")
    component_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_NAME,
        help="Path to the builder configuration YAML.",
    )
    component_parser.add_argument(
        "--json-args",
        dest="json_args",
        action="store_true",
        help="Parse each argument as JSON instead of passing plain strings.",
    )
    component_parser.set_defaults(func=_handle_component)

    entities_parser = subparsers.add_parser(
        "entities", help="Encode text as HTML entities.", description="Encode text as HTML entities."
    )
    entities_parser.add_argument("text", help="Text to encode.")
    entities_parser.set_defaults(func=_handle_entities)

    decode_parser = subparsers.add_parser(
        "decode", help="Decode HTML entities.", description="Convert HTML entities back to text."
    )
    decode_parser.add_argument("text", help="Text to decode.")
    decode_parser.set_defaults(func=_handle_decode)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
