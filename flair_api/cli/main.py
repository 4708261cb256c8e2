"""
Main CLI entry point for the Flair API client.

Credentials are read from FLAIR_CLIENT_ID / FLAIR_CLIENT_SECRET.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

import requests
from rich.console import Console

from .. import __version__
from .._client import Client
from .._exceptions import FlairError
from ..models import registered_types, resource_class
from .display import render_json, render_reading, render_resource, render_resources
from .util import graceful_main, parse_attributes, parse_relationships

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flair",
        description="Flair API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--base-url", help="Custom API base URL (or set FLAIR_BASE_URL)")
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of tables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("types", help="List resource types with typed models")

    get = subparsers.add_parser("get", help="Fetch a collection or a single resource")
    get.add_argument("type", help="Resource type, e.g. vents")
    get.add_argument("id", nargs="?", help="Resource id")

    create = subparsers.add_parser("create", help="Create a resource")
    create.add_argument("type")
    _add_body_arguments(create)

    update = subparsers.add_parser("update", help="Update a resource")
    update.add_argument("type")
    update.add_argument("id")
    _add_body_arguments(update)

    delete = subparsers.add_parser("delete", help="Delete a resource")
    delete.add_argument("type")
    delete.add_argument("id")

    reading = subparsers.add_parser("reading", help="Fetch a resource's current reading")
    reading.add_argument("type")
    reading.add_argument("id")
    return parser


def _add_body_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--attr", action="append", metavar="KEY=VALUE", help="Attribute (repeatable)"
    )
    parser.add_argument(
        "--rel", action="append", metavar="NAME=TYPE:ID", help="Relationship (repeatable)"
    )


def _show(args: argparse.Namespace, result: Any) -> None:
    if args.json:
        render_json(console, result)
    elif isinstance(result, list):
        render_resources(console, result)
    elif result is not None:
        render_resource(console, result)


def _run(args: argparse.Namespace, client: Client) -> int:
    if args.command == "get":
        _show(args, client.get(args.type, args.id))
    elif args.command == "create":
        attributes = parse_attributes(args.attr)
        relationships = parse_relationships(args.rel)
        _show(args, client.create(args.type, attributes, relationships))
    elif args.command == "update":
        attributes = parse_attributes(args.attr)
        relationships = parse_relationships(args.rel)
        _show(args, client.update(args.type, args.id, attributes, relationships))
    elif args.command == "delete":
        client.delete(args.type, args.id)
        console.print(f"[green]✓[/green] Deleted {args.type}/{args.id}")
    elif args.command == "reading":
        data = client.current_reading(args.type, args.id)
        reading_class = getattr(resource_class(args.type), "reading_class", None)
        reading = reading_class.from_dict(data) if reading_class and data else data
        if args.json:
            render_json(console, reading)
        else:
            render_reading(console, reading)
    return 0


def _real_main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "types":
        for name, cls in registered_types().items():
            console.print(f"{name:<16} {cls.__name__}")
        return 0

    try:
        client = Client(base_url=args.base_url)
        return _run(args, client)
    except ValueError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        return 2
    except FlairError as e:
        err_console.print(f"[red]❌ {e.message}[/red]")
        return 1
    except requests.RequestException as e:
        err_console.print(f"[red]❌ Could not reach the API: {e}[/red]")
        return 1


def main() -> None:
    """Main CLI entry point with graceful interrupt handling."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
