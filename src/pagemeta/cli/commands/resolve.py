"""Metadata resolution command for pagemeta CLI."""

import argparse
import json
from pathlib import Path

from ...app import create_application
from ...core.config import Config
from ...core.types import EntityType


def add_resolve_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the resolve command."""
    parser.add_argument("path", help="Normalized request path")
    parser.add_argument("-l", "--language", default=None, help="Current language code")
    parser.add_argument("--domain", default="", help="Request hostname")
    parser.add_argument("--front", action="store_true", help="Request is the home page")
    parser.add_argument("--catalog", help="JSON file describing entities and assets")
    parser.add_argument(
        "--entity",
        help="Entity in context as TYPE:ID (TYPE is node or taxonomy_term)",
    )


def parse_entity_ref(value: str) -> tuple[EntityType, int]:
    """Parse a TYPE:ID entity reference.

    Raises:
        ValueError: If the reference is malformed or the type is unknown.
    """
    kind, sep, entity_id = value.partition(":")
    if not sep:
        raise ValueError(f"Entity must be TYPE:ID, got {value!r}")
    return EntityType(kind), int(entity_id)


def handle_resolve(args, config: Config) -> None:
    """Resolve and print metadata for a request path.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    catalog_data = None
    if args.catalog:
        catalog_data = json.loads(Path(args.catalog).read_text(encoding="utf-8"))

    with create_application(config, catalog_data) as app:
        if args.entity:
            app.catalog.set_current(*parse_entity_ref(args.entity))

        context = app.request_context(
            args.path,
            language=args.language,
            domain=args.domain,
            front_page=args.front,
        )
        metadata = app.generator.generate(context)

    print(json.dumps(metadata, indent=2, ensure_ascii=False))
