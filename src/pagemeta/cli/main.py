"""CLI entry point for pagemeta."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="pagemeta",
        description="Page metadata resolution with path overrides and entity fallbacks",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-c", "--config", help="Path to a TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", required=False)

    # Rule commands
    rules_parser = subparsers.add_parser("rules", help="Manage path override rules")
    rules_subparsers = rules_parser.add_subparsers(dest="rules_cmd", required=True)

    rules_subparsers.add_parser("list", help="List all rules")

    show_parser = rules_subparsers.add_parser("show", help="Show a rule")
    show_parser.add_argument("id", type=int, help="Rule id")

    add_parser = rules_subparsers.add_parser("add", help="Add a rule")
    commands.add_rule_arguments(add_parser)

    update_parser = rules_subparsers.add_parser("update", help="Replace a rule")
    update_parser.add_argument("id", type=int, help="Rule id")
    commands.add_rule_arguments(update_parser)

    remove_parser = rules_subparsers.add_parser("remove", help="Remove a rule")
    remove_parser.add_argument("id", type=int, help="Rule id")

    # Resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Resolve metadata for a path")
    commands.add_resolve_arguments(resolve_parser)

    return parser


def main() -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="WARNING")

    try:
        config = Config.from_env_or_file(args.config)

        if args.command == "rules":
            commands.handle_rules(args, config)
        elif args.command == "resolve":
            commands.handle_resolve(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
