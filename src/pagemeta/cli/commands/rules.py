"""Rule management commands for pagemeta CLI."""

import argparse

from ...app import create_application
from ...core.config import Config
from ...core.types import OverrideRule, RuleFields
from ...services.overrides import RuleAdminService, parse_domains


def add_rule_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the writable rule fields to a parser."""
    parser.add_argument("path", help="Path pattern (e.g. /blog/*, /about, <front>)")
    parser.add_argument("-t", "--title", default="", help="Meta title")
    parser.add_argument("-d", "--description", default="", help="Meta description")
    parser.add_argument("-i", "--image", default=None, help="Image asset id or URL")
    parser.add_argument(
        "--domain",
        action="append",
        default=[],
        help="Restrict to a domain (repeatable; default: all domains)",
    )
    parser.add_argument("-l", "--language", default="", help="Language code (default: all)")
    parser.add_argument("-w", "--weight", type=int, default=0, help="Priority, higher wins")
    parser.add_argument("--disabled", action="store_true", help="Store the rule as inactive")


def fields_from_args(args) -> RuleFields:
    """Build rule fields from parsed arguments."""
    return RuleFields(
        path_pattern=args.path,
        title=args.title,
        description=args.description,
        image=args.image,
        domains=parse_domains("\n".join(args.domain)),
        language=args.language,
        weight=args.weight,
        status=not args.disabled,
    )


def handle_rules(args, config: Config) -> None:
    """Handle rules subcommands.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    with create_application(config) as app:
        if args.rules_cmd == "list":
            _list_rules(app.admin)
        elif args.rules_cmd == "show":
            _print_rule(app.admin.get(args.id))
        elif args.rules_cmd == "add":
            rule = app.admin.create(fields_from_args(args))
            print(f"✓ Created rule {rule.id} for {rule.path_pattern}")
        elif args.rules_cmd == "update":
            rule = app.admin.update(args.id, fields_from_args(args))
            print(f"✓ Updated rule {rule.id}")
        elif args.rules_cmd == "remove":
            app.admin.delete(args.id)
            print(f"✓ Removed rule {args.id}")


def _list_rules(admin: RuleAdminService) -> None:
    rows = admin.list_rows()
    if not rows:
        print("No path overrides found. Add one with 'pagemeta rules add'.")
        return

    print(f"{'ID':>4}  {'Path':<24} {'Title':<24} {'Domain':<16} {'Lang':<5} Description")
    for row in rows:
        marker = "" if row.status else " (disabled)"
        print(
            f"{row.id:>4}  {row.path:<24} {row.title:<24} {row.domains:<16} "
            f"{row.language:<5} {row.description}{marker}"
        )


def _print_rule(rule: OverrideRule) -> None:
    print(f"Rule {rule.id}")
    print(f"  Path:        {rule.path_pattern}")
    print(f"  Title:       {rule.title}")
    print(f"  Description: {rule.description}")
    print(f"  Image:       {rule.image or '-'}")
    print(f"  Domains:     {', '.join(rule.domains) or 'All'}")
    print(f"  Language:    {rule.language or 'All'}")
    print(f"  Weight:      {rule.weight}")
    print(f"  Active:      {'yes' if rule.status else 'no'}")
