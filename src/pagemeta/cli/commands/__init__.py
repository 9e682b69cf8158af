"""CLI command handlers for pagemeta."""

from .resolve import add_resolve_arguments, handle_resolve
from .rules import add_rule_arguments, handle_rules

__all__ = [
    "add_resolve_arguments",
    "add_rule_arguments",
    "handle_resolve",
    "handle_rules",
]
