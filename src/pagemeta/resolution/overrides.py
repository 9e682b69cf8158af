"""Selection of the path override rule that applies to a request."""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from ..core.types import OverrideRule
from ..matching.paths import candidate_paths, matches


def rule_sort_key(rule: OverrideRule) -> tuple[int, int]:
    """Priority order: weight descending, then id ascending."""
    return (-rule.weight, rule.id)


def rule_applies(
    rule: OverrideRule,
    paths: tuple[str, ...],
    language: str,
    domain: str,
) -> bool:
    """Check path, language and domain scoping for a single rule.

    Args:
        rule: Candidate rule.
        paths: Paths the request is matched as.
        language: Current language code.
        domain: Current hostname.

    Returns:
        True if every scoping condition of the rule is satisfied.
    """
    if not any(matches(path, rule.path_pattern) for path in paths):
        return False
    if rule.language and rule.language != language:
        return False
    if rule.domains and domain not in rule.domains:
        return False
    return True


def resolve_override(
    path: str,
    language: str,
    domain: str,
    rules: Iterable[OverrideRule],
    *,
    front_page: bool = False,
) -> OverrideRule | None:
    """Select the highest-priority active rule matching a request.

    Disabled rules are ignored. Remaining rules are tried by weight
    (highest first) with ties going to the lowest id; the first rule whose
    path pattern, language and domains all accept the request wins.

    Args:
        path: Normalized request path.
        language: Current language code.
        domain: Current hostname.
        rules: Rule set in any order.
        front_page: Whether the request is for the site home page, which
            also makes ``<front>`` patterns eligible.

    Returns:
        The selected rule, or None if no rule matches.
    """
    paths = candidate_paths(path, front_page)
    active = sorted((rule for rule in rules if rule.status), key=rule_sort_key)

    for rule in active:
        if rule_applies(rule, paths, language, domain):
            logger.debug(
                f"Override rule matched: id={rule.id}, pattern={rule.path_pattern!r}, path={path!r}"
            )
            return rule

    logger.debug(f"No override rule for path={path!r} ({len(active)} active)")
    return None
