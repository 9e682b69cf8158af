"""Administration of path override rules.

Wraps a rule store with the input handling and listing format used by the
management surfaces (CLI, admin views): domain text parsing, field checks
and the condensed listing row.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from loguru import logger

from ..core.exceptions import RuleNotFoundError, ValidationError
from ..core.types import OverrideRule, RuleFields, RuleRow
from ..text import LIST_EXCERPT_LENGTH, excerpt

if TYPE_CHECKING:
    from ..app.protocols import RuleStoreProtocol

ALL_LABEL = "All"
EMPTY_LABEL = "-"
MAX_LANGUAGE_LENGTH = 12
MAX_TITLE_LENGTH = 255
MAX_IMAGE_LENGTH = 512


def parse_domains(text: str | None) -> tuple[str, ...]:
    """Parse one hostname per line, dropping blanks and surrounding spaces."""
    if not text:
        return ()
    return tuple(line.strip() for line in text.splitlines() if line.strip())


def validate_fields(fields: RuleFields) -> RuleFields:
    """Check and normalize rule fields.

    Raises:
        ValidationError: If a required field is empty or a value is too long.
    """
    path = fields.path_pattern.strip()
    if not path:
        raise ValidationError("Path is required")
    if len(fields.language) > MAX_LANGUAGE_LENGTH:
        raise ValidationError(f"Language code longer than {MAX_LANGUAGE_LENGTH} characters")
    if len(fields.title) > MAX_TITLE_LENGTH:
        raise ValidationError(f"Title longer than {MAX_TITLE_LENGTH} characters")
    if fields.image and len(fields.image) > MAX_IMAGE_LENGTH:
        raise ValidationError(f"Image reference longer than {MAX_IMAGE_LENGTH} characters")

    return replace(
        fields,
        path_pattern=path,
        language=fields.language.strip(),
        domains=tuple(d.strip() for d in fields.domains if d.strip()),
        image=fields.image.strip() if fields.image else None,
    )


def to_row(rule: OverrideRule, excerpt_length: int = LIST_EXCERPT_LENGTH) -> RuleRow:
    """Condense a rule for listing."""
    return RuleRow(
        id=rule.id,
        path=rule.path_pattern,
        title=rule.title,
        description=excerpt(rule.description, excerpt_length) or EMPTY_LABEL,
        domains=", ".join(rule.domains) if rule.domains else ALL_LABEL,
        language=rule.language or ALL_LABEL,
        weight=rule.weight,
        status=rule.status,
    )


class RuleAdminService:
    """Create, edit, remove and list override rules."""

    def __init__(
        self,
        rule_store: "RuleStoreProtocol",
        excerpt_length: int = LIST_EXCERPT_LENGTH,
    ):
        """Initialize with a rule store.

        Args:
            rule_store: Store the rules live in.
            excerpt_length: Description cap for listing rows.
        """
        self._rule_store = rule_store
        self._excerpt_length = excerpt_length

    def list_rows(self) -> list[RuleRow]:
        """List every rule, in id order, as display rows."""
        rules = sorted(self._rule_store.list_rules(), key=lambda r: r.id)
        return [to_row(rule, self._excerpt_length) for rule in rules]

    def get(self, rule_id: int) -> OverrideRule:
        """Get a rule.

        Raises:
            RuleNotFoundError: If the rule does not exist.
        """
        rule = self._rule_store.get_rule(rule_id)
        if rule is None:
            raise RuleNotFoundError(rule_id)
        return rule

    def create(self, fields: RuleFields) -> OverrideRule:
        """Validate and store a new rule."""
        rule = self._rule_store.create_rule(validate_fields(fields))
        logger.debug(f"Created override {rule.id} for {rule.path_pattern!r}")
        return rule

    def update(self, rule_id: int, fields: RuleFields) -> OverrideRule:
        """Validate and replace an existing rule's fields."""
        rule = self._rule_store.update_rule(rule_id, validate_fields(fields))
        logger.debug(f"Updated override {rule.id} for {rule.path_pattern!r}")
        return rule

    def delete(self, rule_id: int) -> None:
        """Remove a rule."""
        self._rule_store.delete_rule(rule_id)
        logger.debug(f"Deleted override {rule_id}")
