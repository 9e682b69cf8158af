"""Override rule CRUD operations for pagemeta."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone

from loguru import logger

from ..core.exceptions import MalformedRecordError, RuleNotFoundError
from ..core.types import OverrideRule, RuleFields
from .database import Database


def encode_domains(domains: tuple[str, ...] | list[str]) -> str | None:
    """Serialize a domain list for storage; empty means no restriction."""
    return json.dumps(list(domains)) if domains else None


def decode_domains(raw: str | None) -> tuple[str, ...]:
    """Parse a stored domain list.

    Raises:
        MalformedRecordError: If the value is not a JSON list of strings.
    """
    if not raw:
        return ()
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"Unparseable domain list: {raw!r}") from e
    if not isinstance(value, list) or not all(isinstance(d, str) for d in value):
        raise MalformedRecordError(f"Domain list is not a list of strings: {raw!r}")
    return tuple(value)


def text_column(row: sqlite3.Row, column: str) -> str | None:
    """Read a nullable text column.

    Raises:
        MalformedRecordError: If the stored value is not text.
    """
    value = row[column]
    if value is not None and not isinstance(value, str):
        raise MalformedRecordError(
            f"Column {column!r} holds {type(value).__name__}, expected text"
        )
    return value


class PathRuleRepository:
    """Repository for path override rules."""

    def __init__(self, db: Database):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
        """
        self.db = db

    def list_active_rules(self) -> list[OverrideRule]:
        """Get enabled rules.

        Rows whose domain list cannot be parsed are skipped.

        Returns:
            Active rules in storage order.
        """
        cursor = self.db.execute("SELECT * FROM path_overrides WHERE status = 1")
        return self._parse_rows(cursor.fetchall())

    def list_rules(self) -> list[OverrideRule]:
        """Get all rules ordered by id."""
        cursor = self.db.execute("SELECT * FROM path_overrides ORDER BY id ASC")
        return self._parse_rows(cursor.fetchall())

    def get_rule(self, rule_id: int) -> OverrideRule | None:
        """Get a rule by id.

        Args:
            rule_id: Rule id to look up.

        Returns:
            OverrideRule if found and readable, None otherwise.
        """
        cursor = self.db.execute(
            "SELECT * FROM path_overrides WHERE id = ?", (rule_id,)
        )
        row = cursor.fetchone()
        if not row:
            return None
        rules = self._parse_rows([row])
        return rules[0] if rules else None

    def create_rule(self, fields: RuleFields) -> OverrideRule:
        """Create a new rule.

        Args:
            fields: Values for the new rule.

        Returns:
            Created rule with its assigned id.
        """
        now = datetime.now(timezone.utc).isoformat()

        with self.db.transaction() as cursor:
            cursor.execute(
                """
                INSERT INTO path_overrides (
                    path, domains, language, title, description,
                    image, weight, status, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (*self._field_values(fields), now, now),
            )
            rule_id = cursor.lastrowid

        logger.info(f"Override rule created: id={rule_id}, path={fields.path_pattern!r}")
        return self._to_rule(rule_id, fields)  # type: ignore[arg-type]

    def update_rule(self, rule_id: int, fields: RuleFields) -> OverrideRule:
        """Replace the writable fields of a rule.

        Raises:
            RuleNotFoundError: If the rule does not exist.
        """
        now = datetime.now(timezone.utc).isoformat()

        with self.db.transaction() as cursor:
            cursor.execute(
                """
                UPDATE path_overrides SET
                    path = ?, domains = ?, language = ?, title = ?,
                    description = ?, image = ?, weight = ?, status = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (*self._field_values(fields), now, rule_id),
            )
            updated = cursor.rowcount

        if not updated:
            raise RuleNotFoundError(rule_id)

        logger.info(f"Override rule updated: id={rule_id}, path={fields.path_pattern!r}")
        return self._to_rule(rule_id, fields)

    def delete_rule(self, rule_id: int) -> None:
        """Delete a rule.

        Raises:
            RuleNotFoundError: If the rule does not exist.
        """
        with self.db.transaction() as cursor:
            cursor.execute("DELETE FROM path_overrides WHERE id = ?", (rule_id,))
            deleted = cursor.rowcount

        if not deleted:
            raise RuleNotFoundError(rule_id)

        logger.info(f"Override rule deleted: id={rule_id}")

    def _field_values(self, fields: RuleFields) -> tuple:
        return (
            fields.path_pattern,
            encode_domains(fields.domains),
            fields.language,
            fields.title,
            fields.description,
            fields.image or None,
            fields.weight,
            1 if fields.status else 0,
        )

    def _to_rule(self, rule_id: int, fields: RuleFields) -> OverrideRule:
        return OverrideRule(
            id=rule_id,
            path_pattern=fields.path_pattern,
            title=fields.title,
            description=fields.description,
            image=fields.image or None,
            domains=tuple(fields.domains),
            language=fields.language,
            weight=fields.weight,
            status=fields.status,
        )

    def _parse_rows(self, rows: list[sqlite3.Row]) -> list[OverrideRule]:
        rules = []
        for row in rows:
            try:
                rules.append(self._row_to_rule(row))
            except MalformedRecordError as e:
                logger.warning(f"Skipping override rule {row['id']}: {e}")
        return rules

    def _row_to_rule(self, row: sqlite3.Row) -> OverrideRule:
        return OverrideRule(
            id=row["id"],
            path_pattern=text_column(row, "path"),
            title=text_column(row, "title") or "",
            description=text_column(row, "description") or "",
            image=text_column(row, "image") or None,
            domains=decode_domains(text_column(row, "domains")),
            language=text_column(row, "language") or "",
            weight=row["weight"],
            status=bool(row["status"]),
        )
