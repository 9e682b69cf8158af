"""Explicit entity metadata record storage for pagemeta."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone

from loguru import logger

from ..core.exceptions import MalformedRecordError
from ..core.types import EntityMetadataRecord, EntityType
from .database import Database
from .rules import text_column


class EntityMetadataRepository:
    """Repository for per-entity metadata records.

    At most one record exists per (entity_type, entity_id).
    """

    def __init__(self, db: Database):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
        """
        self.db = db

    def get(self, entity_type: EntityType, entity_id: int) -> EntityMetadataRecord | None:
        """Get the record for an entity.

        Args:
            entity_type: Kind of the entity.
            entity_id: Entity id.

        Returns:
            The record, or None if there is none or it is unreadable.
        """
        cursor = self.db.execute(
            "SELECT * FROM entity_metadata WHERE entity_type = ? AND entity_id = ?",
            (entity_type.value, entity_id),
        )
        row = cursor.fetchone()
        if not row:
            return None
        try:
            return self._row_to_record(row)
        except MalformedRecordError as e:
            logger.warning(
                f"Ignoring entity metadata for {entity_type.value}:{entity_id}: {e}"
            )
            return None

    def upsert(self, record: EntityMetadataRecord) -> None:
        """Insert or replace the record for an entity."""
        now = datetime.now(timezone.utc).isoformat()

        with self.db.transaction() as cursor:
            cursor.execute(
                """
                INSERT INTO entity_metadata (
                    entity_type, entity_id, title, description, image, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(entity_type, entity_id) DO UPDATE SET
                    title = excluded.title,
                    description = excluded.description,
                    image = excluded.image,
                    updated_at = excluded.updated_at
                """,
                (
                    record.entity_type.value,
                    record.entity_id,
                    record.title,
                    record.description,
                    record.image,
                    now,
                ),
            )

        logger.info(
            f"Entity metadata saved: {record.entity_type.value}:{record.entity_id}"
        )

    def delete(self, entity_type: EntityType, entity_id: int) -> bool:
        """Delete the record for an entity.

        Returns:
            True if a record was deleted, False if none existed.
        """
        with self.db.transaction() as cursor:
            cursor.execute(
                "DELETE FROM entity_metadata WHERE entity_type = ? AND entity_id = ?",
                (entity_type.value, entity_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Entity metadata deleted: {entity_type.value}:{entity_id}")
        return deleted

    def _row_to_record(self, row: sqlite3.Row) -> EntityMetadataRecord:
        return EntityMetadataRecord(
            entity_type=EntityType(row["entity_type"]),
            entity_id=row["entity_id"],
            title=text_column(row, "title"),
            description=text_column(row, "description"),
            image=text_column(row, "image"),
        )
