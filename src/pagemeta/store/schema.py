"""Database schema definitions for pagemeta."""

SCHEMA_VERSION = 1

SCHEMA_SQL = """\
-- Path-based override rules
CREATE TABLE IF NOT EXISTS path_overrides (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    path TEXT NOT NULL,
    domains TEXT,
    language TEXT NOT NULL DEFAULT '',
    title TEXT NOT NULL DEFAULT '',
    description TEXT NOT NULL DEFAULT '',
    image TEXT,
    weight INTEGER NOT NULL DEFAULT 0,
    status INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

-- Explicit metadata attached to entities
CREATE TABLE IF NOT EXISTS entity_metadata (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    entity_type TEXT NOT NULL,
    entity_id INTEGER NOT NULL,
    title TEXT,
    description TEXT,
    image TEXT,
    updated_at TEXT NOT NULL,
    CONSTRAINT uq_entity_metadata_entity UNIQUE (entity_type, entity_id)
);

CREATE INDEX IF NOT EXISTS idx_path_overrides_status ON path_overrides(status);
"""


def get_schema() -> str:
    """Get the full schema SQL."""
    return SCHEMA_SQL
