"""SQLite storage for override rules and entity metadata records."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.exceptions import DatabaseError
from .schema import SCHEMA_VERSION, get_schema

MEMORY = ":memory:"


class Database:
    """Single SQLite connection shared by the pagemeta repositories.

    The schema is applied when the connection opens and its version is
    recorded in ``PRAGMA user_version``. A file written by a newer schema
    is refused rather than silently misread.

    Example:
        db = Database(Path("~/.cache/pagemeta/pagemeta.db").expanduser())
        db.connect()
        with db.transaction() as cursor:
            cursor.execute("DELETE FROM path_overrides WHERE status = 0")
    """

    def __init__(self, path: Path | str):
        """Initialize with a database location.

        Args:
            path: SQLite file path, or ":memory:" for a private in-memory store.
        """
        self.path = path if str(path) == MEMORY else Path(path)
        self._connection: sqlite3.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> None:
        """Open the connection and bring the schema up to date.

        Calling connect() on an open database does nothing.

        Raises:
            DatabaseError: If the file cannot be opened or was written by a
                newer schema version.
        """
        if self._connection is not None:
            return

        try:
            if isinstance(self.path, Path):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            connection = sqlite3.connect(str(self.path))
            connection.row_factory = sqlite3.Row
            connection.execute("PRAGMA foreign_keys = ON")
            self._apply_schema(connection)
        except DatabaseError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to connect to database: {e}") from e

        self._connection = connection
        logger.debug(f"Database connected: {self.path} (schema v{SCHEMA_VERSION})")

    def close(self) -> None:
        """Close the connection if open."""
        connection, self._connection = self._connection, None
        if connection is None:
            return
        try:
            connection.close()
        except Exception as e:
            raise DatabaseError(f"Failed to close database: {e}") from e

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Run statements atomically.

        Commits when the block exits normally. Any exception rolls back and
        is re-raised as DatabaseError.

        Yields:
            Cursor bound to the transaction.
        """
        connection = self._require_connection()
        cursor = connection.cursor()
        try:
            yield cursor
            connection.commit()
        except Exception as e:
            connection.rollback()
            raise DatabaseError(f"Transaction failed: {e}") from e
        finally:
            cursor.close()

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run a single read query outside a transaction.

        Raises:
            DatabaseError: If not connected or the query fails.
        """
        connection = self._require_connection()
        try:
            return connection.execute(sql, params)
        except Exception as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def _require_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("Database not connected")
        return self._connection

    def _apply_schema(self, connection: sqlite3.Connection) -> None:
        version = connection.execute("PRAGMA user_version").fetchone()[0]
        if version > SCHEMA_VERSION:
            connection.close()
            raise DatabaseError(
                f"Database {self.path} has schema v{version}, "
                f"this version of pagemeta supports up to v{SCHEMA_VERSION}"
            )

        connection.executescript(get_schema())
        if version < SCHEMA_VERSION:
            connection.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
            logger.info(f"Database schema set to v{SCHEMA_VERSION}: {self.path}")
