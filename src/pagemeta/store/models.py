"""SQLAlchemy ORM models for the pagemeta storage layer.

These mirror the tables created by schema.py and serve as the target
metadata for Alembic migrations. Column types, nullability and indexes
must match schema.py.
"""

from typing import Optional

from sqlalchemy import Index, Integer, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models in pagemeta."""

    pass


class PathOverrideModel(Base):
    """An administrator-defined metadata override bound to a path pattern.

    ``domains`` holds a JSON list of hostnames, or NULL for all domains.
    """

    __tablename__ = "path_overrides"
    __table_args__ = (Index("idx_path_overrides_status", "status"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    path: Mapped[str] = mapped_column(Text, nullable=False)
    domains: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    language: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    title: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    weight: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    status: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")
    created_at: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False)


class EntityMetadataModel(Base):
    """Explicit metadata for a content item or taxonomy term."""

    __tablename__ = "entity_metadata"
    __table_args__ = (
        UniqueConstraint("entity_type", "entity_id", name="uq_entity_metadata_entity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entity_type: Mapped[str] = mapped_column(Text, nullable=False)
    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False)
