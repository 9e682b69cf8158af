"""Content providers for entity-derived metadata."""

from .catalog import ContentCatalog

__all__ = ["ContentCatalog"]
