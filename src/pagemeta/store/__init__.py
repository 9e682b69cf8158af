"""SQLite storage for override rules and entity metadata records."""

from .database import Database
from .entity_metadata import EntityMetadataRepository
from .rules import PathRuleRepository, decode_domains, encode_domains

__all__ = [
    "Database",
    "EntityMetadataRepository",
    "PathRuleRepository",
    "decode_domains",
    "encode_domains",
]
