"""Core configuration, errors and types for pagemeta."""

from .config import Config, SiteConfig, SummaryConfig
from .exceptions import (
    DatabaseError,
    LookupFailure,
    MalformedRecordError,
    PageMetaError,
    RuleError,
    RuleNotFoundError,
    UnsupportedEntityError,
    ValidationError,
)
from .types import (
    ContentItem,
    Entity,
    EntityMetadataRecord,
    EntityType,
    OverrideRule,
    RequestContext,
    ResolvedMetadata,
    RuleFields,
    RuleRow,
    TaxonomyTerm,
)

__all__ = [
    "Config",
    "SiteConfig",
    "SummaryConfig",
    "PageMetaError",
    "DatabaseError",
    "RuleError",
    "RuleNotFoundError",
    "LookupFailure",
    "MalformedRecordError",
    "UnsupportedEntityError",
    "ValidationError",
    "ContentItem",
    "Entity",
    "EntityMetadataRecord",
    "EntityType",
    "OverrideRule",
    "RequestContext",
    "ResolvedMetadata",
    "RuleFields",
    "RuleRow",
    "TaxonomyTerm",
]
