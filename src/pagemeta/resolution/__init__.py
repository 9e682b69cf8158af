"""Metadata resolution: path overrides, entity fallbacks and assembly."""

from .assembler import build_from_rule, minimal_metadata
from .entities import (
    ContentItemProfile,
    EntityMetadataResolver,
    MetadataProfile,
    TaxonomyTermProfile,
)
from .generator import MetatagGenerator
from .overrides import resolve_override, rule_applies, rule_sort_key

__all__ = [
    "ContentItemProfile",
    "EntityMetadataResolver",
    "MetadataProfile",
    "MetatagGenerator",
    "TaxonomyTermProfile",
    "build_from_rule",
    "minimal_metadata",
    "resolve_override",
    "rule_applies",
    "rule_sort_key",
]
