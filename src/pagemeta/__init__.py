"""pagemeta: page metadata from path overrides and entity fallbacks."""

from .core.types import RequestContext, ResolvedMetadata
from .matching.paths import matches
from .resolution.entities import EntityMetadataResolver
from .resolution.generator import MetatagGenerator
from .resolution.overrides import resolve_override
from .text import summarize

__version__ = "1.0.0"

__all__ = [
    "EntityMetadataResolver",
    "MetatagGenerator",
    "RequestContext",
    "ResolvedMetadata",
    "matches",
    "resolve_override",
    "summarize",
]
