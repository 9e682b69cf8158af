"""Type definitions for pagemeta."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Optional

# Keys of a resolved metadata mapping
TITLE = "title"
OG_TITLE = "og:title"
DESCRIPTION = "description"
OG_DESCRIPTION = "og:description"
OG_IMAGE = "og:image"
OG_URL = "og:url"

METADATA_KEYS = (TITLE, OG_TITLE, DESCRIPTION, OG_DESCRIPTION, OG_IMAGE, OG_URL)

# Final metadata handed to the rendering layer. Only non-empty values are
# present; og:url is always set.
ResolvedMetadata = dict[str, str]


class EntityType(Enum):
    """Kinds of content entity that carry metadata."""

    CONTENT_ITEM = "node"
    TAXONOMY_TERM = "taxonomy_term"


@dataclass(frozen=True)
class RequestContext:
    """Per-request values read during resolution.

    Attributes:
        path: Normalized request path (e.g. "/blog/post-1").
        language: Current language code.
        domain: Hostname the request was served on.
        base_url: Site base address, no trailing slash required.
        is_front_page: True when the request is for the site home page.
    """

    path: str
    language: str = ""
    domain: str = ""
    base_url: str = ""
    is_front_page: bool = False

    @property
    def url(self) -> str:
        """Absolute address of the current request."""
        return self.base_url.rstrip("/") + self.path


@dataclass(frozen=True)
class OverrideRule:
    """Administrator-defined metadata bound to a path pattern."""

    id: int
    path_pattern: str
    title: str = ""
    description: str = ""
    image: Optional[str] = None
    domains: tuple[str, ...] = ()
    language: str = ""
    weight: int = 0
    status: bool = True


@dataclass
class RuleFields:
    """Writable fields of an override rule (everything except the id)."""

    path_pattern: str
    title: str = ""
    description: str = ""
    image: Optional[str] = None
    domains: tuple[str, ...] = ()
    language: str = ""
    weight: int = 0
    status: bool = True


@dataclass(frozen=True)
class EntityMetadataRecord:
    """Explicit metadata attached to a single entity."""

    entity_type: EntityType
    entity_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


@dataclass
class Entity:
    """A content entity as seen by the metadata resolvers.

    Attributes:
        id: Entity identifier, unique within its kind.
        label: Native display name (node title, term name).
        canonical_url: Absolute canonical address.
        body: Long-text rich field used for derived descriptions.
        image: Native image asset reference.
    """

    kind: ClassVar[EntityType]

    id: int
    label: str
    canonical_url: str
    body: Optional[str] = None
    image: Optional[str] = None


@dataclass
class ContentItem(Entity):
    """An article-like content item."""

    kind: ClassVar[EntityType] = EntityType.CONTENT_ITEM

    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    published: bool = True
    # Reference field name -> referenced taxonomy term ids
    references: dict[str, list[int]] = field(default_factory=dict)


@dataclass
class TaxonomyTerm(Entity):
    """A category-like taxonomy term."""

    kind: ClassVar[EntityType] = EntityType.TAXONOMY_TERM

    vocabulary: str = ""


@dataclass
class RuleRow:
    """Display row for the override rule listing."""

    id: int
    path: str
    title: str
    description: str
    domains: str
    language: str
    weight: int
    status: bool
