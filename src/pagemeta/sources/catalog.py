"""In-memory content catalog implementing the content provider protocol.

The catalog holds the entities a site exposes, the assets they point at,
and a precomputed index of reference fields so that "which articles are
tagged with this term" never needs a schema scan at request time.

Example:
    catalog = ContentCatalog(base_url="https://example.com", records=repo)
    catalog.register_reference_field(EntityType.CONTENT_ITEM, "field_tags")
    catalog.add_asset("17", "/files/cover.jpg")
    catalog.add(ContentItem(id=1, label="Post", canonical_url="...",
                            image="17", references={"field_tags": [3]}))
    catalog.set_current(EntityType.CONTENT_ITEM, 1)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from loguru import logger

from ..core.exceptions import MalformedRecordError
from ..core.types import (
    ContentItem,
    Entity,
    EntityMetadataRecord,
    EntityType,
    TaxonomyTerm,
)

if TYPE_CHECKING:
    from ..app.protocols import EntityMetadataStoreProtocol

_ABSOLUTE_PREFIXES = ("http://", "https://")
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class ContentCatalog:
    """Registry of entities and assets for one site."""

    def __init__(
        self,
        base_url: str = "",
        records: "EntityMetadataStoreProtocol | None" = None,
    ) -> None:
        """Initialize an empty catalog.

        Args:
            base_url: Site base address used to build asset URLs.
            records: Store of explicit entity metadata records.
        """
        self.base_url = base_url.rstrip("/")
        self._records = records
        self._entities: dict[tuple[EntityType, int], Entity] = {}
        self._assets: dict[str, str] = {}
        # entity type -> names of its fields that reference taxonomy terms
        self._reference_fields: dict[EntityType, set[str]] = {}
        self._current: tuple[EntityType, int] | None = None

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add(self, entity: Entity) -> None:
        """Register or replace an entity."""
        self._entities[(entity.kind, entity.id)] = entity

    def add_asset(self, asset_id: str, public_path: str) -> None:
        """Register a stored asset under its id.

        Args:
            asset_id: Opaque reference stored on rules, records and entities.
            public_path: Site-relative path or absolute URL of the file.
        """
        self._assets[str(asset_id)] = public_path

    def register_reference_field(
        self,
        entity_type: EntityType,
        field_name: str,
        target_type: EntityType = EntityType.TAXONOMY_TERM,
    ) -> None:
        """Declare an entity reference field.

        Only fields targeting taxonomy terms are indexed; others are ignored.
        """
        if target_type is not EntityType.TAXONOMY_TERM:
            return
        self._reference_fields.setdefault(entity_type, set()).add(field_name)

    def reference_fields(self, entity_type: EntityType) -> frozenset[str]:
        """Get the indexed taxonomy reference fields of an entity type."""
        return frozenset(self._reference_fields.get(entity_type, ()))

    def set_current(self, entity_type: EntityType | None, entity_id: int | None = None) -> None:
        """Set (or clear, with None) the entity the current request is about."""
        if entity_type is None or entity_id is None:
            self._current = None
        else:
            self._current = (entity_type, entity_id)

    def get(self, entity_type: EntityType, entity_id: int) -> Entity | None:
        """Get a registered entity."""
        return self._entities.get((entity_type, entity_id))

    # -------------------------------------------------------------------------
    # Content provider protocol
    # -------------------------------------------------------------------------

    def current_entity_in_context(self) -> Entity | None:
        """Get the entity set with set_current(), if registered."""
        if self._current is None:
            return None
        return self._entities.get(self._current)

    def get_entity_metadata_record(
        self, entity_type: EntityType, entity_id: int
    ) -> EntityMetadataRecord | None:
        """Get the explicit metadata record for an entity from the record store."""
        if self._records is None:
            return None
        return self._records.get(entity_type, entity_id)

    def resolve_asset_url(self, asset_ref: str) -> str | None:
        """Get the absolute URL of an asset.

        Absolute http(s) references are returned unchanged. Registered asset
        ids resolve against the site base address. Anything else is unknown.
        """
        if not asset_ref:
            return None
        if asset_ref.startswith(_ABSOLUTE_PREFIXES):
            return asset_ref

        public_path = self._assets.get(str(asset_ref))
        if public_path is None:
            return None
        if public_path.startswith(_ABSOLUTE_PREFIXES):
            return public_path
        return f"{self.base_url}/{public_path.lstrip('/')}"

    def find_most_recent_referencing_content(self, term_id: int) -> ContentItem | None:
        """Get the newest published content item tagged with a term.

        Only fields declared with register_reference_field() are consulted.
        Creation times without a UTC offset are taken as UTC. Ties on
        creation time go to the higher id.
        """
        fields = self.reference_fields(EntityType.CONTENT_ITEM)
        if not fields:
            return None

        candidates = [
            entity
            for entity in self._entities.values()
            if isinstance(entity, ContentItem)
            and entity.published
            and any(term_id in entity.references.get(name, ()) for name in fields)
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda item: (as_utc(item.created), item.id))

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        base_url: str = "",
        records: "EntityMetadataStoreProtocol | None" = None,
    ) -> "ContentCatalog":
        """Build a catalog from a JSON-shaped mapping.

        Expected keys (all optional): ``assets`` (id -> path),
        ``reference_fields`` (list of content item field names),
        ``content_items`` and ``taxonomy_terms`` (lists of entity mappings).

        Raises:
            MalformedRecordError: If an entity mapping is missing required keys.
        """
        catalog = cls(base_url=base_url, records=records)

        for asset_id, path in data.get("assets", {}).items():
            catalog.add_asset(asset_id, path)

        for field_name in data.get("reference_fields", []):
            catalog.register_reference_field(EntityType.CONTENT_ITEM, field_name)

        try:
            for item in data.get("content_items", []):
                catalog.add(
                    ContentItem(
                        id=int(item["id"]),
                        label=item.get("title", ""),
                        canonical_url=item["url"],
                        body=item.get("body"),
                        image=_optional_str(item.get("image")),
                        created=as_utc(datetime.fromisoformat(item["created"]))
                        if item.get("created")
                        else _EARLIEST,
                        published=bool(item.get("published", True)),
                        references={
                            name: [int(t) for t in ids]
                            for name, ids in item.get("references", {}).items()
                        },
                    )
                )

            for term in data.get("taxonomy_terms", []):
                catalog.add(
                    TaxonomyTerm(
                        id=int(term["id"]),
                        label=term.get("name", ""),
                        canonical_url=term["url"],
                        body=term.get("description"),
                        image=_optional_str(term.get("image")),
                        vocabulary=term.get("vocabulary", ""),
                    )
                )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedRecordError(f"Invalid catalog entry: {e}") from e

        logger.debug(f"Catalog loaded: {len(catalog._entities)} entities, {len(catalog._assets)} assets")
        return catalog


def _optional_str(value: Any) -> str | None:
    return str(value) if value not in (None, "") else None


def as_utc(value: datetime) -> datetime:
    """Convert to an aware UTC datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
