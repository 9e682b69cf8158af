"""Entity-derived metadata with per-field fallbacks.

Each entity kind is handled by a metadata profile. A profile knows where
the kind keeps its native title, its long-text body and which images may
stand in when no explicit one is set. The resolver walks the same
fallback chain for every kind:

- title: explicit record -> native label
- description: explicit record -> summarized body
- image: explicit record -> native image -> profile fallbacks
- og:url: canonical URL of the entity, always
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol

from loguru import logger

from ..core.exceptions import PageMetaError, UnsupportedEntityError
from ..core.types import (
    OG_URL,
    Entity,
    EntityMetadataRecord,
    EntityType,
    ResolvedMetadata,
)
from ..text import DESCRIPTION_LENGTH, summarize
from .assembler import set_description, set_image, set_title

if TYPE_CHECKING:
    from ..app.protocols import ContentProviderProtocol


class MetadataProfile(Protocol):
    """Kind-specific sources for the entity fallback chain."""

    kind: EntityType

    def native_title(self, entity: Entity) -> str:
        """Display name of the entity."""
        ...

    def native_body(self, entity: Entity) -> str | None:
        """Rich text that descriptions are derived from."""
        ...

    def fallback_images(
        self, entity: Entity, provider: "ContentProviderProtocol"
    ) -> Iterator[str]:
        """Asset references tried, in order, after the explicit record."""
        ...


class ContentItemProfile:
    """Articles: title, body and their own image field."""

    kind = EntityType.CONTENT_ITEM

    def native_title(self, entity: Entity) -> str:
        return entity.label

    def native_body(self, entity: Entity) -> str | None:
        return entity.body

    def fallback_images(
        self, entity: Entity, provider: "ContentProviderProtocol"
    ) -> Iterator[str]:
        if entity.image:
            yield entity.image


class TaxonomyTermProfile:
    """Categories: fall back to the image of the newest tagged article.

    The referencing article contributes only its native image; its own
    metadata record is not consulted.
    """

    kind = EntityType.TAXONOMY_TERM

    def native_title(self, entity: Entity) -> str:
        return entity.label

    def native_body(self, entity: Entity) -> str | None:
        return entity.body

    def fallback_images(
        self, entity: Entity, provider: "ContentProviderProtocol"
    ) -> Iterator[str]:
        if entity.image:
            yield entity.image

        try:
            item = provider.find_most_recent_referencing_content(entity.id)
        except PageMetaError as e:
            logger.warning(f"Referencing content lookup failed for term {entity.id}: {e}")
            return

        if item is not None and item.image:
            logger.debug(f"Term {entity.id} borrows image from content item {item.id}")
            yield item.image


DEFAULT_PROFILES: tuple[MetadataProfile, ...] = (
    ContentItemProfile(),
    TaxonomyTermProfile(),
)


class EntityMetadataResolver:
    """Resolve metadata for an entity from its record and native fields.

    Example:
        resolver = EntityMetadataResolver(provider)
        metadata = resolver.resolve_for_entity(term, record)
    """

    def __init__(
        self,
        provider: "ContentProviderProtocol",
        profiles: tuple[MetadataProfile, ...] | None = None,
        description_length: int = DESCRIPTION_LENGTH,
    ):
        """Initialize with a content provider and kind profiles.

        Args:
            provider: Source of asset URLs and referencing content.
            profiles: Profiles keyed by their kind; defaults to content
                items and taxonomy terms.
            description_length: Cap for descriptions derived from bodies.
        """
        self._provider = provider
        self._description_length = description_length
        self._profiles: dict[EntityType, MetadataProfile] = {
            profile.kind: profile for profile in (profiles or DEFAULT_PROFILES)
        }

    def profile_for(self, entity: Entity) -> MetadataProfile:
        """Get the profile that handles an entity's kind.

        Raises:
            UnsupportedEntityError: If no profile is registered for the kind.
        """
        kind = getattr(entity, "kind", None)
        profile = self._profiles.get(kind) if kind is not None else None
        if profile is None:
            raise UnsupportedEntityError(
                f"No metadata profile for entity kind: {kind!r}"
            )
        return profile

    def resolve_for_entity(
        self,
        entity: Entity,
        record: EntityMetadataRecord | None = None,
    ) -> ResolvedMetadata:
        """Produce final metadata for an entity.

        Args:
            entity: Content item, taxonomy term, or another registered kind.
            record: Explicit metadata record, or None when there is none.

        Returns:
            Metadata with og:url set to the entity's canonical URL.
        """
        profile = self.profile_for(entity)
        metadata: ResolvedMetadata = {}

        title = record.title if record and record.title else profile.native_title(entity)
        set_title(metadata, title)

        if record and record.description:
            description = record.description
        else:
            description = summarize(profile.native_body(entity), self._description_length)
        set_description(metadata, description)

        set_image(metadata, self._resolve_image(entity, record, profile))

        metadata[OG_URL] = entity.canonical_url
        return metadata

    def _resolve_image(
        self,
        entity: Entity,
        record: EntityMetadataRecord | None,
        profile: MetadataProfile,
    ) -> str | None:
        if record and record.image:
            url = self._asset_url(record.image)
            if url:
                return url

        for asset_ref in profile.fallback_images(entity, self._provider):
            url = self._asset_url(asset_ref)
            if url:
                return url

        return None

    def _asset_url(self, asset_ref: str) -> str | None:
        try:
            url = self._provider.resolve_asset_url(asset_ref)
        except PageMetaError as e:
            logger.warning(f"Asset lookup failed for {asset_ref!r}: {e}")
            return None
        if not url:
            logger.debug(f"Asset {asset_ref!r} did not resolve, skipping")
        return url
