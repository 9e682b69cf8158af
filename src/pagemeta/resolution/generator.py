"""Metatag generation for a single page request.

Control flow:
1. Fetch the active rule set once and look for a path override. A matched
   rule is authoritative: metadata is built from the rule alone.
2. Otherwise resolve the entity in context through its metadata record and
   native fields.
3. With neither, emit only og:url.

Collaborator failures never abort a request. A rule store or content
provider that raises PageMetaError is treated as having no data and
resolution continues with the next step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from loguru import logger

from ..core.exceptions import PageMetaError
from ..core.types import (
    Entity,
    EntityMetadataRecord,
    OverrideRule,
    RequestContext,
    ResolvedMetadata,
)
from .assembler import build_from_rule, minimal_metadata
from .entities import EntityMetadataResolver
from .overrides import resolve_override

if TYPE_CHECKING:
    from ..app.protocols import ContentProviderProtocol, RuleStoreProtocol


class MetatagGenerator:
    """Resolve page metadata from override rules and entity content.

    Holds no per-request state; one instance may serve concurrent requests.

    Example:
        generator = MetatagGenerator(rule_store, catalog)
        context = RequestContext(path="/about", language="en",
                                 domain="example.com",
                                 base_url="https://example.com")
        metadata = generator.generate(context)
    """

    def __init__(
        self,
        rule_store: "RuleStoreProtocol",
        content_provider: "ContentProviderProtocol",
        entity_resolver: EntityMetadataResolver | None = None,
    ):
        """Initialize with collaborators.

        Args:
            rule_store: Source of override rules.
            content_provider: Source of entities, records and assets.
            entity_resolver: Resolver for entity metadata; built from the
                content provider when omitted.
        """
        self._rule_store = rule_store
        self._content_provider = content_provider
        self._entity_resolver = entity_resolver or EntityMetadataResolver(
            content_provider
        )

    def generate(
        self,
        context: RequestContext,
        entity: Entity | None = None,
    ) -> ResolvedMetadata:
        """Generate metadata for the current request.

        Args:
            context: Request path, language, domain and base address.
            entity: Entity the page is about; looked up from the content
                provider when not given.

        Returns:
            Resolved metadata; og:url is always present.
        """
        rule = self.find_override(context)
        if rule is not None:
            return build_from_rule(rule, context, self._resolve_asset)

        if entity is None:
            entity = self._current_entity()
        if entity is None:
            logger.debug(f"No override or entity for {context.path!r}")
            return minimal_metadata(context)

        record = self._metadata_record(entity)
        return self._entity_resolver.resolve_for_entity(entity, record)

    def find_override(self, context: RequestContext) -> OverrideRule | None:
        """Select the override rule for a request, if any."""
        return resolve_override(
            context.path,
            context.language,
            context.domain,
            self._active_rules(),
            front_page=context.is_front_page,
        )

    def _active_rules(self) -> Sequence[OverrideRule]:
        try:
            return self._rule_store.list_active_rules()
        except PageMetaError as e:
            logger.warning(f"Rule store unavailable, skipping path overrides: {e}")
            return ()

    def _current_entity(self) -> Entity | None:
        try:
            return self._content_provider.current_entity_in_context()
        except PageMetaError as e:
            logger.warning(f"Content provider unavailable: {e}")
            return None

    def _metadata_record(self, entity: Entity) -> EntityMetadataRecord | None:
        try:
            return self._content_provider.get_entity_metadata_record(
                entity.kind, entity.id
            )
        except PageMetaError as e:
            logger.warning(
                f"Metadata record lookup failed for {entity.kind.value}:{entity.id}: {e}"
            )
            return None

    def _resolve_asset(self, asset_ref: str) -> str | None:
        try:
            return self._content_provider.resolve_asset_url(asset_ref)
        except PageMetaError as e:
            logger.warning(f"Asset lookup failed for {asset_ref!r}: {e}")
            return None
