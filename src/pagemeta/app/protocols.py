"""Protocol definitions for pagemeta collaborators.

Resolution depends on two external services, expressed here as Protocol
types so that storage and content backends can be swapped (and faked in
tests) without touching the resolvers:

- RuleStoreProtocol: CRUD over path override rules
- ContentProviderProtocol: read-only access to entities, their metadata
  records and their assets

Implementations signal an unreachable backend by raising LookupFailure;
callers on the resolution path treat that as "no data".

Example:
    class MetatagGenerator:
        def __init__(
            self,
            rule_store: RuleStoreProtocol,
            content_provider: ContentProviderProtocol,
        ):
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import (
        ContentItem,
        Entity,
        EntityMetadataRecord,
        EntityType,
        OverrideRule,
        RuleFields,
    )


@runtime_checkable
class RuleStoreProtocol(Protocol):
    """Storage for path override rules.

    Only list_active_rules() is used during resolution; the remaining
    methods back rule administration.
    """

    def list_active_rules(self) -> Sequence["OverrideRule"]:
        """Get enabled rules in unspecified order."""
        ...

    def list_rules(self) -> list["OverrideRule"]:
        """Get all rules ordered by id."""
        ...

    def get_rule(self, rule_id: int) -> "OverrideRule | None":
        """Get a rule by id."""
        ...

    def create_rule(self, fields: "RuleFields") -> "OverrideRule":
        """Create a rule and assign its id."""
        ...

    def update_rule(self, rule_id: int, fields: "RuleFields") -> "OverrideRule":
        """Replace the writable fields of a rule."""
        ...

    def delete_rule(self, rule_id: int) -> None:
        """Delete a rule."""
        ...


@runtime_checkable
class ContentProviderProtocol(Protocol):
    """Read-only access to content entities."""

    def current_entity_in_context(self) -> "Entity | None":
        """Get the entity the current request is about, if any."""
        ...

    def get_entity_metadata_record(
        self, entity_type: "EntityType", entity_id: int
    ) -> "EntityMetadataRecord | None":
        """Get the explicit metadata record for an entity."""
        ...

    def resolve_asset_url(self, asset_ref: str) -> str | None:
        """Get the absolute URL of a stored asset, or None if unknown."""
        ...

    def find_most_recent_referencing_content(
        self, term_id: int
    ) -> "ContentItem | None":
        """Get the newest published content item referencing a term."""
        ...


@runtime_checkable
class EntityMetadataStoreProtocol(Protocol):
    """Storage for explicit entity metadata records."""

    def get(
        self, entity_type: "EntityType", entity_id: int
    ) -> "EntityMetadataRecord | None":
        """Get the record for an entity."""
        ...
