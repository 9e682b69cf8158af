"""Application composition root.

Example:
    from pagemeta.app import create_application
    from pagemeta.core.config import Config

    with create_application(Config.from_env()) as app:
        metadata = app.generator.generate(app.request_context("/about"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .application import Application

if TYPE_CHECKING:
    from ..core.config import Config


def create_application(
    config: "Config",
    catalog_data: dict[str, Any] | None = None,
) -> Application:
    """Create and wire a configured Application.

    Args:
        config: Application configuration.
        catalog_data: Optional JSON-shaped catalog (see ContentCatalog.from_dict).

    Returns:
        Application with a connected database.
    """
    from pagemeta.resolution.entities import EntityMetadataResolver
    from pagemeta.resolution.generator import MetatagGenerator
    from pagemeta.services.overrides import RuleAdminService
    from pagemeta.sources.catalog import ContentCatalog
    from pagemeta.store.database import Database
    from pagemeta.store.entity_metadata import EntityMetadataRepository
    from pagemeta.store.rules import PathRuleRepository

    db = Database(config.db_path)
    db.connect()

    rules = PathRuleRepository(db)
    records = EntityMetadataRepository(db)
    catalog = ContentCatalog.from_dict(
        catalog_data or {},
        base_url=config.site.base_url,
        records=records,
    )

    entity_resolver = EntityMetadataResolver(
        catalog,
        description_length=config.summary.description_length,
    )

    return Application(
        db=db,
        config=config,
        rules=rules,
        records=records,
        catalog=catalog,
        generator=MetatagGenerator(rules, catalog, entity_resolver),
        admin=RuleAdminService(rules, excerpt_length=config.summary.excerpt_length),
    )
