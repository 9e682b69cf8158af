"""Application container class.

Use create_application() from pagemeta.app to create a configured instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.types import RequestContext

if TYPE_CHECKING:
    from ..core.config import Config
    from ..resolution.generator import MetatagGenerator
    from ..services.overrides import RuleAdminService
    from ..sources.catalog import ContentCatalog
    from ..store.database import Database
    from ..store.entity_metadata import EntityMetadataRepository
    from ..store.rules import PathRuleRepository


class Application:
    """Application container with wired services and lifecycle management.

    Attributes:
        rules: Rule store backed by the database.
        records: Entity metadata record store.
        catalog: Content provider for entity resolution.
        generator: Metatag generator over rules and catalog.
        admin: Rule administration service.

    Example:
        with create_application(config) as app:
            metadata = app.generator.generate(app.request_context("/about"))
    """

    def __init__(
        self,
        db: "Database",
        config: "Config",
        rules: "PathRuleRepository",
        records: "EntityMetadataRepository",
        catalog: "ContentCatalog",
        generator: "MetatagGenerator",
        admin: "RuleAdminService",
    ):
        """Initialize Application with wired services.

        This constructor is for internal use. Use create_application() instead.
        """
        self._db = db
        self._config = config

        self.rules = rules
        self.records = records
        self.catalog = catalog
        self.generator = generator
        self.admin = admin

    @property
    def db(self) -> "Database":
        """Get database instance."""
        return self._db

    @property
    def config(self) -> "Config":
        """Get application configuration."""
        return self._config

    def request_context(
        self,
        path: str,
        language: str | None = None,
        domain: str = "",
        front_page: bool = False,
    ) -> RequestContext:
        """Build a request context using the configured site defaults."""
        return RequestContext(
            path=path,
            language=self._config.site.default_language if language is None else language,
            domain=domain,
            base_url=self._config.site.base_url,
            is_front_page=front_page,
        )

    def close(self) -> None:
        """Clean shutdown of all resources."""
        self._db.close()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
