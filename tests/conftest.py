"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from pagemeta.core.types import ContentItem, RequestContext, TaxonomyTerm
from pagemeta.store.database import Database
from pagemeta.store.entity_metadata import EntityMetadataRepository
from pagemeta.store.rules import PathRuleRepository

BASE_URL = "https://example.com"


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def rule_repo(db: Database) -> PathRuleRepository:
    """Provide a PathRuleRepository instance."""
    return PathRuleRepository(db)


@pytest.fixture
def record_repo(db: Database) -> EntityMetadataRepository:
    """Provide an EntityMetadataRepository instance."""
    return EntityMetadataRepository(db)


@pytest.fixture
def make_context():
    """Factory for request contexts on the test site."""

    def _make(
        path: str = "/",
        language: str = "en",
        domain: str = "example.com",
        front_page: bool = False,
    ) -> RequestContext:
        return RequestContext(
            path=path,
            language=language,
            domain=domain,
            base_url=BASE_URL,
            is_front_page=front_page,
        )

    return _make


@pytest.fixture
def article() -> ContentItem:
    """Provide a published article with a body and image."""
    return ContentItem(
        id=10,
        label="Default",
        canonical_url=f"{BASE_URL}/node/10",
        body="<p>Article   body text.</p>",
        image="img-article",
        created=datetime(2024, 5, 1, 12, 0),
        references={"field_tags": [3]},
    )


@pytest.fixture
def term() -> TaxonomyTerm:
    """Provide a taxonomy term without body or image."""
    return TaxonomyTerm(
        id=3,
        label="Gardening",
        canonical_url=f"{BASE_URL}/taxonomy/term/3",
        vocabulary="tags",
    )
