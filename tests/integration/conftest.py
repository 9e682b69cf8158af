"""Fixtures for end-to-end tests against a real database."""

from pathlib import Path

import pytest

from pagemeta.core.config import Config, SiteConfig

SITE_URL = "https://example.com"


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a configuration with a temporary database."""
    return Config(
        db_path=tmp_path / "pagemeta.db",
        site=SiteConfig(base_url=SITE_URL, default_language="en"),
    )


@pytest.fixture
def catalog_data() -> dict:
    """Provide a small site: one tagged article and its term."""
    return {
        "assets": {"5": "/files/hero.jpg", "6": "/files/rule.jpg"},
        "reference_fields": ["field_tags"],
        "content_items": [
            {
                "id": 10,
                "title": "Growing tomatoes",
                "url": f"{SITE_URL}/node/10",
                "body": "<p>Tomatoes   need <b>sun</b>.</p>",
                "image": 5,
                "created": "2024-05-01T12:00:00",
                "references": {"field_tags": [3]},
            }
        ],
        "taxonomy_terms": [
            {"id": 3, "name": "Gardening", "url": f"{SITE_URL}/taxonomy/term/3"}
        ],
    }
