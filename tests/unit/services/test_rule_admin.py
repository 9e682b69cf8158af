"""Tests for override rule administration."""

import pytest

from pagemeta.core.exceptions import RuleNotFoundError, ValidationError
from pagemeta.core.types import RuleFields
from pagemeta.services.overrides import (
    RuleAdminService,
    parse_domains,
    to_row,
    validate_fields,
)
from tests.fakes import InMemoryRuleStore, make_rule


class TestParseDomains:
    """Tests for parse_domains."""

    def test_one_per_line(self):
        """Lines are trimmed and blanks dropped."""
        text = " example.com \n\n  shop.example.com\r\n"
        assert parse_domains(text) == ("example.com", "shop.example.com")

    def test_empty(self):
        """Empty input means all domains."""
        assert parse_domains("") == ()
        assert parse_domains(None) == ()


class TestValidateFields:
    """Tests for validate_fields."""

    def test_normalizes(self):
        """Surrounding whitespace is removed."""
        fields = validate_fields(
            RuleFields(path_pattern="  /blog/*  ", language=" en ", domains=(" a.com ", " "), image=" 7 ")
        )
        assert fields.path_pattern == "/blog/*"
        assert fields.language == "en"
        assert fields.domains == ("a.com",)
        assert fields.image == "7"

    def test_path_required(self):
        """A blank path is rejected."""
        with pytest.raises(ValidationError):
            validate_fields(RuleFields(path_pattern="   "))

    @pytest.mark.parametrize(
        "fields",
        [
            RuleFields(path_pattern="/a", language="x" * 13),
            RuleFields(path_pattern="/a", title="t" * 256),
            RuleFields(path_pattern="/a", image="i" * 513),
        ],
    )
    def test_too_long(self, fields):
        """Over-long values are rejected."""
        with pytest.raises(ValidationError):
            validate_fields(fields)


class TestToRow:
    """Tests for the listing row format."""

    def test_unrestricted_rule(self):
        """Empty domains and language display as All; no description as a dash."""
        row = to_row(make_rule(1, "/about", title="About"))

        assert row.domains == "All"
        assert row.language == "All"
        assert row.description == "-"

    def test_restricted_rule(self):
        """Domains are joined with commas."""
        row = to_row(make_rule(2, "/x", domains=("a.com", "b.com"), language="fr"))

        assert row.domains == "a.com, b.com"
        assert row.language == "fr"

    def test_description_excerpt(self):
        """Long descriptions are cut to 80 characters plus an ellipsis."""
        row = to_row(make_rule(3, "/x", description="d" * 100))
        assert row.description == "d" * 80 + "..."

    def test_short_description_unchanged(self):
        """Descriptions within the cap are kept."""
        row = to_row(make_rule(4, "/x", description="Short"))
        assert row.description == "Short"


class TestRuleAdminService:
    """Tests for RuleAdminService."""

    @pytest.fixture
    def store(self) -> InMemoryRuleStore:
        return InMemoryRuleStore([make_rule(2, "/b"), make_rule(1, "/a", status=False)])

    def test_list_rows_in_id_order(self, store):
        """All rules, including disabled ones, are listed by id."""
        rows = RuleAdminService(store).list_rows()

        assert [row.id for row in rows] == [1, 2]
        assert rows[0].status is False

    def test_custom_excerpt_length(self):
        """The listing cap is configurable."""
        store = InMemoryRuleStore([make_rule(1, "/a", description="abcdef")])
        rows = RuleAdminService(store, excerpt_length=3).list_rows()

        assert rows[0].description == "abc..."

    def test_create_validates(self, store):
        """Created rules are validated and stored."""
        service = RuleAdminService(store)
        rule = service.create(RuleFields(path_pattern=" /new ", title="New"))

        assert rule.path_pattern == "/new"
        assert service.get(rule.id) == rule

    def test_create_rejects_invalid(self, store):
        """Invalid rules are not stored."""
        with pytest.raises(ValidationError):
            RuleAdminService(store).create(RuleFields(path_pattern=""))
        assert len(store.rules) == 2

    def test_update(self, store):
        """Updates replace the rule's fields."""
        rule = RuleAdminService(store).update(2, RuleFields(path_pattern="/b2", weight=5))

        assert rule.id == 2
        assert rule.path_pattern == "/b2"
        assert rule.weight == 5

    def test_get_missing(self, store):
        """Getting a missing rule raises RuleNotFoundError."""
        with pytest.raises(RuleNotFoundError):
            RuleAdminService(store).get(99)

    def test_delete(self, store):
        """Deleted rules are gone."""
        service = RuleAdminService(store)
        service.delete(1)

        with pytest.raises(RuleNotFoundError):
            service.get(1)

    def test_delete_missing(self, store):
        """Deleting a missing rule raises RuleNotFoundError."""
        with pytest.raises(RuleNotFoundError):
            RuleAdminService(store).delete(99)
