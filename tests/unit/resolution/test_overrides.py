"""Tests for override rule selection."""

import pytest

from pagemeta.resolution.overrides import resolve_override, rule_applies, rule_sort_key
from tests.fakes import make_rule


def _resolve(rules, path="/about", language="en", domain="example.com", **kwargs):
    return resolve_override(path, language, domain, rules, **kwargs)


class TestPriority:
    """Weight and id ordering between matching rules."""

    def test_higher_weight_wins_regardless_of_order(self):
        """The heavier rule is selected even when listed last."""
        light = make_rule(1, "/about", weight=1)
        heavy = make_rule(2, "/about", weight=10)

        assert _resolve([light, heavy]) is heavy
        assert _resolve([heavy, light]) is heavy

    def test_equal_weight_lower_id_wins(self):
        """Ties go to the earlier-created rule."""
        first = make_rule(4, "/about", weight=5)
        second = make_rule(9, "/about", weight=5)

        assert _resolve([second, first]) is first

    def test_specific_pattern_with_higher_weight(self):
        """Weight, not pattern specificity, decides."""
        generic = make_rule(1, "/blog/*", weight=0, title="Blog")
        specific = make_rule(2, "/blog/launch", weight=10, title="Launch")

        assert _resolve([generic, specific], path="/blog/launch") is specific
        assert _resolve([generic, specific], path="/blog/other") is generic

    def test_negative_weights(self):
        """Negative weights sort below zero."""
        low = make_rule(1, "/about", weight=-5)
        default = make_rule(2, "/about")

        assert _resolve([low, default]) is default

    def test_sort_key(self):
        """Sort key orders by weight desc then id asc."""
        rules = [make_rule(3, "/", weight=1), make_rule(1, "/", weight=1), make_rule(2, "/", weight=7)]
        assert [r.id for r in sorted(rules, key=rule_sort_key)] == [2, 1, 3]


class TestStatus:
    """Disabled rules are invisible."""

    def test_disabled_rule_never_selected(self):
        """A disabled best match loses to an enabled weaker one."""
        disabled = make_rule(1, "/about", weight=100, status=False)
        enabled = make_rule(2, "/about", weight=0)

        assert _resolve([disabled, enabled]) is enabled

    def test_only_disabled_rules(self):
        """No active rule means no match."""
        assert _resolve([make_rule(1, "/about", status=False)]) is None


class TestScoping:
    """Language and domain restrictions."""

    def test_domain_restriction(self):
        """A rule for a.com never matches a request on b.com."""
        rule = make_rule(1, "/about", domains=("a.com",))

        assert _resolve([rule], domain="a.com") is rule
        assert _resolve([rule], domain="b.com") is None

    def test_empty_domains_match_any_domain(self):
        """No domain list means all domains."""
        rule = make_rule(1, "/about")

        assert _resolve([rule], domain="a.com") is rule
        assert _resolve([rule], domain="b.com") is rule
        assert _resolve([rule], domain="") is rule

    def test_multiple_domains(self):
        """Any listed domain is accepted."""
        rule = make_rule(1, "/about", domains=("a.com", "b.com"))

        assert _resolve([rule], domain="b.com") is rule
        assert _resolve([rule], domain="c.com") is None

    def test_language_restriction(self):
        """A language-specific rule only matches that language."""
        rule = make_rule(1, "/about", language="fr")

        assert _resolve([rule], language="fr") is rule
        assert _resolve([rule], language="en") is None

    def test_empty_language_matches_all(self):
        """No language means all languages."""
        rule = make_rule(1, "/about", language="")

        assert _resolve([rule], language="de") is rule

    def test_scoped_rule_falls_through_to_next(self):
        """A rejected heavy rule lets the next candidate win."""
        french = make_rule(1, "/about", language="fr", weight=10)
        fallback = make_rule(2, "/about", weight=0)

        assert _resolve([french, fallback], language="en") is fallback

    def test_rule_applies_checks_all_conditions(self):
        """rule_applies requires path, language and domain."""
        rule = make_rule(1, "/shop/*", language="en", domains=("shop.example.com",))

        assert rule_applies(rule, ("/shop/cart",), "en", "shop.example.com")
        assert not rule_applies(rule, ("/blog",), "en", "shop.example.com")
        assert not rule_applies(rule, ("/shop/cart",), "fr", "shop.example.com")
        assert not rule_applies(rule, ("/shop/cart",), "en", "example.com")


class TestMatching:
    """Path matching and the no-match outcome."""

    def test_no_rules(self):
        """An empty rule set yields no match."""
        assert _resolve([]) is None

    def test_no_matching_path(self):
        """Rules for other paths are ignored."""
        assert _resolve([make_rule(1, "/contact")]) is None

    def test_wildcard_rule(self):
        """Wildcard patterns are honored."""
        rule = make_rule(1, "/blog/*")

        assert _resolve([rule], path="/blog/post-1") is rule
        assert _resolve([rule], path="/blog") is None

    def test_accepts_any_iterable(self):
        """Rules may come from a generator."""
        rules = (make_rule(i, f"/page-{i}") for i in range(5))
        assert _resolve(rules, path="/page-3").id == 3


class TestFrontPage:
    """The <front> token on home page requests."""

    @pytest.fixture
    def front_rule(self):
        return make_rule(1, "<front>", title="Home")

    def test_front_rule_matches_home_page(self, front_rule):
        """<front> applies when the request is the home page."""
        assert _resolve([front_rule], path="/", front_page=True) is front_rule

    def test_front_rule_ignored_elsewhere(self, front_rule):
        """<front> does not apply to other pages."""
        assert _resolve([front_rule], path="/", front_page=False) is None
        assert _resolve([front_rule], path="/about") is None

    def test_home_page_still_matches_concrete_path(self):
        """Rules written for the concrete home path still apply."""
        rule = make_rule(2, "/home")
        assert _resolve([rule], path="/home", front_page=True) is rule
