"""Test fakes for testing without real infrastructure.

Example:
    from tests.fakes import InMemoryRuleStore, StubContentProvider

    generator = MetatagGenerator(
        InMemoryRuleStore([make_rule(1, "/about", title="About")]),
        StubContentProvider(),
    )
"""

from .collaborators import (
    FailingContentProvider,
    FailingRuleStore,
    InMemoryRuleStore,
    StubContentProvider,
    make_rule,
)

__all__ = [
    "FailingContentProvider",
    "FailingRuleStore",
    "InMemoryRuleStore",
    "StubContentProvider",
    "make_rule",
]
