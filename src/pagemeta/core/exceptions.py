"""Custom exceptions for pagemeta."""


class PageMetaError(Exception):
    """Base exception for all pagemeta errors."""

    pass


class DatabaseError(PageMetaError):
    """Database operation failed."""

    pass


class RuleError(PageMetaError):
    """Override rule operation failed."""

    pass


class RuleNotFoundError(RuleError):
    """Override rule does not exist."""

    def __init__(self, rule_id: int):
        """Initialize exception with the missing rule id.

        Args:
            rule_id: Identifier that was looked up.
        """
        self.rule_id = rule_id
        super().__init__(f"Override rule not found: {rule_id}")


class LookupFailure(PageMetaError):
    """A collaborator (rule store, content provider) could not be reached."""

    pass


class MalformedRecordError(PageMetaError):
    """A stored record could not be parsed."""

    pass


class UnsupportedEntityError(PageMetaError):
    """No metadata profile is registered for an entity kind."""

    pass


class ValidationError(PageMetaError):
    """Input for a rule or record failed validation."""

    pass
