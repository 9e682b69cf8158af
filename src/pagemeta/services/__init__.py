"""Application services for pagemeta."""

from .overrides import RuleAdminService, parse_domains, to_row, validate_fields

__all__ = ["RuleAdminService", "parse_domains", "to_row", "validate_fields"]
