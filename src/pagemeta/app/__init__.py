"""Application composition root and collaborator protocols."""

from .application import Application
from .factory import create_application
from .protocols import (
    ContentProviderProtocol,
    EntityMetadataStoreProtocol,
    RuleStoreProtocol,
)

__all__ = [
    "Application",
    "ContentProviderProtocol",
    "EntityMetadataStoreProtocol",
    "RuleStoreProtocol",
    "create_application",
]
