"""
Rolodex core: clean-architecture layout.

- domain: entities (ContactRecord, ContactPatch) and ContactNotFoundError. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, Neo4jContactRepository), YAML seed loader.
"""

from rolodex.application import (
    ContactNotFound,
    ContactRepository,
    ContactService,
    parse_favorite,
)
from rolodex.domain import ContactNotFoundError, ContactPatch, ContactRecord
from rolodex.infrastructure import InMemoryContactRepository, Neo4jContactRepository

__all__ = [
    "ContactNotFound",
    "ContactNotFoundError",
    "ContactPatch",
    "ContactRecord",
    "ContactRepository",
    "ContactService",
    "InMemoryContactRepository",
    "Neo4jContactRepository",
    "parse_favorite",
]
