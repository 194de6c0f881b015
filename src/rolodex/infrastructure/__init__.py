"""Infrastructure layer: concrete implementations of application ports."""

from rolodex.infrastructure.memory_repository import InMemoryContactRepository
from rolodex.infrastructure.persistence.neo4j_repository import (
    Neo4jContactRepository,
    ensure_contact_constraint,
)
from rolodex.infrastructure.seed import (
    default_seed_path,
    load_seed,
    seed_repository,
)

__all__ = [
    "InMemoryContactRepository",
    "Neo4jContactRepository",
    "default_seed_path",
    "ensure_contact_constraint",
    "load_seed",
    "seed_repository",
]
