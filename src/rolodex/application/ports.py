"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from rolodex.domain import ContactRecord


class ContactRepository(Protocol):
    """Persists and queries contact records."""

    def add(self, record: ContactRecord) -> None:
        """Store a new record. A record with an id already present is ignored."""
        ...

    def get_by_id(self, contact_id: str) -> ContactRecord | None:
        """Return the record with the given id, or None."""
        ...

    def list_all(self) -> list[ContactRecord]:
        """Return all records, most recently created first (stable order)."""
        ...

    def update(self, contact_id: str, changes: dict) -> ContactRecord | None:
        """Merge changes into the record. Returns the updated record, or None if not found."""
        ...

    def delete(self, contact_id: str) -> bool:
        """Remove the record. Returns True if removed, False if it was absent."""
        ...

    def count(self) -> int:
        """Return the number of stored records."""
        ...
