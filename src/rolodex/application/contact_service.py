"""Contact list, search, create, update and delete. One lock per service instance."""

import logging
import threading

from rolodex.application.dto import ContactNotFound
from rolodex.application.ports import ContactRepository
from rolodex.domain import ContactNotFoundError, ContactPatch, ContactRecord

logger = logging.getLogger(__name__)


def _matches(record: ContactRecord, needle: str) -> bool:
    for value in (record.first, record.last):
        if value and needle in value.lower():
            return True
    return False


class ContactService:
    """Owns the contact collection. Every repository call runs under a single lock.

    Handlers may call in from several threads (sync FastAPI endpoints run in a
    thread pool); the lock keeps read-modify-write on update and delete whole.
    """

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository
        self._lock = threading.Lock()

    def list_contacts(self, query: str | None = None) -> list[ContactRecord]:
        """Return all contacts, or those whose first or last name contains query (case-insensitive)."""
        with self._lock:
            records = self._repo.list_all()
        needle = (query or "").strip().lower()
        if not needle:
            return records
        return [r for r in records if _matches(r, needle)]

    def get_contact(self, contact_id: str) -> ContactRecord | ContactNotFound:
        """Return the contact, or ContactNotFound."""
        with self._lock:
            record = self._repo.get_by_id(contact_id)
        if record is None:
            logger.debug("Contact %s not found", contact_id)
            return ContactNotFound(contact_id=contact_id)
        return record

    def create_contact(self) -> ContactRecord:
        """Insert and return an empty contact with a fresh id."""
        record = ContactRecord()
        with self._lock:
            self._repo.add(record)
        logger.info("Created contact %s", record.id)
        return record

    def update_contact(self, contact_id: str, patch: ContactPatch) -> ContactRecord:
        """Merge the supplied patch fields into the contact. Raises ContactNotFoundError."""
        with self._lock:
            updated = self._repo.update(contact_id, patch.fields())
        if updated is None:
            raise ContactNotFoundError(contact_id)
        if patch.is_empty():
            logger.info("Updated contact %s (no fields)", contact_id)
        else:
            logger.info("Updated contact %s (%s)", contact_id, ", ".join(sorted(patch.fields())))
        return updated

    def delete_contact(self, contact_id: str) -> bool:
        """Remove the contact. Returns False if it did not exist."""
        with self._lock:
            removed = self._repo.delete(contact_id)
        if removed:
            logger.info("Deleted contact %s", contact_id)
        return removed
