"""In-memory implementation of ContactRepository (no DB)."""

from rolodex.domain import ContactRecord


class InMemoryContactRepository:
    """Stores contacts in memory for the lifetime of the process.
    Insertion order is kept so that records with equal created_at list newest-inserted first.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, ContactRecord] = {}
        self._order: list[str] = []

    def add(self, record: ContactRecord) -> None:
        if record.id in self._by_id:
            return
        self._by_id[record.id] = record
        self._order.append(record.id)

    def get_by_id(self, contact_id: str) -> ContactRecord | None:
        return self._by_id.get(contact_id)

    def list_all(self) -> list[ContactRecord]:
        newest_inserted_first = [self._by_id[cid] for cid in reversed(self._order)]
        return sorted(newest_inserted_first, key=lambda r: r.created_at, reverse=True)

    def update(self, contact_id: str, changes: dict) -> ContactRecord | None:
        record = self._by_id.get(contact_id)
        if record is None:
            return None
        updated = record.merged(changes)
        self._by_id[contact_id] = updated
        return updated

    def delete(self, contact_id: str) -> bool:
        if self._by_id.pop(contact_id, None) is None:
            return False
        self._order.remove(contact_id)
        return True

    def count(self) -> int:
        return len(self._by_id)
