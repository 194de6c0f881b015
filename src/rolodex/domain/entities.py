"""Domain entities: ContactRecord and ContactPatch."""

import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone

# Fields a patch may touch. id and created_at are fixed at creation.
EDITABLE_FIELDS = ("first", "last", "avatar", "twitter", "notes", "favorite")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ContactRecord:
    """
    A single contact's stored data.
    Identifier is assigned once and never reassigned; all other fields may be empty.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool = False
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("ContactRecord id must be non-empty.")

    def merged(self, changes: dict) -> "ContactRecord":
        """Return a copy with the given editable fields replaced."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Not editable: {', '.join(sorted(unknown))}")
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(changes)
        return ContactRecord(**values)


@dataclass(frozen=True)
class ContactPatch:
    """
    Partial set of field values to merge into an existing record.
    None means "not supplied"; an empty string is a supplied value that clears the text.
    """

    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool | None = None

    def fields(self) -> dict:
        """Return only the supplied fields."""
        return {
            name: getattr(self, name)
            for name in EDITABLE_FIELDS
            if getattr(self, name) is not None
        }

    def is_empty(self) -> bool:
        return not self.fields()
