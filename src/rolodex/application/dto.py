"""Result types and form-value parsing for the contact use cases."""

from dataclasses import dataclass

FAVORITE_TRUE = "true"


@dataclass(frozen=True)
class ContactNotFound:
    """No contact exists for the given id (never stored, or already deleted)."""

    contact_id: str


def parse_favorite(value: str | None) -> bool:
    """Favorite flag arrives as the literal text "true" or "false". Anything but "true" is False."""
    return value == FAVORITE_TRUE
