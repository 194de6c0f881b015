"""Domain layer: entities, value objects and errors. No dependencies on outer layers."""

from rolodex.domain.entities import EDITABLE_FIELDS, ContactPatch, ContactRecord
from rolodex.domain.errors import ContactNotFoundError

__all__ = ["EDITABLE_FIELDS", "ContactNotFoundError", "ContactPatch", "ContactRecord"]
