"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from rolodex.application.contact_service import ContactService
from rolodex.application.dto import ContactNotFound, parse_favorite
from rolodex.application.ports import ContactRepository

__all__ = [
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "parse_favorite",
]
