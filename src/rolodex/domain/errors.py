"""Domain errors."""


class ContactNotFoundError(LookupError):
    """No contact exists for the given identifier."""

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"No contact found for id {contact_id!r}")
        self.contact_id = contact_id
