"""Load sample contacts from YAML and put them into an empty repository."""

import logging
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import yaml

from rolodex.application.ports import ContactRepository
from rolodex.domain import EDITABLE_FIELDS, ContactRecord

logger = logging.getLogger(__name__)

_ALLOWED_KEYS = set(EDITABLE_FIELDS) | {"id", "created_at"}


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def default_seed_path() -> Path:
    """Bundled sample contacts (data/contacts.yaml)."""
    return _repo_root() / "data" / "contacts.yaml"


def _to_utc(value) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if not isinstance(value, datetime):
        raise ValueError(f"created_at must be a timestamp, got {value!r}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _optional_text(entry: dict, key: str) -> str | None:
    value = entry.get(key)
    if value is None:
        return None
    return str(value)


def load_seed(path: Path) -> list[ContactRecord]:
    """Read a YAML list of contacts. Entries without created_at keep file order (first entry newest)."""
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("Seed YAML must be a list of contacts")
    base = datetime.now(timezone.utc)
    records = []
    seen_ids: set[str] = set()
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Seed entry {index} must be a mapping")
        unknown = set(entry) - _ALLOWED_KEYS
        if unknown:
            raise ValueError(
                f"Seed entry {index} has unknown keys: {', '.join(sorted(map(str, unknown)))}"
            )
        if "created_at" in entry:
            created_at = _to_utc(entry["created_at"])
        else:
            created_at = base - timedelta(seconds=index)
        favorite = entry.get("favorite", False)
        if not isinstance(favorite, bool):
            raise ValueError(
                f"Seed entry {index} favorite must be true or false, got {favorite!r}"
            )
        kwargs = {}
        if entry.get("id"):
            contact_id = str(entry["id"])
            if contact_id in seen_ids:
                raise ValueError(f"Seed entry {index} repeats id {contact_id!r}")
            seen_ids.add(contact_id)
            kwargs["id"] = contact_id
        records.append(
            ContactRecord(
                first=_optional_text(entry, "first"),
                last=_optional_text(entry, "last"),
                avatar=_optional_text(entry, "avatar"),
                twitter=_optional_text(entry, "twitter"),
                notes=_optional_text(entry, "notes"),
                favorite=favorite,
                created_at=created_at,
                **kwargs,
            )
        )
    return records


def seed_repository(repository: ContactRepository, records: list[ContactRecord]) -> int:
    """Add records when the repository is empty. Returns how many were added."""
    if repository.count() > 0:
        logger.info("Store already has contacts; skipping seed")
        return 0
    for record in records:
        repository.add(record)
    return len(records)
