"""Neo4j implementation of ContactRepository.
Graph: one (:Contact) node per record, keyed by a unique id. Empty optional fields are absent properties.
"""

from datetime import datetime

from rolodex.domain import ContactRecord

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
FOR (c:Contact) REQUIRE c.id IS UNIQUE
"""


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def ensure_contact_constraint(driver) -> None:
    """Create unique constraint on Contact(id) if missing."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


class Neo4jContactRepository:
    """Stores contact records as Contact nodes in Neo4j."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def add(self, record: ContactRecord) -> None:
        props = {
            "first": record.first,
            "last": record.last,
            "avatar": record.avatar,
            "twitter": record.twitter,
            "notes": record.notes,
            "favorite": record.favorite,
            "created_at": _datetime_to_iso(record.created_at),
        }
        with self._driver.session() as session:
            session.run(
                """
                MERGE (c:Contact {id: $id})
                ON CREATE SET c += $props
                """,
                id=record.id,
                props={k: v for k, v in props.items() if v is not None},
            )

    def get_by_id(self, contact_id: str) -> ContactRecord | None:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact {id: $id})
                RETURN c
                """,
                id=contact_id,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_contact(record)

    def list_all(self) -> list[ContactRecord]:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact)
                RETURN c
                ORDER BY c.created_at DESC, c.id
                """
            )
            return [_record_to_contact(rec) for rec in result]

    def update(self, contact_id: str, changes: dict) -> ContactRecord | None:
        # Validate against the entity before writing.
        ContactRecord(id=contact_id).merged(changes)
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact {id: $id})
                SET c += $changes
                RETURN c
                """,
                id=contact_id,
                changes=changes,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_contact(record)

    def delete(self, contact_id: str) -> bool:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Contact {id: $id})
                DETACH DELETE c
                RETURN count(c) AS removed
                """,
                id=contact_id,
            )
            record = result.single()
        return bool(record and record["removed"])

    def count(self) -> int:
        with self._driver.session() as session:
            record = session.run("MATCH (c:Contact) RETURN count(c) AS n").single()
        return record["n"] if record else 0


def _record_to_contact(record) -> ContactRecord:
    c = record["c"]
    return ContactRecord(
        id=c["id"],
        first=c.get("first"),
        last=c.get("last"),
        avatar=c.get("avatar"),
        twitter=c.get("twitter"),
        notes=c.get("notes"),
        favorite=bool(c.get("favorite", False)),
        created_at=_iso_to_datetime(c["created_at"]),
    )
