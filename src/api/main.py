"""
FastAPI backend: contacts list/search, detail, create, edit, favorite and destroy.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import threading
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from neo4j import GraphDatabase
from pydantic import BaseModel

from api.config import BACKEND_NEO4J, Settings, load_log_level, load_settings
from rolodex.application import ContactNotFound, ContactService, parse_favorite
from rolodex.domain import ContactNotFoundError, ContactPatch, ContactRecord
from rolodex.infrastructure import (
    InMemoryContactRepository,
    Neo4jContactRepository,
    ensure_contact_constraint,
    load_seed,
    seed_repository,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=load_log_level(),
)
logger = logging.getLogger(__name__)

# Text fields accepted by the edit form. favorite has its own endpoint.
EDIT_FORM_FIELDS = ("first", "last", "avatar", "twitter", "notes")


def _get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def build_service(settings: Settings) -> tuple[ContactService, object | None]:
    """Create the repository for the configured backend, seed it, and wrap it in a service.
    Returns the service and the Neo4j driver (None for the in-memory backend).
    """
    driver = None
    if settings.backend == BACKEND_NEO4J:
        driver = _get_driver(settings)
        ensure_contact_constraint(driver)
        repo = Neo4jContactRepository(driver)
    else:
        repo = InMemoryContactRepository()
    if settings.seed_file is not None:
        added = seed_repository(repo, load_seed(settings.seed_file))
        logger.info("Seeded %d contacts from %s", added, settings.seed_file)
    logger.info("Contact store ready (backend=%s)", settings.backend)
    return ContactService(repo), driver


_build_lock = threading.Lock()


def get_service(app: FastAPI) -> ContactService:
    if getattr(app.state, "service", None) is None:
        with _build_lock:
            if getattr(app.state, "service", None) is None:
                app.state.service, app.state.driver = build_service(load_settings())
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = None
    app.state.driver = None
    try:
        app.state.service, app.state.driver = build_service(load_settings())
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()
        app.state.driver = None
        app.state.service = None


app = FastAPI(title="Rolodex API", lifespan=lifespan)


@app.exception_handler(ContactNotFoundError)
async def contact_not_found_handler(request: Request, exc: ContactNotFoundError):
    logger.info("Contact %s not found (%s %s)", exc.contact_id, request.method, request.url.path)
    return JSONResponse(status_code=404, content={"detail": "Contact not found"})


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactItem(BaseModel):
    id: str
    first: str | None = None
    last: str | None = None
    avatar: str | None = None
    twitter: str | None = None
    notes: str | None = None
    favorite: bool = False
    created_at: str


class ContactList(BaseModel):
    contacts: list[ContactItem]
    q: str | None = None


class ContactDetail(BaseModel):
    contact: ContactItem


def _to_item(record: ContactRecord) -> ContactItem:
    return ContactItem(
        id=record.id,
        first=record.first,
        last=record.last,
        avatar=record.avatar,
        twitter=record.twitter,
        notes=record.notes,
        favorite=record.favorite,
        created_at=record.created_at.isoformat(),
    )


def _require_contact(service: ContactService, contact_id: str) -> ContactRecord:
    result = service.get_contact(contact_id)
    if isinstance(result, ContactNotFound):
        raise HTTPException(status_code=404, detail="Contact not found")
    return result


@app.get("/")
@app.get("/contacts")
def list_contacts(request: Request, q: str | None = None) -> ContactList:
    service = get_service(request.app)
    records = service.list_contacts(q)
    return ContactList(contacts=[_to_item(r) for r in records], q=q)


@app.post("/")
@app.post("/contacts")
def create_contact(request: Request):
    service = get_service(request.app)
    record = service.create_contact()
    return RedirectResponse(url=f"/contacts/{record.id}/edit", status_code=303)


@app.get("/contacts/{contact_id}")
def get_contact(contact_id: str, request: Request) -> ContactDetail:
    service = get_service(request.app)
    return ContactDetail(contact=_to_item(_require_contact(service, contact_id)))


@app.post("/contacts/{contact_id}")
async def set_favorite(contact_id: str, request: Request) -> ContactDetail:
    """Set the favorite flag. Only the literal "true" is True; an empty value is False."""
    service = get_service(request.app)
    form = await request.form()
    favorite = form.get("favorite")
    if not isinstance(favorite, str):
        raise HTTPException(status_code=422, detail="favorite is required")
    record = service.update_contact(
        contact_id, ContactPatch(favorite=parse_favorite(favorite))
    )
    return ContactDetail(contact=_to_item(record))


@app.get("/contacts/{contact_id}/edit")
def edit_contact_view(contact_id: str, request: Request) -> ContactDetail:
    service = get_service(request.app)
    return ContactDetail(contact=_to_item(_require_contact(service, contact_id)))


@app.post("/contacts/{contact_id}/edit")
async def edit_contact(contact_id: str, request: Request):
    """Merge submitted text fields. A field sent empty is cleared; a field not sent is untouched."""
    service = get_service(request.app)
    form = await request.form()
    values = {}
    for name in EDIT_FORM_FIELDS:
        value = form.get(name)
        if isinstance(value, str):
            values[name] = value
    service.update_contact(contact_id, ContactPatch(**values))
    return RedirectResponse(url=f"/contacts/{contact_id}", status_code=303)


@app.post("/contacts/{contact_id}/destroy")
def destroy_contact(contact_id: str, request: Request):
    service = get_service(request.app)
    service.delete_contact(contact_id)
    return RedirectResponse(url="/", status_code=303)


@app.delete("/contacts/{contact_id}")
def delete_contact(contact_id: str, request: Request):
    service = get_service(request.app)
    return {"deleted": service.delete_contact(contact_id)}
