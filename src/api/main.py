"""
FastAPI backend: REST API over the contact directory.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from datetime import date, datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contactbook import config
from contactbook.application import (
    ContactFields,
    ContactService,
    Notification,
    NothingPending,
    NotFound,
    NotificationScheduler,
    ValidationFailed,
)
from contactbook.domain import Contact
from contactbook.infrastructure import (
    InMemoryContactRepository,
    ThreadingTimerBackend,
    format_international,
    load_seed_contacts,
    normalize_phone,
)

config.load_environment()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def build_service() -> ContactService:
    """Wire a ContactService from env settings. Seed contacts are loaded when a seed file is set."""
    seed_path = config.get_seed_path()
    seed = load_seed_contacts(seed_path) if seed_path else []
    if seed_path:
        logger.info("Loaded %d seed contacts from %s", len(seed), seed_path)
    scheduler = NotificationScheduler(
        ThreadingTimerBackend(),
        default_duration_ms=config.get_notification_ms(),
    )
    return ContactService(
        InMemoryContactRepository(seed),
        scheduler,
        undo_window_ms=config.get_undo_window_ms(),
    )


def get_service(app: FastAPI) -> ContactService:
    if getattr(app.state, "service", None) is None:
        app.state.service = build_service()
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = None
    get_service(app)
    yield
    app.state.service = None


app = FastAPI(title="Contactbook API", lifespan=lifespan)


# --- serialization ---


class ContactBody(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str | None = None
    address: str | None = None
    birthday: str | None = None

    def to_fields(self) -> ContactFields:
        return ContactFields(
            name=self.name,
            email=self.email,
            phone=self.phone,
            location=self.location,
            address=self.address,
            birthday=self.birthday,
        )


class SearchBody(BaseModel):
    text: str = ""


class ContactItem(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    phone_e164: str | None = None
    phone_display: str | None = None
    location: str | None = None
    address: str | None = None
    birthday: date | None = None
    is_favorite: bool = False


class NotificationItem(BaseModel):
    id: str
    event: str
    message: str
    kind: str
    expires_at: datetime


def _contact_item(contact: Contact) -> ContactItem:
    region = config.get_phone_region()
    return ContactItem(
        id=contact.id,
        name=contact.name,
        email=contact.email,
        phone=contact.phone,
        phone_e164=normalize_phone(contact.phone, region),
        phone_display=format_international(contact.phone, region),
        location=contact.location,
        address=contact.address,
        birthday=contact.birthday,
        is_favorite=contact.is_favorite,
    )


def _notification_item(notification: Notification) -> NotificationItem:
    return NotificationItem(
        id=notification.id,
        event=notification.event,
        message=notification.message,
        kind=notification.kind,
        expires_at=notification.expires_at,
    )


def _validation_error(result: ValidationFailed) -> HTTPException:
    detail = {
        field: {"kind": error.kind.value, "message": error.message}
        for field, error in result.field_errors.items()
    }
    return HTTPException(status_code=422, detail={"field_errors": detail})


def _not_found(result: NotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Contact {result.contact_id} not found")


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


@app.get("/contacts")
def list_contacts(request: Request, q: str | None = None):
    service = get_service(request.app)
    if q is not None:
        service.set_search_text(q)
    return [_contact_item(c) for c in service.get_view()]


@app.put("/search")
def set_search(body: SearchBody, request: Request):
    service = get_service(request.app)
    service.set_search_text(body.text)
    return [_contact_item(c) for c in service.get_view()]


@app.post("/contacts")
def create_contact(body: ContactBody, request: Request):
    service = get_service(request.app)
    result = service.add_contact(body.to_fields())
    if isinstance(result, ValidationFailed):
        raise _validation_error(result)
    return JSONResponse(
        content=_contact_item(result).model_dump(mode="json"),
        status_code=201,
    )


@app.get("/contacts/{contact_id}")
def get_contact(contact_id: str, request: Request):
    service = get_service(request.app)
    contact = service.get_contact(contact_id)
    if contact is None:
        raise _not_found(NotFound(contact_id=contact_id))
    return _contact_item(contact)


@app.put("/contacts/{contact_id}")
def update_contact(contact_id: str, body: ContactBody, request: Request):
    service = get_service(request.app)
    result = service.update_contact(contact_id, body.to_fields())
    if isinstance(result, NotFound):
        raise _not_found(result)
    if isinstance(result, ValidationFailed):
        raise _validation_error(result)
    return _contact_item(result)


@app.post("/contacts/{contact_id}/favorite")
def toggle_favorite(contact_id: str, request: Request):
    service = get_service(request.app)
    result = service.toggle_favorite(contact_id)
    if isinstance(result, NotFound):
        raise _not_found(result)
    return _contact_item(result)


@app.delete("/contacts/{contact_id}")
def delete_contact(contact_id: str, request: Request):
    service = get_service(request.app)
    result = service.request_delete(contact_id)
    if isinstance(result, NotFound):
        raise _not_found(result)
    return JSONResponse(
        content={
            "contact": _contact_item(result.contact).model_dump(mode="json"),
            "expires_at": result.expires_at.isoformat(),
        },
        status_code=202,
    )


@app.post("/undo")
def undo_delete(request: Request):
    service = get_service(request.app)
    result = service.undo_delete()
    if isinstance(result, NothingPending):
        raise HTTPException(status_code=409, detail="Nothing to undo")
    return _contact_item(result)


# --- REST: notifications and insights ---


@app.get("/notifications")
def list_notifications(request: Request):
    service = get_service(request.app)
    return [_notification_item(n) for n in service.notifications()]


@app.get("/insights")
def insights(request: Request):
    service = get_service(request.app)
    totals = service.insights()
    return {"total": totals.total, "favorites": totals.favorites}
