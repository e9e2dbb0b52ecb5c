"""Contact API routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from sqlalchemy.orm import Session

from app.db.base import get_db_session
from app.schemas.contact import Contact
from app.schemas.contact import ContactCreate
from app.schemas.contact import ContactListResponse
from app.services.contacts import create_contact_service
from app.services.contacts import get_contact_service
from app.services.contacts import list_contacts_service

router = APIRouter(prefix="/api/v1", tags=["contacts"])


@router.post("/contacts", response_model=Contact, status_code=201)
def create_contact_endpoint(
    payload: ContactCreate,
    session: Session = Depends(get_db_session),
) -> Contact:
    """Create a contact."""
    return create_contact_service(session, payload)


@router.get("/contacts", response_model=ContactListResponse)
def list_contacts_endpoint(
    limit: int = Query(default=100, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    session: Session = Depends(get_db_session),
) -> ContactListResponse:
    """List contacts ordered by name."""
    contacts = list_contacts_service(session, limit=limit, offset=offset)
    return ContactListResponse(items=contacts)


@router.get("/contacts/{contact_id}", response_model=Contact)
def get_contact_endpoint(
    contact_id: UUID,
    session: Session = Depends(get_db_session),
) -> Contact:
    """Get a single contact by id."""
    return get_contact_service(session, contact_id)
