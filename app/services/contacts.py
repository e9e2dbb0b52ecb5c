"""Service helpers for contact API operations."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import APIError
from app.core.errors import NotFoundError
from app.db.repository.contacts import create_contact
from app.db.repository.contacts import get_contact
from app.db.repository.contacts import get_contact_by_email
from app.db.repository.contacts import list_contacts
from app.schemas.contact import ContactCreate

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A contact with this email already exists"


def _raise_validation_error(message: str, *, field: str) -> None:
    raise APIError(
        status_code=400,
        code="validation_error",
        message=message,
        field_errors={field: [message]},
    )


def create_contact_service(session: Session, payload: ContactCreate):
    """Create and persist a new contact."""
    if payload.email is not None and get_contact_by_email(session, payload.email) is not None:
        _raise_validation_error(DUPLICATE_EMAIL_MESSAGE, field="Email")
    try:
        contact = create_contact(
            session,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
        )
        session.commit()
    except IntegrityError:
        session.rollback()
        _raise_validation_error(DUPLICATE_EMAIL_MESSAGE, field="Email")
    logger.info("Created contact id=%s", contact.id)
    return contact


def list_contacts_service(session: Session, *, limit: int = 100, offset: int = 0):
    """List contacts page by page."""
    return list_contacts(session, limit=limit, offset=offset)


def get_contact_service(session: Session, contact_id: UUID):
    """Fetch a contact or raise not found."""
    contact = get_contact(session, contact_id)
    if contact is None:
        raise NotFoundError(message="Contact not found")
    return contact
