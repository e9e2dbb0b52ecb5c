"""Repository primitives for contact entities."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.contact import Contact


def create_contact(
    session: Session,
    *,
    last_name: str,
    first_name: str | None = None,
    email: str | None = None,
) -> Contact:
    """Create and return a contact row."""
    contact = Contact(first_name=first_name, last_name=last_name, email=email)
    session.add(contact)
    session.flush()
    session.refresh(contact)
    return contact


def get_contact(session: Session, contact_id: UUID) -> Contact | None:
    """Fetch a contact by id."""
    return session.get(Contact, contact_id)


def get_contact_by_email(session: Session, email: str) -> Contact | None:
    """Fetch a contact by case-insensitive email match."""
    stmt = select(Contact).where(func.lower(Contact.email) == email.lower())
    return session.scalars(stmt).first()


def list_contacts(
    session: Session,
    *,
    limit: int = 100,
    offset: int = 0,
) -> list[Contact]:
    """List contacts ordered by last name, then first name."""
    stmt = (
        select(Contact)
        .order_by(Contact.last_name, Contact.first_name, Contact.created_at)
        .limit(limit)
        .offset(offset)
    )
    return list(session.scalars(stmt))
