"""Pydantic schemas for contact API payloads."""

from __future__ import annotations

from datetime import datetime
import re
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic.alias_generators import to_pascal

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ContactCreate(BaseModel):
    """Payload to create a contact, keyed by field API names."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, str_strip_whitespace=True)

    first_name: str | None = Field(default=None, max_length=40)
    last_name: str = Field(min_length=1, max_length=80)
    email: str | None = Field(default=None, max_length=80)

    @field_validator("first_name", "email", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("email")
    @classmethod
    def email_must_look_valid(cls, value: str | None) -> str | None:
        if value is not None and not EMAIL_PATTERN.match(value):
            raise ValueError("Enter a valid email address")
        return value


class Contact(BaseModel):
    """Contact response payload."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_pascal, populate_by_name=True)

    id: UUID
    first_name: str | None = None
    last_name: str
    email: str | None = None
    created_at: datetime
    updated_at: datetime


class ContactListResponse(BaseModel):
    """List response envelope for contacts."""

    items: list[Contact]
