"""Error envelope schemas shared across API handlers."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel


class ErrorMessage(BaseModel):
    """Single page-level or field-level error entry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error_code: str
    message: str


class ErrorResponse(BaseModel):
    """Top-level API error envelope in the UI API page/field error layout."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int
    error_code: str
    message: str
    page_errors: list[ErrorMessage] = Field(default_factory=list)
    field_errors: dict[str, list[ErrorMessage]] = Field(default_factory=dict)
