"""Contact creation form that announces the new record id."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.components.record_form import CreateRecord
from app.components.record_form import RecordForm
from app.components.record_form import RecordSuccessEvent
from app.components.toast import Notifier
from app.components.toast import ShowToastEvent
from app.components.toast import ToastVariant

CONTACT_OBJECT = "Contact"
FIRST_NAME_FIELD = "FirstName"
LAST_NAME_FIELD = "LastName"
EMAIL_FIELD = "Email"


class ContactCreator:
    """Form for FirstName, LastName and Email that toasts the created id."""

    object_api_name = CONTACT_OBJECT
    fields = (FIRST_NAME_FIELD, LAST_NAME_FIELD, EMAIL_FIELD)

    def __init__(self, *, create_record: CreateRecord, notify: Notifier) -> None:
        self._notify = notify
        self.form = RecordForm(
            object_api_name=self.object_api_name,
            fields=self.fields,
            create_record=create_record,
            on_success=self.handle_success,
        )

    @property
    def errors(self) -> list[str]:
        return self.form.errors

    def submit(self, values: Mapping[str, Any]) -> str | None:
        return self.form.submit(values)

    def handle_success(self, event: RecordSuccessEvent) -> None:
        self._notify(
            ShowToastEvent(
                title="Contact created",
                message=f"Record ID: {event.id}",
                variant=ToastVariant.SUCCESS,
            )
        )
