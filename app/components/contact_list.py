"""Contact table state fed by a wire subscription."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from app.components.toast import Notifier
from app.components.toast import ShowToastEvent
from app.components.toast import ToastMode
from app.components.toast import ToastVariant
from app.components.wire import WireAdapter
from app.components.wire import WireResult
from app.core.lds_utils import reduce_errors

logger = logging.getLogger(__name__)

COLUMNS: tuple[dict[str, Any], ...] = (
    {
        "label": "First Name",
        "fieldName": "FirstName",
        "type": "text",
        "sortable": True,
        "initialWidth": 150,
    },
    {
        "label": "Last Name",
        "fieldName": "LastName",
        "type": "text",
        "sortable": True,
        "initialWidth": 150,
    },
    {
        "label": "Email",
        "fieldName": "Email",
        "type": "email",
        "sortable": True,
        "initialWidth": 250,
    },
)

ERROR_TOAST_TITLE = "Error Loading Contacts"
ERROR_TOAST_MESSAGE = "Unable to retrieve contact data. Please try again."


class ContactList:
    """Holds the rows, columns, loading flag and errors for a contacts table.

    The list subscribes to ``get_contacts`` on construction. Every delivery
    clears the loading flag; data replaces the rows and clears the error,
    an error empties the rows and raises a sticky error toast through
    ``notify``.
    """

    def __init__(self, *, get_contacts: Callable[..., Any], notify: Notifier, **params: Any) -> None:
        self._notify = notify
        self.columns = [dict(column) for column in COLUMNS]
        self.contacts: list[Any] = []
        self.is_loading = True
        self.error: Any = None
        self.wire = WireAdapter(get_contacts, **params)
        self.wire.connect(self.wired_contacts)

    @property
    def errors(self) -> list[str]:
        return reduce_errors(self.error) if self.error is not None else []

    def refresh(self) -> None:
        self.wire.refresh()

    def wired_contacts(self, result: WireResult) -> None:
        self.is_loading = False

        if result.data is not None:
            self.contacts = list(result.data)
            self.error = None
            logger.info("Retrieved %s contacts", len(self.contacts))
        elif result.error is not None:
            self.error = result.error
            self.contacts = []
            logger.error("Error retrieving contacts: %s", result.error)
            self.show_error_toast(result.error)

    def show_error_toast(self, error: Any) -> None:
        self._notify(
            ShowToastEvent(
                title=ERROR_TOAST_TITLE,
                message=ERROR_TOAST_MESSAGE,
                variant=ToastVariant.ERROR,
                mode=ToastMode.STICKY,
            )
        )
