"""Contact UI controllers over injected data and notification capabilities."""

from app.components.contact_creator import ContactCreator
from app.components.contact_list import ContactList
from app.components.factory import build_contact_creator
from app.components.factory import build_contact_list
from app.components.factory import build_contacts_client
from app.components.record_form import RecordForm
from app.components.toast import ShowToastEvent
from app.components.wire import WireAdapter
from app.components.wire import WireResult

__all__ = [
    "ContactCreator",
    "ContactList",
    "RecordForm",
    "ShowToastEvent",
    "WireAdapter",
    "WireResult",
    "build_contact_creator",
    "build_contact_list",
    "build_contacts_client",
]
