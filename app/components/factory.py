"""Build contact components wired to the configured contacts API."""

from __future__ import annotations

import logging
from typing import Any

from app.components.contact_creator import ContactCreator
from app.components.contact_list import ContactList
from app.components.toast import Notifier
from app.core.config import ClientSettings
from app.core.config import get_client_settings
from app.remote.client import ContactsApiClient

logger = logging.getLogger(__name__)


def build_contacts_client(settings: ClientSettings | None = None, **client_options: Any) -> ContactsApiClient:
    """Create an API client from ``settings``, defaulting to the environment."""
    settings = settings or get_client_settings()
    logger.info("Building contacts API client with settings=%s", settings.safe_for_logging())
    return ContactsApiClient.from_settings(settings, **client_options)


def build_contact_creator(notify: Notifier, client: ContactsApiClient | None = None) -> ContactCreator:
    client = client or build_contacts_client()
    return ContactCreator(create_record=client.create_record, notify=notify)


def build_contact_list(notify: Notifier, client: ContactsApiClient | None = None, **params: Any) -> ContactList:
    """Create a contact list; it fetches its first page immediately."""
    client = client or build_contacts_client()
    return ContactList(get_contacts=client.get_contacts, notify=notify, **params)
