"""HTTP client for the contacts API with bounded resilience controls."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
import logging
from typing import Any
from urllib.parse import quote

import random
import time

import requests

from app.core.config import ClientSettings

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

OBJECT_PATHS = {
    "Contact": "contacts",
}


class ContactsApiClientError(RuntimeError):
    """Base error raised by contacts API client operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ContactsApiRequestError(ContactsApiClientError):
    """Raised when a request fails; carries the API error envelope when one was returned."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ContactsApiResponseError(ContactsApiClientError):
    """Raised when contacts API responses are malformed."""


class ContactsApiClient:
    """Create and list contacts over HTTP, retrying idempotent reads with backoff."""

    def __init__(
        self,
        *,
        base_url: str,
        api_token: str = "",
        timeout_seconds: float = 10.0,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
        session: requests.Session | None = None,
        sleep_fn: Callable[[float], None] = time.sleep,
        jitter_fn: Callable[[], float] = random.random,
    ) -> None:
        normalized = base_url.rstrip("/")
        if not normalized:
            raise ValueError("base_url is required")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if backoff_seconds <= 0:
            raise ValueError("backoff_seconds must be positive")

        self._base_url = normalized
        self._api_token = api_token
        self._timeout_seconds = timeout_seconds
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._session = session or requests.Session()
        self._sleep_fn = sleep_fn
        self._jitter_fn = jitter_fn

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> ContactsApiClient:
        """Build a client from environment-derived settings."""
        return cls(
            base_url=settings.contacts_api_base_url,
            api_token=settings.contacts_api_token,
            timeout_seconds=settings.http_timeout_seconds,
            max_retries=settings.http_max_retries,
            backoff_seconds=settings.http_backoff_seconds,
            **kwargs,
        )

    def get_contacts(self, limit: int | None = None, offset: int | None = None) -> list[dict[str, Any]]:
        """Fetch one page of contact records."""
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset

        payload = self._get("/contacts", params=params or None)
        if not isinstance(payload, dict):
            raise ContactsApiResponseError("Contacts payload must be a JSON object")
        items = payload.get("items")
        if not isinstance(items, list):
            raise ContactsApiResponseError("Contacts payload field `items` must be a list")
        return items

    def get_contact(self, contact_id: str) -> dict[str, Any]:
        """Fetch a single contact record."""
        if not contact_id:
            raise ValueError("contact_id is required")
        payload = self._get(f"/contacts/{quote(str(contact_id), safe='')}")
        if not isinstance(payload, dict):
            raise ContactsApiResponseError("Contact payload must be a JSON object")
        return payload

    def create_record(self, object_api_name: str, fields: Mapping[str, Any]) -> str:
        """Create a record of ``object_api_name`` and return its id."""
        path = OBJECT_PATHS.get(object_api_name)
        if path is None:
            raise ValueError(f"Unsupported object: {object_api_name}")

        url = f"{self._base_url}/{path}"
        try:
            response = self._session.post(
                url,
                headers=self._headers(),
                json=dict(fields),
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ContactsApiRequestError("Contacts request failed") from exc

        payload = self._parse_response(response)
        if not isinstance(payload, dict) or not payload.get("Id"):
            raise ContactsApiResponseError("Created record payload must include `Id`")
        return str(payload["Id"])

    def _get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        url = f"{self._base_url}{path}"

        for attempt in range(self._max_retries + 1):
            try:
                response = self._session.get(
                    url,
                    headers=self._headers(),
                    params=params,
                    timeout=self._timeout_seconds,
                )
            except (requests.Timeout, requests.ConnectionError) as exc:
                if attempt >= self._max_retries:
                    raise ContactsApiRequestError(
                        "Contacts request failed after retry budget was exhausted",
                    ) from exc
                delay = self._retry_delay(attempt)
                logger.warning("Contacts request to %s failed (%s); retrying in %.2fs", url, exc, delay)
                self._sleep_fn(delay)
                continue
            except requests.RequestException as exc:
                raise ContactsApiRequestError("Contacts request failed") from exc

            if response.status_code in RETRYABLE_STATUS_CODES and attempt < self._max_retries:
                delay = self._retry_delay(attempt, response.headers)
                logger.warning(
                    "Contacts request to %s returned %s; retrying in %.2fs",
                    url,
                    response.status_code,
                    delay,
                )
                self._sleep_fn(delay)
                continue

            return self._parse_response(response)

        raise ContactsApiRequestError("Contacts request failed")

    @staticmethod
    def _parse_response(response: requests.Response) -> Any:
        if response.status_code >= 400:
            body = _json_or_none(response)
            message = f"Contacts request failed with status {response.status_code}"
            if isinstance(body, dict) and isinstance(body.get("message"), str):
                message = body["message"]
            raise ContactsApiRequestError(
                message,
                status_code=response.status_code,
                body=body if isinstance(body, (dict, list)) else None,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ContactsApiResponseError("Contacts payload must be JSON") from exc

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": "contacts-client/0.1",
        }
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    def _retry_delay(
        self,
        attempt: int,
        headers: Mapping[str, Any] | None = None,
    ) -> float:
        base = self._backoff_seconds * (2**attempt)
        jitter = self._jitter_fn() * self._backoff_seconds
        delay = base + jitter

        if headers:
            retry_after = headers.get("Retry-After")
            if retry_after is not None:
                try:
                    delay = max(delay, float(retry_after))
                except (TypeError, ValueError):
                    pass
        return delay


def _json_or_none(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
