"""Record-creation form over an injected ``create_record`` capability."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
import logging
from typing import Any

from app.core.lds_utils import reduce_errors
from app.remote.client import ContactsApiClientError

logger = logging.getLogger(__name__)

CreateRecord = Callable[[str, Mapping[str, Any]], str]


@dataclass(frozen=True)
class RecordSuccessEvent:
    """Detail of a successful save."""

    id: str
    object_api_name: str
    fields: dict[str, Any] = field(default_factory=dict)


class RecordForm:
    """Collect values for ``fields`` and create an ``object_api_name`` record."""

    def __init__(
        self,
        *,
        object_api_name: str,
        fields: Sequence[str],
        create_record: CreateRecord,
        on_success: Callable[[RecordSuccessEvent], None] | None = None,
        on_error: Callable[[ContactsApiClientError], None] | None = None,
    ) -> None:
        if not object_api_name:
            raise ValueError("object_api_name is required")
        if not fields:
            raise ValueError("fields must not be empty")

        self.object_api_name = object_api_name
        self.fields = tuple(fields)
        self._create_record = create_record
        self._on_success = on_success
        self._on_error = on_error
        self.record_id: str | None = None
        self.error: ContactsApiClientError | None = None

    @property
    def errors(self) -> list[str]:
        return reduce_errors(self.error) if self.error is not None else []

    def submit(self, values: Mapping[str, Any]) -> str | None:
        """Save the supplied ``values``; return the new record id, or None when the save failed.

        Fields left unset or set to None are omitted so the server reports them as missing.
        """
        unknown = sorted(set(values) - set(self.fields))
        if unknown:
            raise ValueError(f"Unknown fields for {self.object_api_name}: {', '.join(unknown)}")

        record = {name: values[name] for name in self.fields if values.get(name) is not None}
        try:
            record_id = self._create_record(self.object_api_name, record)
        except ContactsApiClientError as exc:
            logger.error("Failed to create %s record: %s", self.object_api_name, exc)
            self.error = exc
            self.record_id = None
            if self._on_error is not None:
                self._on_error(exc)
            return None

        self.error = None
        self.record_id = record_id
        if self._on_success is not None:
            self._on_success(RecordSuccessEvent(id=record_id, object_api_name=self.object_api_name, fields=record))
        return record_id
