"""Subscription-style data fetch that pushes results to registered callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WireResult:
    """Outcome of one fetch: exactly one of ``data`` or ``error`` is set."""

    data: Any = None
    error: Any = None


WireCallback = Callable[[WireResult], None]


class WireAdapter:
    """Call ``fetch(**params)`` on connect and on every refresh.

    Fetch failures are delivered as ``WireResult(error=exc)`` instead of being
    raised, so subscribers handle data and errors in one place. Changing the
    parameters through ``update`` re-fires the fetch.
    """

    def __init__(self, fetch: Callable[..., Any], **params: Any) -> None:
        self._fetch = fetch
        self._params = dict(params)
        self._callbacks: list[WireCallback] = []
        self.last_result: WireResult | None = None

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)

    def connect(self, callback: WireCallback) -> None:
        """Register ``callback`` and deliver a fresh result to it."""
        self._callbacks.append(callback)
        callback(self._load())

    def disconnect(self, callback: WireCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def update(self, **params: Any) -> bool:
        """Merge new parameters; refresh and return True only if they changed."""
        merged = {**self._params, **params}
        if merged == self._params:
            return False
        self._params = merged
        self.refresh()
        return True

    def refresh(self) -> WireResult:
        """Re-run the fetch and deliver the result to every subscriber."""
        result = self._load()
        for callback in list(self._callbacks):
            callback(result)
        return result

    def _load(self) -> WireResult:
        try:
            result = WireResult(data=self._fetch(**self._params))
        except Exception as exc:
            logger.debug("Wire fetch %r failed", self._fetch, exc_info=exc)
            result = WireResult(error=exc)
        self.last_result = result
        return result
