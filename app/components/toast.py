"""Toast notification events dispatched through an injected notifier."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class ToastVariant(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ToastMode(str, Enum):
    DISMISSIBLE = "dismissible"
    PESTER = "pester"
    STICKY = "sticky"


@dataclass(frozen=True)
class ShowToastEvent:
    """Notice shown to the user by the host's notification service."""

    title: str
    message: str
    variant: ToastVariant = ToastVariant.INFO
    mode: ToastMode = ToastMode.DISMISSIBLE


Notifier = Callable[[ShowToastEvent], None]
