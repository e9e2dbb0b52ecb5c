"""Reduce heterogeneous data-service errors to display messages."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from enum import Enum
from typing import Any

UNKNOWN_ERROR_MESSAGE = "Unknown error"

PAGE_ERRORS_FIELDS = ("pageErrors", "page_errors")
FIELD_ERRORS_FIELDS = ("fieldErrors", "field_errors")

_MISSING = object()


class ErrorShape(str, Enum):
    PAGE_LEVEL = "page_level"
    FIELD_LEVEL = "field_level"
    MULTI = "multi"
    BODY_MESSAGE = "body_message"
    MESSAGE = "message"
    EXCEPTION = "exception"
    PLAIN_STRING = "plain_string"
    UNKNOWN = "unknown"


def _field(obj: Any, *names: str) -> Any:
    """Return the first present field among ``names`` as a key or attribute."""
    for name in names:
        try:
            if isinstance(obj, Mapping):
                value = obj.get(name, _MISSING)
            else:
                value = getattr(obj, name, _MISSING)
        except Exception:
            # A broken accessor counts as a missing field.
            continue
        if value is not _MISSING:
            return value
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _containers(error: Any) -> tuple[Any, ...]:
    body = _field(error, "body")
    if body is None:
        return (error,)
    return (body, error)


def _page_errors(error: Any) -> Sequence[Any] | None:
    for container in _containers(error):
        items = _field(container, *PAGE_ERRORS_FIELDS)
        if _is_sequence(items) and len(items) > 0:
            return items
    return None


def _field_errors(error: Any) -> Mapping[Any, Any] | None:
    for container in _containers(error):
        mapping = _field(container, *FIELD_ERRORS_FIELDS)
        if isinstance(mapping, Mapping) and len(mapping) > 0:
            return mapping
    return None


def _multi_items(error: Any) -> Sequence[Any] | None:
    if _is_sequence(error):
        return error
    body = _field(error, "body")
    if _is_sequence(body):
        return body
    return None


def _body_message(error: Any) -> str | None:
    body = _field(error, "body")
    if body is None:
        return None
    message = _field(body, "message")
    return message if isinstance(message, str) else None


def _top_level_message(error: Any) -> str | None:
    message = _field(error, "message")
    return message if isinstance(message, str) else None


def _exception_text(error: Any) -> str | None:
    if not isinstance(error, BaseException):
        return None
    try:
        text = str(error)
    except Exception:
        return None
    return text or None


_SHAPE_PREDICATES: tuple[tuple[ErrorShape, Callable[[Any], Any]], ...] = (
    (ErrorShape.PAGE_LEVEL, _page_errors),
    (ErrorShape.FIELD_LEVEL, _field_errors),
    (ErrorShape.MULTI, _multi_items),
    (ErrorShape.BODY_MESSAGE, _body_message),
    (ErrorShape.MESSAGE, _top_level_message),
    (ErrorShape.EXCEPTION, _exception_text),
    (ErrorShape.PLAIN_STRING, lambda error: isinstance(error, str) or None),
)


def classify_error(error: Any) -> ErrorShape:
    """Return the first shape in precedence order that ``error`` satisfies."""
    for shape, predicate in _SHAPE_PREDICATES:
        try:
            matched = predicate(error) is not None
        except Exception:
            # A container that cannot be inspected does not match its shape.
            matched = False
        if matched:
            return shape
    return ErrorShape.UNKNOWN


def _messages(items: Sequence[Any]) -> list[str]:
    messages: list[str] = []
    for item in items:
        message = _field(item, "message")
        if isinstance(message, str):
            messages.append(message)
    return messages


def _reduce_single(error: Any, shape: ErrorShape) -> list[str]:
    if shape is ErrorShape.PAGE_LEVEL:
        return _messages(_page_errors(error) or ())
    if shape is ErrorShape.FIELD_LEVEL:
        messages: list[str] = []
        for field_errors in (_field_errors(error) or {}).values():
            if _is_sequence(field_errors):
                messages.extend(_messages(field_errors))
        return messages
    if shape is ErrorShape.BODY_MESSAGE:
        return [_body_message(error)]
    if shape is ErrorShape.MESSAGE:
        return [_top_level_message(error)]
    if shape is ErrorShape.EXCEPTION:
        return [_exception_text(error)]
    if shape is ErrorShape.PLAIN_STRING:
        return [error]
    return [UNKNOWN_ERROR_MESSAGE]


def _reduce(error: Any) -> list[str]:
    """Walk nested error lists depth-first with an explicit stack."""
    messages: list[str] = []
    active: set[int] = set()
    frames: list[tuple[int | None, Iterator[Any]]] = [(None, iter((error,)))]

    while frames:
        marker, items = frames[-1]
        try:
            item = next(items, _MISSING)
        except Exception:
            # A container that fails mid-iteration keeps what it yielded so far.
            item = _MISSING
        if item is _MISSING:
            frames.pop()
            active.discard(marker)
            continue
        if item is None:
            continue

        try:
            shape = classify_error(item)
            if shape is ErrorShape.MULTI:
                children = _multi_items(item) or ()
                child_marker = id(children)
                if child_marker not in active:
                    frames.append((child_marker, iter(children)))
                    active.add(child_marker)
                continue
            messages.extend(_reduce_single(item, shape))
        except Exception:
            # An error object whose containers misbehave still reports something.
            messages.append(UNKNOWN_ERROR_MESSAGE)
    return messages


def reduce_errors(error: Any) -> list[str]:
    """Reduce one or more errors to an ordered list of display messages.

    Handles, in precedence order: UI API page-level errors, field-level errors,
    lists of errors (including a ``body`` that is a list), ``body.message``,
    a top-level ``message``, exceptions, plain strings. Anything else becomes
    ``"Unknown error"``. ``None`` yields an empty list; any other input yields
    at least one message. Never raises, whatever the nesting depth.
    """
    if error is None:
        return []
    messages = _reduce(error)
    return messages or [UNKNOWN_ERROR_MESSAGE]
