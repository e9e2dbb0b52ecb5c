"""Unit tests for error reduction across data-service error shapes."""

from __future__ import annotations

from collections import OrderedDict
from types import SimpleNamespace

import pytest

from app.core.lds_utils import UNKNOWN_ERROR_MESSAGE
from app.core.lds_utils import ErrorShape
from app.core.lds_utils import classify_error
from app.core.lds_utils import reduce_errors
from app.remote.client import ContactsApiRequestError


def test_none_reduces_to_empty_list() -> None:
    assert reduce_errors(None) == []


@pytest.mark.parametrize("text", ["boom", "", "  padded  "])
def test_plain_strings_are_returned_verbatim(text: str) -> None:
    assert reduce_errors(text) == [text]


def test_top_level_message_is_used() -> None:
    assert reduce_errors({"message": "Something broke"}) == ["Something broke"]


def test_body_message_is_used() -> None:
    assert reduce_errors({"body": {"message": "Insufficient access"}}) == ["Insufficient access"]


def test_body_message_wins_over_top_level_message() -> None:
    error = {"body": {"message": "from body"}, "message": "from top"}

    assert reduce_errors(error) == ["from body"]


def test_page_errors_map_to_messages_in_order() -> None:
    error = {"body": {"pageErrors": [{"message": "a"}, {"message": "b"}]}}

    assert reduce_errors(error) == ["a", "b"]


def test_page_errors_on_the_error_itself_are_recognized() -> None:
    assert reduce_errors({"pageErrors": [{"message": "a"}, {"message": "b"}]}) == ["a", "b"]


def test_field_errors_flatten_in_field_then_entry_order() -> None:
    field_errors = OrderedDict()
    field_errors["Email"] = [{"message": "invalid"}]
    field_errors["FirstName"] = [{"message": "required"}, {"message": "too long"}]

    assert reduce_errors({"body": {"fieldErrors": field_errors}}) == ["invalid", "required", "too long"]


def test_field_errors_follow_mapping_iteration_order() -> None:
    field_errors = OrderedDict()
    field_errors["FirstName"] = [{"message": "required"}]
    field_errors["Email"] = [{"message": "invalid"}]

    assert reduce_errors({"fieldErrors": field_errors}) == ["required", "invalid"]


def test_empty_page_errors_fall_through_to_field_errors() -> None:
    error = {
        "body": {
            "pageErrors": [],
            "fieldErrors": {"LastName": [{"message": "Complete this field."}]},
            "message": "An error occurred while trying to update the record.",
        }
    }

    assert reduce_errors(error) == ["Complete this field."]


def test_mixed_list_is_flattened_recursively() -> None:
    error = [{"message": "x"}, "y", {"body": {"message": "z"}}]

    assert reduce_errors(error) == ["x", "y", "z"]


def test_nested_lists_are_fully_flattened() -> None:
    error = [["a", ["b"]], ({"pageErrors": [{"message": "c"}]},), "d"]

    assert reduce_errors(error) == ["a", "b", "c", "d"]


def test_list_body_is_treated_as_multiple_errors() -> None:
    error = {"body": [{"message": "first"}, {"message": "second"}], "message": "ignored"}

    assert reduce_errors(error) == ["first", "second"]


def test_duplicates_are_kept() -> None:
    shared = {"message": "again"}

    assert reduce_errors([shared, shared]) == ["again", "again"]


def test_unknown_shape_falls_back() -> None:
    assert reduce_errors({"foo": 1}) == [UNKNOWN_ERROR_MESSAGE]
    assert reduce_errors(42) == ["Unknown error"]


def test_unknown_elements_inside_list_fall_back_individually() -> None:
    assert reduce_errors(["a", {"foo": 1}, None]) == ["a", "Unknown error"]


def test_non_none_input_never_yields_empty_list() -> None:
    assert reduce_errors([]) == [UNKNOWN_ERROR_MESSAGE]
    assert reduce_errors([None]) == [UNKNOWN_ERROR_MESSAGE]
    assert reduce_errors({"pageErrors": [{"code": "NO_MESSAGE"}]}) == [UNKNOWN_ERROR_MESSAGE]


def test_page_errors_take_precedence_over_message() -> None:
    error = {"pageErrors": [{"message": "page"}], "message": "top"}

    assert classify_error(error) is ErrorShape.PAGE_LEVEL
    assert reduce_errors(error) == ["page"]


def test_page_errors_take_precedence_over_field_errors() -> None:
    error = {
        "body": {
            "pageErrors": [{"message": "page"}],
            "fieldErrors": {"Email": [{"message": "field"}]},
        }
    }

    assert reduce_errors(error) == ["page"]


def test_non_string_messages_are_not_recognized() -> None:
    assert reduce_errors({"message": 500}) == [UNKNOWN_ERROR_MESSAGE]
    assert reduce_errors({"body": {"message": None}, "message": "top"}) == ["top"]


def test_attribute_style_errors_are_supported() -> None:
    error = SimpleNamespace(body=SimpleNamespace(pageErrors=[SimpleNamespace(message="attr page")]))

    assert reduce_errors(error) == ["attr page"]


def test_exceptions_reduce_to_their_text() -> None:
    assert reduce_errors(ValueError("bad value")) == ["bad value"]
    assert reduce_errors(RuntimeError()) == [UNKNOWN_ERROR_MESSAGE]


def test_client_request_error_uses_api_envelope() -> None:
    error = ContactsApiRequestError(
        "Request validation failed",
        status_code=400,
        body={
            "statusCode": 400,
            "errorCode": "validation_error",
            "message": "Request validation failed",
            "pageErrors": [],
            "fieldErrors": {"Email": [{"errorCode": "validation_error", "message": "Enter a valid email address"}]},
        },
    )

    assert reduce_errors(error) == ["Enter a valid email address"]


def test_client_request_error_without_body_uses_message() -> None:
    error = ContactsApiRequestError("Contacts request failed")

    assert classify_error(error) is ErrorShape.MESSAGE
    assert reduce_errors(error) == ["Contacts request failed"]


def test_broken_accessors_do_not_raise() -> None:
    class Hostile:
        @property
        def body(self):
            raise RuntimeError("no body")

        @property
        def message(self):
            raise KeyError("no message")

    assert reduce_errors(Hostile()) == [UNKNOWN_ERROR_MESSAGE]


class _UnsizedList(list):
    def __len__(self) -> int:
        raise RuntimeError("boom")


class _BrokenValues(dict):
    def values(self):
        raise RuntimeError("boom")


class _FailsAfterFirst(list):
    def __iter__(self):
        yield "first"
        raise RuntimeError("stream closed")


def test_deeply_nested_lists_do_not_exhaust_the_stack() -> None:
    error: object = "leaf"
    for _ in range(3000):
        error = [error]

    assert reduce_errors(error) == ["leaf"]


def test_deeply_nested_list_bodies_do_not_exhaust_the_stack() -> None:
    error: object = {"message": "leaf"}
    for _ in range(3000):
        error = {"body": [error]}

    assert reduce_errors(error) == ["leaf"]


def test_page_errors_with_failing_len_fall_through() -> None:
    assert classify_error({"pageErrors": _UnsizedList([{"message": "a"}])}) is ErrorShape.UNKNOWN
    assert reduce_errors({"pageErrors": _UnsizedList([{"message": "a"}])}) == [UNKNOWN_ERROR_MESSAGE]
    assert reduce_errors({"pageErrors": _UnsizedList([{"message": "a"}]), "message": "top"}) == ["top"]


def test_field_errors_with_failing_values_reduce_to_fallback() -> None:
    error = {"fieldErrors": _BrokenValues(Email=[{"message": "invalid"}])}

    assert reduce_errors(["before", error]) == ["before", UNKNOWN_ERROR_MESSAGE]


def test_list_failing_mid_iteration_keeps_earlier_messages() -> None:
    assert reduce_errors([_FailsAfterFirst(), "after"]) == ["first", "after"]


def test_self_referencing_list_terminates() -> None:
    error: list = ["outer"]
    error.append(error)

    assert reduce_errors(error) == ["outer"]


def test_reduction_is_idempotent_and_does_not_mutate_input() -> None:
    error = {"body": {"fieldErrors": {"Email": [{"message": "invalid"}]}}}
    snapshot = {"body": {"fieldErrors": {"Email": [{"message": "invalid"}]}}}

    first = reduce_errors(error)
    second = reduce_errors(error)

    assert first == second == ["invalid"]
    assert error == snapshot


@pytest.mark.parametrize(
    ("error", "shape"),
    [
        ({"pageErrors": [{"message": "a"}]}, ErrorShape.PAGE_LEVEL),
        ({"fieldErrors": {"f": [{"message": "a"}]}}, ErrorShape.FIELD_LEVEL),
        (["a"], ErrorShape.MULTI),
        ({"body": {"message": "a"}}, ErrorShape.BODY_MESSAGE),
        ({"message": "a"}, ErrorShape.MESSAGE),
        (KeyError("a"), ErrorShape.EXCEPTION),
        ("a", ErrorShape.PLAIN_STRING),
        ({"foo": 1}, ErrorShape.UNKNOWN),
    ],
)
def test_classify_error_shapes(error: object, shape: ErrorShape) -> None:
    assert classify_error(error) is shape
