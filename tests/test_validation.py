"""Unit tests for required-field checks, id parsing and message templates."""

import pytest

from palette_api.core import validation
from palette_api.core.errors import (
    OUTCOME_STATUS,
    ConflictError,
    EmptyResultError,
    InternalError,
    NotFoundError,
    Outcome,
    ValidationError,
)

FULL_PALETTE = {
    "name": "New Palette",
    "color1": "434f4f",
    "color2": "nr44j4",
    "color3": "h4b3b4",
    "color4": "jn4n44",
    "color5": "jhb4bk",
    "project_id": 1,
}


def test_complete_palette_has_no_missing_field():
    assert validation.first_missing_field(FULL_PALETTE, validation.PALETTE_CREATE_FIELDS) is None


def test_reports_first_missing_field_in_fixed_order():
    body = dict(FULL_PALETTE)
    del body["color2"]
    del body["color4"]
    assert validation.first_missing_field(body, validation.PALETTE_CREATE_FIELDS) == "color2"


@pytest.mark.parametrize("field", ["name", "color1", "color2", "color3", "color4", "color5", "project_id"])
def test_each_missing_field_is_named(field):
    body = dict(FULL_PALETTE)
    del body[field]
    assert validation.first_missing_field(body, validation.PALETTE_CREATE_FIELDS) == field


@pytest.mark.parametrize("value", ["", None, 0])
def test_falsy_values_count_as_missing(value):
    body = dict(FULL_PALETTE, color3=value)
    assert validation.first_missing_field(body, validation.PALETTE_CREATE_FIELDS) == "color3"


def test_update_fields_do_not_require_project_id():
    body = dict(FULL_PALETTE)
    del body["project_id"]
    assert validation.first_missing_field(body, validation.PALETTE_UPDATE_FIELDS) is None


def test_none_record_reports_first_field():
    assert validation.first_missing_field(None, validation.PALETTE_CREATE_FIELDS) == "name"
    assert validation.first_missing_field(None, validation.PROJECT_FIELDS) == "name"


def test_missing_palette_field_message_template():
    assert validation.missing_palette_field_message("color2") == (
        "Expected format: { name: <String>, color1: <String>, color2: <String>, "
        "color3: <String>, color4: <String>, color5: <String>, project_id: <Number>}. "
        "You're missing a color2 property."
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        (" 7 ", 7),
        (5, 5),
        ("0", None),
        ("-3", None),
        ("abc", None),
        ("1.5", None),
        ("", None),
        (None, None),
        (True, None),
        (str(validation.MAX_ID), validation.MAX_ID),
        (str(validation.MAX_ID + 1), None),
    ],
)
def test_parse_id(raw, expected):
    assert validation.parse_id(raw) == expected


def test_outcome_status_policy():
    assert OUTCOME_STATUS == {
        Outcome.EMPTY_RESULT: 404,
        Outcome.NOT_FOUND: 404,
        Outcome.CONFLICT: 409,
        Outcome.VALIDATION: 422,
        Outcome.INTERNAL: 500,
    }
    assert ValidationError("x", field="name").status_code == 422
    assert NotFoundError("x").status_code == 404
    assert EmptyResultError("x").status_code == 404
    assert isinstance(EmptyResultError("x"), NotFoundError)
    assert ConflictError("x").status_code == 409
    assert InternalError("x").status_code == 500


def test_first_non_text_field_follows_field_order():
    body = dict(FULL_PALETTE, color2=7, color4=["x"])
    assert validation.first_non_text_field(body, validation.PALETTE_UPDATE_FIELDS) == "color2"
    assert validation.first_non_text_field(FULL_PALETTE, validation.PALETTE_UPDATE_FIELDS) is None
