from datetime import date

import pytest

from exercise_tracker_api.app.core.errors import ValidationError
from exercise_tracker_api.app.schemas.exercise import ExerciseCreate, LogQuery, parse_date, parse_int

TODAY = date(2024, 3, 10)


@pytest.mark.parametrize("value,expected", [(30, 30), ("30", 30), (" 15 ", 15), (20.0, 20), ("-5", -5)])
def test_parse_int_accepts_integers(value, expected):
    assert parse_int(value, "duration") == expected


@pytest.mark.parametrize("value", ["abc", "12.5", 12.5, True, None, "", [1]])
def test_parse_int_rejects_non_integers(value):
    with pytest.raises(ValidationError):
        parse_int(value, "duration")


def test_parse_date():
    assert parse_date("2023-01-15") == "2023-01-15"
    assert parse_date(None) is None
    assert parse_date("  ") is None
    with pytest.raises(ValidationError):
        parse_date("20230115")
    with pytest.raises(ValidationError):
        parse_date(20230115)


def test_exercise_create_from_payload():
    data = ExerciseCreate.from_payload({"description": " run ", "duration": "30"}, TODAY)
    assert data.description == "run"
    assert data.duration == 30
    assert data.date == "2024-03-10"


def test_log_query_defaults():
    query = LogQuery.from_params(None, None, None, TODAY)
    assert query.from_date == "1970-01-01"
    assert query.to_date == "2024-03-10"
    assert query.limit == 0


def test_log_query_explicit_values():
    query = LogQuery.from_params("2023-01-01", "2023-01-31", "5", TODAY)
    assert (query.from_date, query.to_date, query.limit) == ("2023-01-01", "2023-01-31", 5)


def test_parse_int_bounds():
    assert parse_int(str(2**63 - 1), "limit") == 2**63 - 1
    assert parse_int(-(2**63), "limit") == -(2**63)
    assert parse_int("0" * 30 + "7", "limit") == 7
    for value in (2**63, -(2**63) - 1, "9" * 25, "-" + "9" * 25, 1e30):
        with pytest.raises(ValidationError, match="out of range"):
            parse_int(value, "limit")
