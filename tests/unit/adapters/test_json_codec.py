"""Unit tests for civildate.adapters.json_codec."""

from __future__ import annotations

import json

import pytest

from civildate.adapters.json_codec import DateJSONEncoder, dumps
from civildate.domain.date import Date
from civildate.domain.nullable import NullableDate

# pylint: disable=magic-value-comparison


def test_encodes_date_field():
    """A Date field encodes as its canonical text."""
    assert dumps({"d": Date.must_from_string("2015-05-21")}) == '{"d":"2015-05-21"}'


def test_encodes_present_nullable_date():
    """A present NullableDate encodes like a Date."""
    payload = {"d": NullableDate(Date.must_from_string("2015-05-21"))}
    assert dumps(payload) == '{"d":"2015-05-21"}'


def test_encodes_absent_nullable_date_as_null():
    """An absent NullableDate encodes as null."""
    assert dumps({"d": NullableDate()}) == '{"d":null}'


@pytest.mark.parametrize(
    "value",
    [NullableDate(), NullableDate(Date(2015, 5, 21))],
    ids=["absent", "present"],
)
def test_nullable_round_trip(value):
    """Encoded documents decode back to the same NullableDate."""
    decoded = json.loads(dumps({"d": value}))
    assert NullableDate.from_json_value(decoded["d"]) == value


def test_date_round_trip():
    """Encoded documents decode back to the same Date."""
    decoded = json.loads(dumps({"d": Date(2015, 5, 21)}))
    assert Date.from_json_value(decoded["d"]) == Date(2015, 5, 21)


def test_nested_structures():
    """Dates inside lists and nested objects are encoded too."""
    payload = {"range": [Date(2020, 1, 1), Date(2020, 12, 31)], "meta": {"n": 1}}
    assert dumps(payload) == '{"range":["2020-01-01","2020-12-31"],"meta":{"n":1}}'


def test_separators_can_be_overridden():
    """Keyword arguments are passed through to json.dumps."""
    assert dumps({"d": Date(2015, 5, 21)}, separators=(", ", ": ")) == (
        '{"d": "2015-05-21"}'
    )


def test_unknown_types_still_fail():
    """Non-date objects keep the standard TypeError."""
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, cls=DateJSONEncoder)
