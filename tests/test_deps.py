"""Tests for the request parsing helpers in ``api.deps``."""

import pytest

from resource_store_api.app.api.deps import parse_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        ("  7", 7),
        ("+3", 3),
        ("-2", -2),
        ("12abc", 12),
        ("1.5", 1),
        ("007", 7),
    ],
)
def test_parse_id_reads_leading_integer(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "x1", "-", " ", ".5"])
def test_parse_id_without_digits_is_none(raw):
    assert parse_id(raw) is None


@pytest.mark.parametrize("raw", ["١", "٣abc", "１", "²"])
def test_parse_id_ignores_non_ascii_digits(raw):
    assert parse_id(raw) is None


def test_parse_id_too_long_to_convert_is_none():
    assert parse_id("1" * 5000) is None
