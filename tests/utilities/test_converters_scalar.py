# tests/utilities/test_converters_scalar.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from qif_reader.errors import FieldCoercionError
from qif_reader.utilities.converters_scalar import (
    check_date_format,
    has_date_directives,
    to_amount,
    to_date,
    to_strptime_format,
)


# ---------- to_strptime_format ----------
@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("dd/MM/yyyy", "%d/%m/%Y"),
        ("MM/dd/yyyy", "%m/%d/%Y"),
        ("d.M.yy", "%d.%m.%y"),
        ("yyyy-MM-dd", "%Y-%m-%d"),
        ("dd MMM yyyy", "%d %b %Y"),
        ("MMMM d, yyyy", "%B %d, %Y"),
        ("yyyy-MM-dd HH:mm:ss", "%Y-%m-%d %H:%M:%S"),
        ("yyyy-MM-dd'T'HH:mm", "%Y-%m-%dT%H:%M"),
        ("dd''MM", "%d'%m"),
        ("%Y/%m/%d", "%Y/%m/%d"),
    ],
)
def test_pattern_translation(pattern, expected):
    assert to_strptime_format(pattern) == expected


@pytest.mark.parametrize("pattern", ["", "dd/MM/yyyy 'open", "dd/QQ/yyyy"])
def test_bad_patterns_raise(pattern):
    with pytest.raises(ValueError):
        to_strptime_format(pattern)


def test_has_date_directives():
    assert has_date_directives("%d/%m/%Y")
    assert not has_date_directives("plain text")


def test_check_date_format_returns_strptime_form():
    assert check_date_format("dd/MM/yyyy") == "%d/%m/%Y"


@pytest.mark.parametrize("pattern", ["qq/MM", "'no fields'", "-- --"])
def test_check_date_format_rejects_unusable_patterns(pattern):
    with pytest.raises(ValueError):
        check_date_format(pattern)


# ---------- to_date ----------
@pytest.mark.parametrize(
    "raw,fmt,expected",
    [
        ("01/02/2016", "dd/MM/yyyy", date(2016, 2, 1)),
        ("01/02/2016", "MM/dd/yyyy", date(2016, 1, 2)),
        ("1/2/2016", "dd/MM/yyyy", date(2016, 2, 1)),
        (" 01/02/2016 ", "dd/MM/yyyy", date(2016, 2, 1)),
        ("2016-02-01", "yyyy-MM-dd", date(2016, 2, 1)),
    ],
)
def test_to_date(raw, fmt, expected):
    assert to_date(raw, fmt) == expected


@pytest.mark.parametrize("raw", ["", "abc", "32/01/2016", "01-02-2016", "01/02/2016x"])
def test_to_date_failures_raise_coercion_error(raw):
    with pytest.raises(FieldCoercionError) as ei:
        to_date(raw, "dd/MM/yyyy")
    assert ei.value.code == "D"
    assert ei.value.raw == raw


# ---------- to_amount ----------
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("0", Decimal("0")),
        ("-379.00", Decimal("-379.00")),
        ("1,234.50", Decimal("1234.50")),
        ("+5", Decimal("5")),
        ("\t-1.5 ", Decimal("-1.5")),
    ],
)
def test_to_amount(raw, expected):
    assert to_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1.2.3", "NaN", "Infinity", "$5", "1_000", "-1_234.50"])
def test_to_amount_failures_raise_coercion_error(raw):
    with pytest.raises(FieldCoercionError) as ei:
        to_amount(raw)
    assert ei.value.code == "T"


def test_coercion_error_is_value_error():
    with pytest.raises(ValueError):
        to_amount("x")
