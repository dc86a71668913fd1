# tests/data_model/q_wrapper/test_q_transaction.py
import logging
from datetime import date
from decimal import Decimal

import pytest

from qif_reader.data_model import ITransaction, IToDict, Transaction
from qif_reader.data_model.q_wrapper import FieldStatus
from qif_reader.utilities.converters_scalar import DEFAULT_DATE_FORMAT


def _mk(**fields) -> Transaction:
    return Transaction(fields)


def test_defaults_to_day_month_year_format():
    # Arrange / Act
    t = Transaction({"D": "01/02/2016"})
    # Assert
    assert t.date_format == DEFAULT_DATE_FORMAT
    assert t.date == date(2016, 2, 1)


def test_none_date_format_falls_back_to_default():
    assert Transaction({}, None).date_format == DEFAULT_DATE_FORMAT


def test_passthrough_accessors():
    t = _mk(N="1001", P="Store", M="Note")
    assert (t.number, t.payee, t.memo) == ("1001", "Store", "Note")


def test_absent_codes_return_none():
    t = Transaction()
    assert t.get_value("P") is None
    assert t.payee is None and t.memo is None and t.number is None
    assert t.date is None and t.amount is None
    assert len(t) == 0


def test_empty_value_is_present():
    t = _mk(M="")
    assert t.memo == ""
    assert "M" in t


def test_empty_code_is_rejected():
    with pytest.raises(ValueError):
        Transaction({"": "x"})


@pytest.mark.parametrize("fmt", ["qq/MM", "'no fields'", "dd/MM/yyyy 'open"])
def test_unusable_date_format_is_rejected_at_construction(fmt):
    with pytest.raises(ValueError):
        Transaction({"D": "01/02/2016"}, fmt)


def test_underscore_grouped_amount_is_unreadable():
    # Arrange
    t = _mk(T="1_000")
    # Act
    result = t.amount_field()
    # Assert
    assert t.amount is None
    assert result.status is FieldStatus.INVALID
    assert result.raw == "1_000"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("-10.50", Decimal("-10.50")),
        ("1,234.56", Decimal("1234.56")),
        ("-1,000,000", Decimal("-1000000")),
        (" 3.5 ", Decimal("3.5")),
    ],
)
def test_amount_parses_after_removing_commas(raw, expected):
    assert _mk(T=raw).amount == expected


def test_unreadable_values_yield_none_and_warn(caplog):
    # Arrange
    t = _mk(D="31/31/2016", T="abc")
    # Act
    with caplog.at_level(logging.WARNING):
        d, a = t.date, t.amount
    # Assert
    assert d is None and a is None
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_field_results_distinguish_missing_from_invalid():
    # Arrange
    missing = Transaction()
    invalid = _mk(D="soon", T="n/a")
    valid = _mk(D="01/02/2016", T="5")
    # Act / Assert
    assert missing.date_field().status is FieldStatus.MISSING
    assert missing.amount_field().status is FieldStatus.MISSING
    assert invalid.date_field().status is FieldStatus.INVALID
    assert invalid.amount_field().raw == "n/a"
    assert valid.date_field().value == date(2016, 2, 1)
    assert valid.amount_field().value == Decimal("5")


def test_mdy_format_transaction():
    t = Transaction({"D": "01/02/2016"}, "MM/dd/yyyy")
    assert t.date == date(2016, 1, 2)


def test_constructor_copies_mapping():
    # Arrange
    src = {"P": "A"}
    t = Transaction(src)
    # Act
    src["P"] = "B"
    # Assert
    assert t.payee == "A", "Each Transaction owns its own field mapping."


def test_values_view_is_read_only():
    t = _mk(P="A")
    with pytest.raises(TypeError):
        t.values["P"] = "B"  # type: ignore[index]


def test_keys_and_to_dict():
    t = _mk(D="01/02/2016", XA="x")
    assert set(t.keys()) == {"D", "XA"}
    assert t.to_dict() == {"D": "01/02/2016", "XA": "x"}


def test_equality_and_hash():
    a = Transaction({"P": "x", "T": "1"})
    b = Transaction({"T": "1", "P": "x"})
    c = Transaction({"P": "x", "T": "1"}, "MM/dd/yyyy")
    assert a == b and hash(a) == hash(b)
    assert a != c
    assert (a == "x") is False


def test_str_shows_mapping():
    assert str(_mk(P="x")) == "{'P': 'x'}"


def test_conforms_to_protocols():
    t = Transaction()
    assert isinstance(t, ITransaction)
    assert isinstance(t, IToDict)
