# tests/qif_parsers/test_header_interpreter.py
import pytest

from qif_reader.errors import InvalidHeaderError
from qif_reader.qif_parsers.header_interpreter import read_header
from qif_reader.utilities.converters_scalar import DEFAULT_DATE_FORMAT, MDY_DATE_FORMAT


def test_type_line_only_keeps_default_format():
    # Arrange
    lines = iter(["!Type:Bank", "D01/02/2016"])
    # Act
    header = read_header(lines, DEFAULT_DATE_FORMAT)
    # Assert
    assert header.type == "Bank"
    assert header.date_format == DEFAULT_DATE_FORMAT
    assert header.option is None
    assert next(lines) == "D01/02/2016", "Only the header line may be consumed."


def test_mdy_option_switches_date_format():
    # Arrange
    lines = iter(["!Option:MDY", "!Type:CCard", "^"])
    # Act
    header = read_header(lines, DEFAULT_DATE_FORMAT)
    # Assert
    assert header.type == "CCard"
    assert header.date_format == MDY_DATE_FORMAT
    assert header.option == "MDY"
    assert next(lines) == "^"


def test_type_is_taken_verbatim():
    assert read_header(iter(["!Type:Oth A "]), "dd/MM/yyyy").type == "Oth A "


def test_type_may_be_empty():
    assert read_header(iter(["!Type:"]), "dd/MM/yyyy").type == ""


def test_empty_input_raises():
    # Act / Assert
    with pytest.raises(InvalidHeaderError, match="empty") as ei:
        read_header(iter([]), DEFAULT_DATE_FORMAT)
    assert ei.value.found is None


@pytest.mark.parametrize("option", ["!Option:WEIRD", "!Option:mdy", "!Option:MDY ", "!Option:"])
def test_unknown_option_raises(option):
    with pytest.raises(InvalidHeaderError, match="Unknown option") as ei:
        read_header(iter([option, "!Type:Bank"]), DEFAULT_DATE_FORMAT)
    assert ei.value.found == option


@pytest.mark.parametrize(
    "lines,found",
    [
        (["D01/02/2016"], "D01/02/2016"),
        (["!Account", "!Type:Bank"], "!Account"),
        (["!Option:MDY"], None),
        (["!Option:MDY", "D01/02/2016"], "D01/02/2016"),
        ([" !Type:Bank"], " !Type:Bank"),
    ],
)
def test_missing_type_line_raises(lines, found):
    # Act
    with pytest.raises(InvalidHeaderError, match="Expected '!Type:'") as ei:
        read_header(iter(lines), DEFAULT_DATE_FORMAT)
    # Assert
    assert ei.value.expected == "!Type:"
    assert ei.value.found == found


def test_invalid_header_is_a_value_error():
    with pytest.raises(ValueError):
        read_header(iter(["garbage"]), DEFAULT_DATE_FORMAT)
