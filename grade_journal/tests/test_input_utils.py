# tests/test_input_utils.py
import pytest
from journal.input_utils import parse_name, parse_grades, parse_threshold
from journal.errors import DataValidationError, EmptyGradesError, InvalidThresholdError

def test_parse_name_trims():
    assert parse_name("  Иванов Иван \n") == "Иванов Иван"

def test_parse_name_rejects_blank():
    with pytest.raises(DataValidationError):
        parse_name("   ")

def test_parse_grades_valid():
    assert parse_grades(" 5  4\t5 ") == [5, 4, 5]

@pytest.mark.parametrize("raw, bad", [("5 4 7", "7"), ("5 x 3", "x"), ("0", "0"), ("4.5", "4.5")])
def test_parse_grades_names_bad_token(raw, bad):
    with pytest.raises(DataValidationError) as exc_info:
        parse_grades(raw)
    assert f"'{bad}'" in str(exc_info.value)

def test_parse_grades_empty():
    with pytest.raises(EmptyGradesError):
        parse_grades("   ")

@pytest.mark.parametrize("raw, expected", [("3", 3.0), ("1", 1.0), ("5", 5.0), (" 3.5 ", 3.5)])
def test_parse_threshold_valid(raw, expected):
    assert parse_threshold(raw) == expected

@pytest.mark.parametrize("raw", ["abc", "7", "0.99", "", "nan", "inf"])
def test_parse_threshold_invalid(raw):
    with pytest.raises(InvalidThresholdError):
        parse_threshold(raw)
