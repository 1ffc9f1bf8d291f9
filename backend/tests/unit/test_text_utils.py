import pytest

from job_portal.utils.text_utils import parse_salary


@pytest.mark.parametrize("raw, expected", [
    ("50000", 50000.0),
    ("  42.5", 42.5),
    ("-3", -3.0),
    ("1e3", 1000.0),
    (".5", 0.5),
    ("50000 USD", 50000.0),
    ("12.34.56", 12.34),
])
def test_parse_salary_numeric_prefix(raw, expected):
    assert parse_salary(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "USD 5000", "Infinity", "1e999"])
def test_parse_salary_unparseable_is_none(raw):
    assert parse_salary(raw) is None


def test_parse_salary_accepts_numbers():
    assert parse_salary(7) == 7.0
    assert parse_salary(float("nan")) is None
