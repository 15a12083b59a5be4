"""Tests for Persian calendar date helpers."""

from datetime import date, datetime

import pytest

from rira_api.constants.validation import PERSIAN_DATE_PATTERN
from rira_api.utils.dates import gregorian_to_jalali, persian_today, to_persian_date_string


@pytest.mark.parametrize(
    "gregorian,jalali",
    [
        ((2025, 3, 21), (1404, 1, 1)),
        ((2025, 3, 20), (1403, 12, 30)),
        ((2024, 3, 20), (1403, 1, 1)),
        ((2023, 3, 21), (1402, 1, 1)),
        ((2025, 10, 11), (1404, 7, 19)),
    ],
)
def test_gregorian_to_jalali(gregorian, jalali):
    assert gregorian_to_jalali(*gregorian) == jalali


def test_date_string_is_zero_padded():
    assert to_persian_date_string(date(2025, 3, 21)) == "1404/01/01"
    assert to_persian_date_string(datetime(2025, 10, 11, 23, 59)) == "1404/07/19"


def test_today_matches_date_format():
    assert PERSIAN_DATE_PATTERN.match(persian_today())
