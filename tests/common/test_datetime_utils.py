from datetime import date, datetime

import pytest

from school_dashboard.common.datetime_utils import (
    add_months,
    as_date,
    date_range,
    day_key,
    days_between,
    days_in_month,
    month_key,
    parse_iso_date,
    parse_iso_instant,
    parse_month_key,
    sunday_index,
)
from school_dashboard.common.validators import require_choice, require_iso_date, require_positive_int
from school_dashboard.core.enums import PaymentStatus
from school_dashboard.core.exceptions import ValidationError


def test_parse_day_and_instant():
    assert parse_iso_date("2024-03-15") == date(2024, 3, 15)
    assert parse_iso_instant("2024-03-15T09:30:00.000Z") == datetime(2024, 3, 15, 9, 30)
    assert parse_iso_instant("2024-03-15T23:30:00+05:30") == datetime(2024, 3, 15, 23, 30)


@pytest.mark.parametrize("value", ["", "15/03/2024", "2024-02-30", "March 15", None, 20240315])
def test_parse_rejects_non_iso(value):
    with pytest.raises(ValueError):
        parse_iso_instant(value)


def test_keys():
    assert day_key(datetime(2024, 3, 5, 23, 59)) == "2024-03-05"
    assert month_key(date(2024, 3, 5)) == "2024-03"
    assert parse_month_key("2024-11") == date(2024, 11, 1)


def test_month_arithmetic():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert add_months(date(2024, 3, 31), -3) == date(2023, 12, 1)
    assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 1)


def test_days_between_ignores_time():
    assert days_between(datetime(2024, 3, 15, 23, 0), datetime(2024, 3, 16, 1, 0)) == 1
    assert days_between(date(2024, 3, 15), date(2024, 3, 1)) == -14


def test_sunday_index():
    assert sunday_index(date(2024, 3, 3)) == 0
    assert sunday_index(date(2024, 3, 9)) == 6


def test_date_range_inclusive():
    assert list(date_range(date(2024, 2, 28), date(2024, 3, 1))) == [
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
    ]


def test_as_date_rejects_strings():
    with pytest.raises(TypeError):
        as_date("2024-03-15")


def test_validators():
    assert require_positive_int("12", "Amount") == 12
    assert require_choice("paid", PaymentStatus, "Status") is PaymentStatus.PAID
    assert require_iso_date(" 2024-03-15 ", "Date") == "2024-03-15"
    for bad in (0, -3, 1.5, "ten"):
        with pytest.raises(ValidationError):
            require_positive_int(bad, "Amount")
