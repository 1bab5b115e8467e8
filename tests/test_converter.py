from datetime import date, datetime, timedelta, timezone

import pytest

from bikram_sambat.api import epoch_table
from bikram_sambat.api.converter import (
    BSDate,
    bs_to_gregorian,
    coerce_bs,
    coerce_gregorian,
    gregorian_range,
    gregorian_to_bs,
    is_valid_bs_date,
    today,
)
from bikram_sambat.api.exceptions import (
    BikramSambatError,
    InvalidDayError,
    InvalidMonthError,
    OutOfRangeError,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(1943, 4, 14), "2000-01-01"),
        ("1944-01-01", "2000-09-17"),
        (date(2023, 4, 14), "2080-01-01"),
        ((2024, 4, 13), "2081-01-01"),
        ("2025/02/25", "2081-11-13"),
        (date(2025, 4, 14), "2082-01-01"),
        (date(2034, 4, 13), "2090-12-30"),
    ],
)
def test_gregorian_to_bs_known_values(value, expected):
    assert gregorian_to_bs(value).isoformat() == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (BSDate(2000, 0, 1), date(1943, 4, 14)),
        ((2000, 8, 17), date(1944, 1, 1)),
        ("2081-01-01", date(2024, 4, 13)),
        (BSDate(2081, 10, 13), date(2025, 2, 25)),
        ("2083-07-03", date(2026, 10, 19)),
    ],
)
def test_bs_to_gregorian_known_values(value, expected):
    assert bs_to_gregorian(value) == expected


def test_day_after_anchor_is_one_gregorian_day_later():
    anchor = epoch_table.REFERENCE_ANCHOR
    assert bs_to_gregorian(BSDate(2000, 0, 2)) == anchor.gregorian + timedelta(days=1)


def test_roundtrip_over_whole_table():
    for year, lengths in epoch_table.BS_MONTH_LENGTHS.items():
        for month, length in enumerate(lengths):
            for day in (1, length):
                value = BSDate(year, month, day)
                assert gregorian_to_bs(bs_to_gregorian(value)) == value


def test_consecutive_days_are_consecutive_gregorian_days():
    previous = None
    for year in (2000, 2045, 2081, 2090):
        for month, length in enumerate(epoch_table.BS_MONTH_LENGTHS[year]):
            for day in range(1, length + 1):
                current = bs_to_gregorian(BSDate(year, month, day))
                if previous is not None and (year, month, day) != (year, 0, 1):
                    assert current - previous == timedelta(days=1)
                previous = current


def test_conversion_is_monotonic():
    samples = [BSDate(2000, 0, 1), BSDate(2000, 11, 31), BSDate(2050, 5, 15), BSDate(2081, 10, 13), BSDate(2090, 11, 30)]
    converted = [bs_to_gregorian(value) for value in samples]
    assert converted == sorted(converted)
    assert len(set(converted)) == len(converted)


def test_gregorian_range_covers_table():
    first, last = gregorian_range()
    assert first == date(1943, 4, 14)
    assert last == date(2034, 4, 13)
    assert gregorian_to_bs(first) == BSDate(2000, 0, 1)


@pytest.mark.parametrize("value", [date(1943, 4, 13), date(1900, 1, 1), date(2034, 4, 14)])
def test_gregorian_to_bs_outside_table_raises(value):
    with pytest.raises(OutOfRangeError):
        gregorian_to_bs(value)


def test_bs_to_gregorian_rejects_unknown_year():
    with pytest.raises(OutOfRangeError) as info:
        bs_to_gregorian(BSDate(2091, 0, 1))
    assert info.value.year == 2091


@pytest.mark.parametrize("month", [-1, 12])
def test_bs_to_gregorian_rejects_invalid_month(month):
    with pytest.raises(InvalidMonthError):
        bs_to_gregorian(BSDate(2081, month, 1))


@pytest.mark.parametrize("day", [0, 31, 33])
def test_bs_to_gregorian_rejects_invalid_day(day):
    # Falgun 2081 has 30 days
    with pytest.raises(InvalidDayError):
        bs_to_gregorian(BSDate(2081, 10, day))


def test_errors_are_value_errors():
    assert issubclass(BikramSambatError, ValueError)
    with pytest.raises(ValueError):
        bs_to_gregorian((1990, 0, 1))


def test_is_valid_bs_date():
    assert is_valid_bs_date("2081-11-30")
    assert not is_valid_bs_date("2081-11-31")
    assert not is_valid_bs_date((2081, 12, 1))
    assert not is_valid_bs_date(BSDate(1999, 0, 1))


def test_coerce_helpers_accept_various_inputs():
    assert coerce_gregorian("2025/02/25") == (2025, 2, 25)
    assert coerce_gregorian((2022, 11, 5)) == (2022, 11, 5)
    assert coerce_gregorian(datetime(2025, 2, 25, 23, 0)) == (2025, 2, 25)
    assert coerce_bs("2081/11/13") == (2081, 10, 13)
    assert coerce_bs((2081, 10, 13)) == (2081, 10, 13)
    assert coerce_bs(BSDate(2081, 10, 13)) == (2081, 10, 13)


def test_coerce_aware_datetime_uses_utc():
    kathmandu = timezone(timedelta(hours=5, minutes=45))
    assert coerce_gregorian(datetime(2025, 2, 26, 2, 0, tzinfo=kathmandu)) == (2025, 2, 25)


def test_coerce_rejects_bad_input():
    with pytest.raises(ValueError):
        coerce_gregorian("2025-02")
    with pytest.raises(TypeError):
        coerce_bs(42)  # type: ignore[arg-type]


def test_today_uses_given_instant():
    now = datetime(2025, 2, 25, 12, 0, tzinfo=timezone.utc)
    assert today(now) == BSDate(2081, 10, 13)


def test_bsdate_helpers():
    value = BSDate(2081, 10, 13)
    assert value.isoformat() == "2081-11-13"
    assert value.isoformat("/") == "2081/11/13"
    assert value.month_name == "Falgun"
    assert value.to_gregorian() == date(2025, 2, 25)
    assert BSDate(2081, 10, 13) < BSDate(2081, 11, 1) < BSDate(2082, 0, 1)
