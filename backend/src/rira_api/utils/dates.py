"""Persian (Jalali) calendar date helpers.

Dates are exchanged as ``yyyy/MM/dd`` strings; no calendar arithmetic is
performed on them after they are produced.
"""

from datetime import date, datetime

# Cumulative day counts before each Gregorian month in a common year
_GREGORIAN_MONTH_OFFSETS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def gregorian_to_jalali(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Convert a Gregorian date to a Jalali (year, month, day) tuple."""
    leap_year = year + 1 if month > 2 else year
    days = (
        355666
        + 365 * year
        + (leap_year + 3) // 4
        - (leap_year + 99) // 100
        + (leap_year + 399) // 400
        + day
        + _GREGORIAN_MONTH_OFFSETS[month - 1]
    )

    jalali_year = -1595 + 33 * (days // 12053)
    days %= 12053
    jalali_year += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        jalali_year += (days - 1) // 365
        days = (days - 1) % 365

    # First six months have 31 days, the next five 30, Esfand 29 or 30
    if days < 186:
        return jalali_year, 1 + days // 31, 1 + days % 31
    return jalali_year, 7 + (days - 186) // 30, 1 + (days - 186) % 30


def to_persian_date_string(value: date | datetime) -> str:
    """Render a date as a ``yyyy/MM/dd`` Persian-calendar string."""
    year, month, day = gregorian_to_jalali(value.year, value.month, value.day)
    return f"{year:04d}/{month:02d}/{day:02d}"


def persian_today() -> str:
    """Today's date as a ``yyyy/MM/dd`` Persian-calendar string."""
    return to_persian_date_string(datetime.now())
