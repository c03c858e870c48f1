"""
Response-shaping helpers

Display formats used by the dashboard. Month and day names are fixed
English abbreviations, independent of the server locale.
"""
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union


MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

Number = Union[Decimal, float, int]


def format_display_date(value: Optional[Union[date, datetime]]) -> Optional[str]:
    """Format a date as 'Mon DD, YYYY' (e.g. 'Mar 05, 2025')"""
    if value is None:
        return None
    return f"{MONTH_ABBR[value.month - 1]} {value.day:02d}, {value.year}"


def day_label(value: Union[date, datetime]) -> str:
    """Short day name of a date (e.g. 'Mon')"""
    return DAY_ABBR[value.weekday()]


def to_float(value: Optional[Number]) -> Optional[float]:
    """Convert Decimal (psycopg2 NUMERIC) to float for JSON"""
    if value is None:
        return None
    return float(value)


def format_fixed(value: Optional[Number], places: int) -> str:
    """Fixed-point string with the given number of decimals, half-up rounding"""
    if value is None:
        value = 0
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
