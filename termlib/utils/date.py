from typing import List, Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"


def to_date(date_like: Union[str, date, datetime, Timestamp]) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    # datetime is a subclass of date, check it first
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def year_ends(first_year: int, count: int) -> List[date]:
    """
    December 31 of ``count`` successive years starting at ``first_year``.
    """
    first = date(first_year, 12, 31)
    return [first + relativedelta(years=n) for n in range(count)]


def add_days(start: Union[str, date, datetime], days: int) -> date:
    """
    Calendar-day shift (no business-day adjustment).
    """
    return to_date(start) + relativedelta(days=days)
