"""Module: formatting.

Date conversion between form/template text and ``datetime.date``.
Dates are shown as day/month/year, e.g. ``01/01/1970``.
"""

from datetime import date, datetime

DATE_FORMAT = "%d/%m/%Y"


def format_date(value: date | None) -> str:
    if value is None:
        return ""
    # strftime("%Y") does not zero-pad years before 1000 on every platform.
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_date(text: str | None) -> date | None:
    """
    Parse a ``DD/MM/YYYY`` string.

    Blank input yields ``None``; anything else that does not match the
    format raises ``ValueError``.
    """
    if text is None or not text.strip():
        return None
    return datetime.strptime(text.strip(), DATE_FORMAT).date()
