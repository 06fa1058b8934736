from datetime import date, datetime

from dateutil import parser as date_parser

# Fields holding calendar dates. last_updated is server-set text and is not
# part of this set.
DATE_FIELDS = (
    "ctc_date",
    "birthday",
    "date_hired",
    "date_regularized",
    "date_separated",
    "contract_start",
    "contract_end",
)

MISSING = "N/A"

# Two fill-ins for parts the text leaves out. Month and day fall back to
# January 1st; a year that differs between the two was never in the text.
_DEFAULT = datetime(2000, 1, 1)
_YEAR_CHECK = datetime(2001, 1, 1)


def normalize_date(value):
    """
    Turns a date-like field value into a datetime.date, or None.
    e.g., "1990-05-02", "2024-03-04T16:00:00.000Z", "3/4/2024", date(2024, 3, 4)

    Never raises: text that cannot be parsed and values of any other type
    become None. Text without a year ("May", "12", "Sunday") is None; a
    missing month or day is the first ("1990" -> 1990-01-01).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        parsed = date_parser.parse(text, default=_DEFAULT)
        if parsed.year != date_parser.parse(text, default=_YEAR_CHECK).year:
            return None
    except (ValueError, OverflowError):
        return None
    return parsed.date()


def normalize_record_dates(record):
    """Copy of the record with every date field ready for the edit form."""
    if record is None:
        return None
    normalized = dict(record)
    for field in DATE_FIELDS:
        if field in normalized:
            normalized[field] = normalize_date(normalized[field])
    return normalized


def format_date(value):
    """
    Display form of a date-like value: month/day/year without zero padding,
    or "N/A" when the value is missing or not a valid date.
    """
    parsed = normalize_date(value)
    if parsed is None:
        return MISSING
    return f"{parsed.month}/{parsed.day}/{parsed.year}"
