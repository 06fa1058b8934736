import json
from datetime import date


def stringify_value(value):
    """
    Stable text form of a field value, used for search matching and export.
    None -> "null", True -> "true", 1500.0 -> "1500", date -> ISO format.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def record_matches(record, term):
    return any(term in stringify_value(value).lower() for value in record.values())


def filter_records(records, term):
    """
    Records having at least one field whose text contains the term,
    case-insensitively. A blank term keeps every record. Input order is kept.
    """
    if term is None or not term.strip():
        return list(records)
    lowered = term.lower()
    return [record for record in records if record_matches(record, lowered)]
