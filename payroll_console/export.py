from payroll_console.filters import stringify_value

CSV_MIMETYPE = "text/csv"


def csv_value(value):
    return "" if value is None else stringify_value(value)


def records_to_csv(records):
    """
    One line per record, values in the record's own key order joined by
    commas. No header row and no quoting: embedded commas or newlines are
    written as-is.
    """
    return "\n".join(
        ",".join(csv_value(value) for value in record.values())
        for record in records
    )
