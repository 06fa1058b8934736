from datetime import date, datetime

import pytest

from payroll_console.dates import DATE_FIELDS, format_date, normalize_date, normalize_record_dates


def test_normalize_iso_strings():
    assert normalize_date('1990-05-02') == date(1990, 5, 2)
    assert normalize_date('2024-03-04T16:00:00.000Z') == date(2024, 3, 4)
    assert normalize_date(' 2024-03-04 ') == date(2024, 3, 4)


def test_normalize_display_string():
    assert normalize_date('3/4/2024') == date(2024, 3, 4)


def test_normalize_passes_dates_through():
    value = date(2020, 1, 31)
    assert normalize_date(value) is value
    assert normalize_date(datetime(2020, 1, 31, 8, 30)) == date(2020, 1, 31)


@pytest.mark.parametrize('value', ['garbage', 'N/A', 'hello world', '', '   '])
def test_normalize_invalid_text_is_none(value):
    assert normalize_date(value) is None


@pytest.mark.parametrize('value, expected', [
    ('1990', date(1990, 1, 1)),
    ('05/1990', date(1990, 5, 1)),
    ('1990-05', date(1990, 5, 1)),
    ('May 1990', date(1990, 5, 1)),
    ('May', None),
    ('12', None),
    ('Sunday', None),
    ('May 5', None),
])
def test_normalize_partial_dates(value, expected):
    # Missing parts never come from the current date
    assert normalize_date(value) == expected


def test_partial_dates_in_records_and_display():
    assert normalize_record_dates({'birthday': '1990'}) == {'birthday': date(1990, 1, 1)}
    assert format_date('1990') == '1/1/1990'
    assert format_date('May') == 'N/A'


@pytest.mark.parametrize('value', [None, 42, 3.5, True, [], {}, object()])
def test_normalize_other_types_is_none(value):
    assert normalize_date(value) is None


def test_normalize_record_dates_only_touches_date_fields():
    record = {'emp_id': 'E1', 'birthday': '1990-05-02', 'ctc_date': 'garbage',
              'last_updated': '2024-06-01 10:00:00', 'notes': '2024-01-01'}
    normalized = normalize_record_dates(record)

    assert normalized['birthday'] == date(1990, 5, 2)
    assert normalized['ctc_date'] is None
    assert normalized['last_updated'] == '2024-06-01 10:00:00'
    assert normalized['notes'] == '2024-01-01'
    # Absent date fields are not added, and the input is untouched
    assert 'date_hired' not in normalized
    assert record['birthday'] == '1990-05-02'


def test_date_fields_exclude_last_updated():
    assert 'last_updated' not in DATE_FIELDS
    assert len(DATE_FIELDS) == 7


def test_format_date():
    assert format_date(date(2024, 3, 4)) == '3/4/2024'
    assert format_date('1990-05-02') == '5/2/1990'
    assert format_date('2024-12-31T00:00:00Z') == '12/31/2024'


@pytest.mark.parametrize('value', [None, '', 'garbage', 0, False])
def test_format_date_missing(value):
    assert format_date(value) == 'N/A'


@pytest.mark.parametrize('value', [
    '2024-03-04', '2024-12-31', '1990-05-02', '2024-11-05T23:00:00Z', date(2000, 2, 29),
])
def test_format_then_normalize_is_stable(value):
    normalized = normalize_date(value)
    assert normalize_date(format_date(normalized)) == normalized
