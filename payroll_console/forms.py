"""
The add/edit employee dialog: field layout, prefill values and parsing of
the posted form into a record.
"""
from datetime import date

from pydantic import ValidationError

from payroll_console.dates import DATE_FIELDS, normalize_date
from payroll_console.filters import stringify_value
from payroll_console.models import AMOUNT_FIELDS, FLAG_FIELDS, READ_ONLY_FIELDS, EmployeeRecord

TEXT = 'text'
DATE = 'date'
NUMBER = 'number'
FLAG = 'flag'
LONG_TEXT = 'long_text'

# (section title, [(field, label), ...])
FORM_SECTIONS = [
    ('Personal Information', [
        ('emp_id', 'Employee ID'),
        ('first_name', 'First Name'),
        ('middle_name', 'Middle Name'),
        ('last_name', 'Last Name'),
        ('suffix', 'Suffix'),
        ('sex', 'Sex'),
        ('birthday', 'Birthday'),
        ('email', 'Email'),
        ('phone', 'Phone'),
        ('address', 'Address'),
        ('city', 'City'),
        ('province', 'Province'),
        ('zip', 'Zip'),
    ]),
    ('Employment Details', [
        ('location', 'Location'),
        ('department', 'Department'),
        ('project', 'Project'),
        ('team', 'Team'),
        ('position', 'Position'),
        ('employment_type', 'Employment Type'),
        ('user_profile', 'User Profile'),
        ('manager', 'Manager'),
        ('vendor', 'Vendor'),
        ('pay_frequency', 'Pay Frequency'),
        ('active', 'Active'),
        ('kasambahay', 'Kasambahay'),
        ('minimum_wage_earner', 'Minimum Wage Earner'),
    ]),
    ('Dates', [
        ('date_hired', 'Date Hired'),
        ('date_regularized', 'Date Regularized'),
        ('date_separated', 'Date Separated'),
        ('contract_start', 'Contract Start'),
        ('contract_end', 'Contract End'),
    ]),
    ('Compensation', [
        ('rate_type', 'Rate Type'),
        ('base_monthly_pay', 'Base Monthly Pay'),
        ('monthly_rate', 'Monthly Rate'),
        ('daily_rate', 'Daily Rate'),
        ('hourly_rate', 'Hourly Rate'),
        ('days_per_month', 'Days/Month'),
        ('hours_per_day', 'Hours/Day'),
        ('cost_of_living', 'Cost of Living'),
        ('representation_allowance', 'Representation Allowance'),
        ('housing_allowance', 'Housing Allowance'),
        ('transportation_allowance', 'Transportation Allowance'),
    ]),
    ('Government IDs & Bank Info', [
        ('tax_id', 'Tax ID'),
        ('sss_number', 'SSS Number'),
        ('philhealth_id', 'PhilHealth ID'),
        ('hdmf_id', 'HDMF ID'),
        ('hdmf_account', 'HDMF Account'),
        ('resident_cert', 'Resident Cert'),
        ('ctc_id', 'CTC ID'),
        ('ctc_place', 'CTC Place'),
        ('ctc_date', 'CTC Date'),
        ('ctc_amount', 'CTC Amount'),
        ('bank_name', 'Bank Name'),
        ('bank_account', 'Bank Account'),
    ]),
    ('Notes', [
        ('notes', 'Notes'),
    ]),
]

FORM_FIELDS = tuple(field for _, fields in FORM_SECTIONS for field, _ in fields)


def field_kind(field):
    if field in DATE_FIELDS:
        return DATE
    if field in AMOUNT_FIELDS:
        return NUMBER
    if field in FLAG_FIELDS:
        return FLAG
    if field == 'notes':
        return LONG_TEXT
    return TEXT


def form_values(record):
    """Input values for the dialog. Flags stay booleans, everything else is text."""
    record = record or {}
    values = {}
    for field in FORM_FIELDS:
        value = record.get(field)
        if field in FLAG_FIELDS:
            values[field] = bool(value)
        elif value is None:
            values[field] = ''
        elif isinstance(value, date):
            values[field] = value.isoformat()
        elif isinstance(value, str):
            values[field] = value
        else:
            values[field] = stringify_value(value)
    return values


def parse_employee_form(form):
    """
    Reads the posted dialog into a record dict.

    Returns (record, errors). On success errors is empty and the record
    carries typed values (dates, floats, booleans, None for blanks). On
    failure the record is the posted text so the dialog can show it again,
    and errors maps field names to messages.
    """
    posted = {}
    for field in FORM_FIELDS:
        if field in FLAG_FIELDS:
            posted[field] = field in form
        else:
            posted[field] = form.get(field, '').strip() or None

    # The record model maps unreadable dates to None; the dialog reports them
    errors = {field: 'Not a valid date' for field in DATE_FIELDS
              if posted.get(field) and normalize_date(posted[field]) is None}
    try:
        record = EmployeeRecord.model_validate(posted)
    except ValidationError as e:
        for error in e.errors():
            errors.setdefault(str(error['loc'][0]), error['msg'])
    if errors:
        return posted, errors
    return record.model_dump(exclude=set(READ_ONLY_FIELDS)), {}
