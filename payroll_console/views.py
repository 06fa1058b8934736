"""
Presentation helpers for the employee table and the detail dialog.

Both are plain functions over a record dict so they can be tested without
rendering a template.
"""
from payroll_console.dates import DATE_FIELDS, MISSING, format_date
from payroll_console.models import FLAG_FIELDS

# (field, header) in the order the table shows them
TABLE_COLUMNS = [
    ('emp_id', 'Emp ID'),
    ('first_name', 'First Name'),
    ('middle_name', 'Middle Name'),
    ('last_name', 'Last Name'),
    ('suffix', 'Suffix'),
    ('address', 'Address'),
    ('city', 'City'),
    ('province', 'Province'),
    ('zip', 'Zip'),
    ('location', 'Location'),
    ('department', 'Department'),
    ('project', 'Project'),
    ('team', 'Team'),
    ('position', 'Position'),
    ('employment_type', 'Employment Type'),
    ('user_profile', 'User Profile'),
    ('manager', 'Manager'),
    ('vendor', 'Vendor'),
    ('email', 'Email'),
    ('phone', 'Phone'),
    ('ctc_id', 'CTC ID'),
    ('ctc_place', 'CTC Place'),
    ('ctc_date', 'CTC Date'),
    ('ctc_amount', 'CTC Amount'),
    ('resident_cert', 'Resident Cert'),
    ('notes', 'Notes'),
    ('pay_frequency', 'Pay Frequency'),
    ('sex', 'Sex'),
    ('active', 'Active'),
    ('kasambahay', 'Kasambahay'),
    ('birthday', 'Birthday'),
    ('date_hired', 'Date Hired'),
    ('date_regularized', 'Date Regularized'),
    ('date_separated', 'Date Separated'),
    ('contract_start', 'Contract Start'),
    ('contract_end', 'Contract End'),
    ('minimum_wage_earner', 'Min Wage Earner'),
    ('monthly_rate', 'Monthly Rate'),
    ('tax_id', 'Tax ID'),
    ('sss_number', 'SSS Number'),
    ('philhealth_id', 'PhilHealth ID'),
    ('hdmf_id', 'HDMF ID'),
    ('hdmf_account', 'HDMF Account'),
    ('bank_name', 'Bank Name'),
    ('bank_account', 'Bank Account'),
    ('rate_type', 'Rate Type'),
    ('base_monthly_pay', 'Base Monthly Pay'),
    ('days_per_month', 'Days/Month'),
    ('hours_per_day', 'Hours/Day'),
    ('daily_rate', 'Daily Rate'),
    ('hourly_rate', 'Hourly Rate'),
    ('cost_of_living', 'Cost of Living'),
    ('representation_allowance', 'Rep Allowance'),
    ('housing_allowance', 'Housing Allowance'),
    ('transportation_allowance', 'Trans Allowance'),
    ('last_updated', 'Last Updated'),
]

SORTABLE_FIELDS = frozenset(field for field, _ in TABLE_COLUMNS)

# Detail dialog: (section title, [(label, field), ...])
DETAIL_SECTIONS = [
    ('Personal Information', [
        ('Employee ID', 'emp_id'),
        ('First Name', 'first_name'),
        ('Middle Name', 'middle_name'),
        ('Last Name', 'last_name'),
        ('Suffix', 'suffix'),
        ('Sex', 'sex'),
        ('Birthday', 'birthday'),
        ('Email', 'email'),
        ('Phone', 'phone'),
        ('Address', 'address'),
        ('City', 'city'),
        ('Province', 'province'),
        ('Zip', 'zip'),
    ]),
    ('Employment Details', [
        ('Location', 'location'),
        ('Department', 'department'),
        ('Project', 'project'),
        ('Team', 'team'),
        ('Position', 'position'),
        ('Employment Type', 'employment_type'),
        ('User Profile', 'user_profile'),
        ('Manager', 'manager'),
        ('Vendor', 'vendor'),
        ('Active', 'active'),
    ]),
    ('Dates', [
        ('Date Hired', 'date_hired'),
        ('Date Regularized', 'date_regularized'),
        ('Date Separated', 'date_separated'),
        ('Contract Start', 'contract_start'),
        ('Contract End', 'contract_end'),
        ('Last Updated', 'last_updated'),
    ]),
    ('Compensation', [
        ('Monthly Rate', 'monthly_rate'),
        ('Daily Rate', 'daily_rate'),
        ('Hourly Rate', 'hourly_rate'),
        ('Days/Month', 'days_per_month'),
        ('Hours/Day', 'hours_per_day'),
        ('Cost of Living', 'cost_of_living'),
        ('Rep Allowance', 'representation_allowance'),
        ('Housing Allowance', 'housing_allowance'),
        ('Trans Allowance', 'transportation_allowance'),
    ]),
    ('Government IDs & Bank Info', [
        ('Tax ID', 'tax_id'),
        ('SSS Number', 'sss_number'),
        ('PhilHealth ID', 'philhealth_id'),
        ('HDMF ID', 'hdmf_id'),
        ('HDMF Account', 'hdmf_account'),
        ('Bank Name', 'bank_name'),
        ('Bank Account', 'bank_account'),
        ('CTC ID', 'ctc_id'),
        ('CTC Place', 'ctc_place'),
        ('CTC Date', 'ctc_date'),
    ]),
]


def yes_no(value):
    return "Yes" if value else "No"


def table_cell(record, field):
    value = record.get(field)
    if field in FLAG_FIELDS:
        return yes_no(value)
    if field in DATE_FIELDS:
        return format_date(value)
    if field == 'last_updated':
        return value or MISSING
    return "" if value is None else value


def table_row(record):
    return [table_cell(record, field) for field, _ in TABLE_COLUMNS]


def detail_value(record, field):
    value = record.get(field)
    if field in FLAG_FIELDS:
        return yes_no(value)
    if field in DATE_FIELDS:
        return format_date(value)
    return value or MISSING


def detail_sections(record):
    """Sections of the read-only detail dialog with display-ready values."""
    return [
        (title, [(label, detail_value(record, field)) for label, field in fields])
        for title, fields in DETAIL_SECTIONS
    ]


def detail_title(record):
    if not record:
        return "Employee Details - "
    first_name = record.get('first_name') or ''
    last_name = record.get('last_name') or ''
    return f"Employee Details - {first_name} {last_name}"
