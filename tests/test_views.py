from payroll_console.views import (
    DETAIL_SECTIONS, TABLE_COLUMNS, detail_sections, detail_title, table_cell, table_row
)


def test_table_row_scenario():
    record = {'emp_id': 'E1', 'first_name': 'Ana', 'last_name': 'Cruz', 'active': True,
              'birthday': '1990-05-02'}
    row = dict(zip([field for field, _ in TABLE_COLUMNS], table_row(record)))

    assert row['emp_id'] == 'E1'
    assert row['active'] == 'Yes'
    assert row['kasambahay'] == 'No'
    assert row['birthday'] == '5/2/1990'
    assert row['date_hired'] == 'N/A'
    assert row['last_updated'] == 'N/A'
    assert row['middle_name'] == ''


def test_table_cell_keeps_zero():
    assert table_cell({'monthly_rate': 0}, 'monthly_rate') == 0


def test_detail_sections_titles():
    titles = [title for title, _ in detail_sections({})]
    assert titles == ['Personal Information', 'Employment Details', 'Dates', 'Compensation',
                      'Government IDs & Bank Info']


def test_detail_values():
    record = {'emp_id': 'E2', 'first_name': 'Ben', 'active': False, 'monthly_rate': 25000,
              'daily_rate': 0, 'date_hired': '2021-01-15', 'ctc_date': 'garbage',
              'last_updated': '2024-06-01 10:00:00'}
    values = {label: value for _, items in detail_sections(record) for label, value in items}

    assert values['Employee ID'] == 'E2'
    assert values['Middle Name'] == 'N/A'
    assert values['Active'] == 'No'
    assert values['Monthly Rate'] == 25000
    # Zero reads as missing in the detail dialog
    assert values['Daily Rate'] == 'N/A'
    assert values['Date Hired'] == '1/15/2021'
    assert values['CTC Date'] == 'N/A'
    assert values['Last Updated'] == '2024-06-01 10:00:00'


def test_every_detail_field_is_a_table_column():
    columns = {field for field, _ in TABLE_COLUMNS}
    for _, fields in DETAIL_SECTIONS:
        for _, field in fields:
            assert field in columns


def test_detail_title():
    assert detail_title({'first_name': 'Ana', 'last_name': 'Cruz'}) == 'Employee Details - Ana Cruz'
    assert detail_title(None) == 'Employee Details - '
