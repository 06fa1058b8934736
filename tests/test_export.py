from payroll_console.export import records_to_csv


def test_one_line_per_record_without_header():
    records = [{'emp_id': 'E1', 'first_name': 'A'}, {'emp_id': 'E2', 'first_name': 'B'}]
    assert records_to_csv(records) == 'E1,A\nE2,B'


def test_values_follow_record_key_order():
    records = [{'first_name': 'A', 'emp_id': 'E1'}]
    assert records_to_csv(records) == 'A,E1'


def test_value_rendering():
    records = [{'emp_id': 'E1', 'middle_name': None, 'active': True, 'monthly_rate': 25000.0}]
    assert records_to_csv(records) == 'E1,,true,25000'


def test_embedded_commas_are_not_escaped():
    records = [{'emp_id': 'E1', 'address': '12 Rizal St, Makati'}]
    assert records_to_csv(records) == 'E1,12 Rizal St, Makati'


def test_empty_set():
    assert records_to_csv([]) == ''
