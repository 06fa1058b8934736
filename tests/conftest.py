import pytest

from payroll_console import create_app
from payroll_console.config import TestConfig
from payroll_console.console import EmployeeConsole
from payroll_console.exceptions import NetworkError

ANA = {'emp_id': 'E1', 'first_name': 'Ana', 'last_name': 'Cruz', 'active': True,
       'birthday': '1990-05-02'}
BEN = {'emp_id': 'E2', 'first_name': 'Ben', 'last_name': 'Reyes', 'active': False,
       'department': 'Finance', 'monthly_rate': 25000, 'last_updated': '2024-06-01 10:00:00'}
CARLA = {'emp_id': 'E3', 'first_name': 'Carla', 'last_name': 'Santos', 'active': True,
         'department': 'Engineering', 'date_hired': '2021-01-15'}


class FakeRecordStore:
    """In-memory stand-in for the employee API with switchable failures."""

    def __init__(self, records=None):
        self.records = [dict(r) for r in (records or [])]
        self.calls = []
        self.fail_list = False
        self.fail_save = False
        self.fail_delete_ids = set()

    def list(self):
        self.calls.append(('list',))
        if self.fail_list:
            raise NetworkError("GET failed", status_code=500)
        return [dict(r) for r in self.records]

    def create(self, record):
        self.calls.append(('create', record))
        if self.fail_save:
            raise NetworkError("POST failed", status_code=500)
        emp_id = record.get('emp_id') or f"E{len(self.records) + 1}"
        self.records.append(dict(record, emp_id=emp_id))

    def update(self, emp_id, record):
        self.calls.append(('update', emp_id, record))
        if self.fail_save:
            raise NetworkError("PUT failed", status_code=404)
        self.records = [dict(record, emp_id=emp_id) if r['emp_id'] == emp_id else r
                        for r in self.records]

    def delete(self, emp_id):
        self.calls.append(('delete', emp_id))
        if emp_id in self.fail_delete_ids:
            raise NetworkError("DELETE failed", status_code=500)
        self.records = [r for r in self.records if r['emp_id'] != emp_id]


@pytest.fixture
def store():
    return FakeRecordStore([ANA, BEN, CARLA])


@pytest.fixture
def console(store):
    return EmployeeConsole(store)


@pytest.fixture
def app(store):
    return create_app(TestConfig, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def htmx():
    return {'HX-Request': 'true'}
