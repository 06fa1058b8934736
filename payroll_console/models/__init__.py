# payroll_console/models/__init__.py
from .employee import (
    EmployeeRecord, StoredEmployeeRecord, EMPLOYEE_FIELDS, FLAG_FIELDS,
    AMOUNT_FIELDS, READ_ONLY_FIELDS
)

__all__ = ['EmployeeRecord', 'StoredEmployeeRecord', 'EMPLOYEE_FIELDS', 'FLAG_FIELDS',
    'AMOUNT_FIELDS', 'READ_ONLY_FIELDS']
