# payroll_console/models/employee.py
from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from payroll_console.dates import normalize_date


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


Text = Optional[str]
Amount = Annotated[Optional[float], BeforeValidator(_blank_to_none)]
Flag = Annotated[Optional[bool], BeforeValidator(_blank_to_none)]
CalendarDate = Annotated[Optional[date], BeforeValidator(normalize_date)]


class EmployeeRecord(BaseModel):
    """One row of the payroll master file, as exchanged with /api/employees."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    # Identity
    emp_id: Text = None
    first_name: Text = None
    middle_name: Text = None
    last_name: Text = None
    suffix: Text = None
    sex: Text = None

    # Contact / location
    email: Text = None
    phone: Text = None
    address: Text = None
    city: Text = None
    province: Text = None
    zip: Text = None
    location: Text = None

    # Organization
    department: Text = None
    project: Text = None
    team: Text = None
    position: Text = None
    employment_type: Text = None
    user_profile: Text = None
    manager: Text = None
    vendor: Text = None

    # Government / legal
    tax_id: Text = None
    sss_number: Text = None
    philhealth_id: Text = None
    hdmf_id: Text = None
    hdmf_account: Text = None
    resident_cert: Text = None
    ctc_id: Text = None
    ctc_place: Text = None
    ctc_date: CalendarDate = None
    ctc_amount: Amount = None

    # Banking
    bank_name: Text = None
    bank_account: Text = None

    # Compensation
    rate_type: Text = None
    base_monthly_pay: Amount = None
    monthly_rate: Amount = None
    daily_rate: Amount = None
    hourly_rate: Amount = None
    days_per_month: Amount = None
    hours_per_day: Amount = None
    cost_of_living: Amount = None
    representation_allowance: Amount = None
    housing_allowance: Amount = None
    transportation_allowance: Amount = None

    # Flags
    active: Flag = None
    kasambahay: Flag = None
    minimum_wage_earner: Flag = None

    # Dates
    birthday: CalendarDate = None
    date_hired: CalendarDate = None
    date_regularized: CalendarDate = None
    date_separated: CalendarDate = None
    contract_start: CalendarDate = None
    contract_end: CalendarDate = None
    last_updated: Text = None  # server-set

    # Free text
    notes: Text = None
    pay_frequency: Text = None

    def to_payload(self, include_id=True):
        """JSON-ready body for POST/PUT; drops server-set fields."""
        payload = self.model_dump(mode="json", exclude=set(READ_ONLY_FIELDS))
        if not include_id or not payload.get("emp_id"):
            payload.pop("emp_id", None)
        return payload


class StoredEmployeeRecord(BaseModel):
    """
    A record as listed by the backend. Only the id is checked; every other
    field is shown as delivered, odd values included.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    emp_id: str = Field(min_length=1)


FLAG_FIELDS = ("active", "kasambahay", "minimum_wage_earner")

AMOUNT_FIELDS = (
    "ctc_amount", "base_monthly_pay", "monthly_rate", "daily_rate",
    "hourly_rate", "days_per_month", "hours_per_day", "cost_of_living",
    "representation_allowance", "housing_allowance",
    "transportation_allowance",
)

READ_ONLY_FIELDS = ("last_updated",)

EMPLOYEE_FIELDS = tuple(EmployeeRecord.model_fields)
