"""
Employee console state and the actions that change it.

ConsoleState is an immutable snapshot of everything the single-page table
shows. The module-level functions are pure transitions from one snapshot
to the next; EmployeeConsole owns the current snapshot, talks to the record
store and applies the transitions.
"""
import logging
import math
import threading
from dataclasses import dataclass, replace
from typing import Optional

from payroll_console.dates import MISSING, normalize_record_dates
from payroll_console.exceptions import NetworkError
from payroll_console.export import records_to_csv
from payroll_console.filters import filter_records, stringify_value

logger = logging.getLogger(__name__)

SUCCESS = 'success'
INFO = 'info'
# Validation warnings: a precondition on the selection failed. They are
# notifications only and are never raised.
WARNING = 'warning'
ERROR = 'error'

SUMMARIES = {
    SUCCESS: 'Success',
    INFO: 'Info',
    WARNING: 'Warning',
    ERROR: 'Error',
}

ASCENDING = 1
DESCENDING = -1
UNSORTED = 0


@dataclass(frozen=True)
class Notification:
    severity: str
    summary: str
    detail: str
    life: int = 3000


@dataclass(frozen=True)
class ConsoleState:
    employees: tuple = ()
    filtered: tuple = ()
    selected_ids: tuple = ()
    search_term: str = ""
    form_visible: bool = False
    edit_mode: bool = False
    form_record: Optional[dict] = None
    detail_visible: bool = False
    viewed: Optional[dict] = None
    confirm_visible: bool = False
    sort_field: Optional[str] = None
    sort_order: int = UNSORTED
    page: int = 0
    rows: int = 10
    notifications: tuple = ()
    notification_life: int = 3000


def record_key(record):
    return str(record.get('emp_id'))


def notify(state, severity, detail):
    note = Notification(severity, SUMMARIES[severity], detail, state.notification_life)
    return replace(state, notifications=state.notifications + (note,))


def selected_records(state):
    by_id = {record_key(record): record for record in state.employees}
    return [by_id[emp_id] for emp_id in state.selected_ids if emp_id in by_id]


def page_count(state):
    return max(1, math.ceil(len(state.filtered) / state.rows))


def _clamp_page(state):
    return replace(state, page=min(max(state.page, 0), page_count(state) - 1))


def with_records(state, records):
    """New authoritative record set from the backend."""
    employees = tuple(records)
    known = {record_key(record) for record in employees}
    state = replace(
        state,
        employees=employees,
        filtered=tuple(filter_records(employees, state.search_term)),
        selected_ids=tuple(emp_id for emp_id in state.selected_ids if emp_id in known),
    )
    return _clamp_page(state)


def with_search_term(state, term):
    term = term or ""
    return replace(
        state,
        search_term=term,
        filtered=tuple(filter_records(state.employees, term)),
        page=0,
    )


def with_selection(state, emp_ids):
    known = {record_key(record) for record in state.employees}
    selected = []
    for emp_id in emp_ids:
        emp_id = str(emp_id)
        if emp_id in known and emp_id not in selected:
            selected.append(emp_id)
    return replace(state, selected_ids=tuple(selected))


def clear_selection(state):
    return replace(state, selected_ids=())


def with_sort(state, field):
    """Clicking a column cycles ascending, descending, unsorted."""
    if field != state.sort_field or state.sort_order == UNSORTED:
        return replace(state, sort_field=field, sort_order=ASCENDING)
    if state.sort_order == ASCENDING:
        return replace(state, sort_order=DESCENDING)
    return replace(state, sort_field=None, sort_order=UNSORTED)


def with_page(state, page, rows=None):
    state = replace(state, page=page, rows=rows or state.rows)
    return _clamp_page(state)


def open_add(state):
    return replace(state, form_visible=True, edit_mode=False, form_record=None)


def open_edit(state):
    selected = selected_records(state)
    if len(selected) != 1:
        return notify(state, WARNING, "Please select exactly one employee to edit")
    return replace(
        state,
        form_visible=True,
        edit_mode=True,
        form_record=normalize_record_dates(selected[0]),
    )


def open_view(state):
    selected = selected_records(state)
    if len(selected) != 1:
        return notify(state, WARNING, "Please select exactly one employee to view")
    return replace(state, detail_visible=True, viewed=selected[0])


def close_form(state):
    return replace(state, form_visible=False, edit_mode=False, form_record=None)


def close_detail(state):
    return replace(state, detail_visible=False, viewed=None)


def request_delete(state):
    if not state.selected_ids:
        return notify(state, WARNING, "Please select at least one employee to delete")
    return replace(state, confirm_visible=True)


def cancel_delete(state):
    return replace(state, confirm_visible=False)


def confirm_message(state):
    return f"Are you sure you want to delete {len(state.selected_ids)} employee(s)?"


def change_log(state):
    """last_updated of the most recently selected record, None without a selection."""
    selected = selected_records(state)
    if not selected:
        return None
    return selected[-1].get('last_updated') or MISSING


def _sort_key(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    return (1, 0, stringify_value(value).lower())


def visible_rows(state):
    """The current page of the filtered set, in display order."""
    rows = list(state.filtered)
    if state.sort_field and state.sort_order != UNSORTED:
        present = [r for r in rows if r.get(state.sort_field) is not None]
        missing = [r for r in rows if r.get(state.sort_field) is None]
        present.sort(
            key=lambda r: _sort_key(r.get(state.sort_field)),
            reverse=state.sort_order == DESCENDING,
        )
        rows = present + missing
    start = state.page * state.rows
    return rows[start:start + state.rows]


class EmployeeConsole:
    """
    Owner of the console state.

    Store calls run outside the lock, so a slow backend never blocks other
    requests; whichever response is applied last wins.
    """

    def __init__(self, store, rows=10, notification_life=3000):
        self.store = store
        self.state = ConsoleState(rows=rows, notification_life=notification_life)
        self._lock = threading.Lock()

    def _apply(self, transition, *args):
        with self._lock:
            self.state = transition(self.state, *args)
            return self.state

    def refresh(self):
        try:
            records = self.store.list()
        except NetworkError as e:
            logger.warning("Could not fetch employees: %s", e)
            return self._apply(notify, ERROR, "Failed to fetch employees")
        logger.info("Fetched %d employees", len(records))
        return self._apply(with_records, records)

    def search(self, term):
        return self._apply(with_search_term, term)

    def select(self, emp_ids):
        return self._apply(with_selection, emp_ids)

    def sort(self, field):
        return self._apply(with_sort, field)

    def paginate(self, page, rows=None):
        return self._apply(with_page, page, rows)

    def add(self):
        return self._apply(open_add)

    def edit(self):
        return self._apply(open_edit)

    def view(self):
        return self._apply(open_view)

    def close_form(self):
        return self._apply(close_form)

    def close_detail(self):
        return self._apply(close_detail)

    def delete(self):
        return self._apply(request_delete)

    def cancel_delete(self):
        return self._apply(cancel_delete)

    def confirm_delete(self):
        """
        Deletes the selected records one at a time. The first failure stops
        the batch; records deleted before it stay deleted.
        """
        with self._lock:
            targets = selected_records(self.state)
            self.state = cancel_delete(self.state)
        if not targets:
            return self._apply(request_delete)

        for record in targets:
            try:
                self.store.delete(record['emp_id'])
            except NetworkError as e:
                logger.warning("Delete of %s failed: %s", record.get('emp_id'), e)
                return self._apply(notify, ERROR, "Failed to delete employee(s)")
            logger.info("Deleted employee %s", record.get('emp_id'))

        self._apply(clear_selection)
        self.refresh()
        return self._apply(notify, SUCCESS, f"{len(targets)} employee(s) deleted")

    def save(self, record):
        """
        Creates or updates from the record form. Returns True when the form
        was saved and closed, False when it must stay open.
        """
        with self._lock:
            original = self.state.form_record
            editing = self.state.edit_mode and original is not None

        try:
            if editing:
                # PUT replaces the record: keys the form does not show are sent back unchanged
                self.store.update(original['emp_id'], {**original, **record})
            else:
                self.store.create(record)
        except NetworkError as e:
            logger.warning("Could not save employee: %s", e)
            self._apply(notify, ERROR, "Failed to save employee")
            return False

        logger.info("Saved employee %s", original['emp_id'] if editing else record.get('emp_id'))
        self._apply(close_form)
        self.refresh()
        self._apply(notify, SUCCESS, "Employee updated" if editing else "Employee added")
        return True

    def download(self):
        with self._lock:
            records = self.state.employees
        return records_to_csv(records)

    def drain_notifications(self):
        with self._lock:
            notifications = self.state.notifications
            self.state = replace(self.state, notifications=())
        return notifications
