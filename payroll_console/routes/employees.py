from flask import Response, abort, current_app, redirect, render_template, request, url_for

from payroll_console.console import (
    change_log, confirm_message, page_count, record_key, visible_rows
)
from payroll_console.export import CSV_MIMETYPE
from payroll_console.forms import FORM_SECTIONS, field_kind, form_values, parse_employee_form
from payroll_console.routes import employees_bp as bp
from payroll_console.views import (
    SORTABLE_FIELDS, TABLE_COLUMNS, detail_sections, detail_title, table_row
)


def get_console():
    return current_app.extensions['employee_console']


def render_console(template, posted=None, errors=None):
    console = get_console()
    state = console.state

    form = None
    if state.form_visible:
        form = posted if posted is not None else form_values(state.form_record)

    page_records = visible_rows(state)
    return render_template(
        template,
        state=state,
        columns=TABLE_COLUMNS,
        rows=[(record, table_row(record)) for record in page_records],
        page_ids={record_key(record) for record in page_records},
        page_count=page_count(state),
        rows_per_page_options=current_app.config['ROWS_PER_PAGE_OPTIONS'],
        change_log=change_log(state),
        confirm_message=confirm_message(state),
        detail=detail_sections(state.viewed) if state.viewed else None,
        detail_title=detail_title(state.viewed),
        form=form,
        form_sections=FORM_SECTIONS,
        form_errors=errors or {},
        field_kind=field_kind,
        notifications=console.drain_notifications(),
    )


def respond(posted=None, errors=None):
    if request.headers.get('HX-Request'):
        return render_console('partials/console.html', posted, errors)
    if posted is not None:
        # Full page keeps the user's input when there is no HTMX to swap into
        return render_console('index.html', posted, errors)
    return redirect(url_for('index'))


def index():
    get_console().refresh()
    return render_console('index.html')


@bp.route('/refresh', methods=['POST'])
def refresh_employees():
    get_console().refresh()
    return respond()


@bp.route('/search', methods=['POST'])
def search_employees():
    get_console().search(request.form.get('q', ''))
    return respond()


@bp.route('/select', methods=['POST'])
def select_employees():
    get_console().select(request.form.getlist('selected'))
    return respond()


@bp.route('/sort/<field>', methods=['POST'])
def sort_employees(field):
    if field not in SORTABLE_FIELDS:
        abort(404)
    get_console().sort(field)
    return respond()


@bp.route('/page', methods=['POST'])
def page_employees():
    page = request.form.get('page', default=0, type=int)
    rows = request.form.get('rows', type=int)
    if rows not in current_app.config['ROWS_PER_PAGE_OPTIONS']:
        rows = None
    get_console().paginate(page, rows)
    return respond()


@bp.route('/add', methods=['POST'])
def add_employee():
    get_console().add()
    return respond()


@bp.route('/edit', methods=['POST'])
def edit_employee():
    get_console().edit()
    return respond()


@bp.route('/view', methods=['POST'])
def view_employee():
    get_console().view()
    return respond()


@bp.route('/save', methods=['POST'])
def save_employee():
    record, errors = parse_employee_form(request.form)
    if errors:
        return respond(form_values(record), errors)
    if get_console().save(record):
        return respond()
    return respond(form_values(record))


@bp.route('/form/close', methods=['POST'])
def close_employee_form():
    get_console().close_form()
    return respond()


@bp.route('/details/close', methods=['POST'])
def close_employee_details():
    get_console().close_detail()
    return respond()


@bp.route('/delete', methods=['POST'])
def delete_employees():
    get_console().delete()
    return respond()


@bp.route('/delete/confirm', methods=['POST'])
def confirm_delete_employees():
    get_console().confirm_delete()
    return respond()


@bp.route('/delete/cancel', methods=['POST'])
def cancel_delete_employees():
    get_console().cancel_delete()
    return respond()


@bp.route('/download')
def download_employees():
    filename = current_app.config['CSV_FILENAME']
    return Response(
        get_console().download(),
        mimetype=CSV_MIMETYPE,
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )
