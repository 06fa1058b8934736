from flask import Flask

from payroll_console.config import Config
from payroll_console.logging_config import setup_logging


def create_app(config_class=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app.config['LOG_LEVEL'])

    from payroll_console.console import EmployeeConsole
    from payroll_console.store import RecordStoreClient

    if store is None:
        store = RecordStoreClient(app.config['EMPLOYEE_API_URL'],
                                  timeout=app.config['EMPLOYEE_API_TIMEOUT'])

    # One console per process: all UI state lives here
    app.extensions['employee_console'] = EmployeeConsole(
        store,
        rows=app.config['ROWS_PER_PAGE'],
        notification_life=app.config['NOTIFICATION_LIFE'],
    )

    from payroll_console.routes import employees_bp, index

    app.register_blueprint(employees_bp)
    app.add_url_rule('/', 'index', index)

    return app
