import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-this'
    EMPLOYEE_API_URL = os.environ.get('EMPLOYEE_API_URL') or \
        'http://localhost:5000/api/employees'
    EMPLOYEE_API_TIMEOUT = float(os.environ.get('EMPLOYEE_API_TIMEOUT') or 10)
    NOTIFICATION_LIFE = int(os.environ.get('NOTIFICATION_LIFE') or 3000)
    ROWS_PER_PAGE = int(os.environ.get('ROWS_PER_PAGE') or 10)
    ROWS_PER_PAGE_OPTIONS = (5, 10, 25)
    CSV_FILENAME = 'employees.csv'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    TESTING = True
    EMPLOYEE_API_URL = 'http://backend.test/api/employees'
    LOG_LEVEL = 'DEBUG'
