# payroll_console/routes/__init__.py
from flask import Blueprint

# Create blueprints
employees_bp = Blueprint('employees', __name__, url_prefix='/employees')

# Import views after blueprints are created
from . import employees
from .employees import index
