# hrms/repositories/__init__.py
from .employee import EmployeeRepository, get_employee_repository
