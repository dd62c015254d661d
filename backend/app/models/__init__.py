from .department import Department
from .employee import Employee
from .employee_history import EmployeeEducation, EmployeeExperience
from .timestamps import utc_now

__all__ = [
    "Department",
    "Employee",
    "EmployeeEducation",
    "EmployeeExperience",
    "utc_now",
]
