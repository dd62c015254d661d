from .department import (
    DepartmentAssignmentRequest,
    DepartmentAssignmentResponse,
    DepartmentCreate,
    DepartmentMember,
    DepartmentNode,
    DepartmentRead,
    DepartmentUpdate,
)
from .employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from .employee_history import (
    EducationCreate,
    EducationRead,
    EducationUpdate,
    EmployeeDetail,
    ExperienceCreate,
    ExperienceRead,
    ExperienceUpdate,
)

__all__ = [
    "DepartmentAssignmentRequest",
    "DepartmentAssignmentResponse",
    "DepartmentCreate",
    "DepartmentMember",
    "DepartmentNode",
    "DepartmentRead",
    "DepartmentUpdate",
    "EducationCreate",
    "EducationRead",
    "EducationUpdate",
    "EmployeeCreate",
    "EmployeeDetail",
    "EmployeeRead",
    "EmployeeUpdate",
    "ExperienceCreate",
    "ExperienceRead",
    "ExperienceUpdate",
]
