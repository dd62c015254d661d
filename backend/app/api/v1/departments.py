from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, status
from fastapi.responses import Response

from app.db import SessionDep
from app.schemas import (
    DepartmentAssignmentRequest,
    DepartmentAssignmentResponse,
    DepartmentCreate,
    DepartmentNode,
    DepartmentRead,
    DepartmentUpdate,
    EmployeeRead,
)
from app.services.department_assignment import assign_employees, unassign_employee
from app.services.department_tree import build_department_tree
from app.services.departments import (
    count_members,
    create_department as create_department_record,
    delete_department as delete_department_record,
    get_department as get_department_record,
    list_departments_with_member_counts,
    update_department as update_department_record,
)

router = APIRouter()


def _read(department, member_count: int = 0) -> DepartmentRead:
    base = DepartmentRead.model_validate(department)
    return base.model_copy(update={"member_count": member_count})


@router.get(
    "/",
    response_model=List[DepartmentRead],
    summary="List departments",
)
def list_departments(session: SessionDep) -> List[DepartmentRead]:
    """Flat department list ordered by name, with direct member counts."""
    return [
        _read(department, member_count)
        for department, member_count in list_departments_with_member_counts(session)
    ]


@router.get(
    "/tree",
    response_model=List[DepartmentNode],
    summary="Department hierarchy",
)
def read_department_tree(session: SessionDep) -> List[DepartmentNode]:
    return build_department_tree(session)


@router.post(
    "/",
    response_model=DepartmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create department",
)
def create_department(payload: DepartmentCreate, session: SessionDep) -> DepartmentRead:
    department = create_department_record(
        session,
        name=payload.name,
        description=payload.description,
        parent_id=payload.parent_id,
        head_id=payload.head_id,
    )
    return _read(department)


@router.get(
    "/{department_id}",
    response_model=DepartmentRead,
    summary="Get department by id",
)
def get_department(department_id: UUID, session: SessionDep) -> DepartmentRead:
    department = get_department_record(session, department_id)
    return _read(department, count_members(session, department.id))


@router.put(
    "/{department_id}",
    response_model=DepartmentRead,
    summary="Update department",
)
def update_department(
    department_id: UUID,
    payload: DepartmentUpdate,
    session: SessionDep,
) -> DepartmentRead:
    """Update a department. Supports partial updates."""
    department = update_department_record(
        session, department_id, payload.model_dump(exclude_unset=True)
    )
    return _read(department, count_members(session, department.id))


@router.delete(
    "/{department_id}",
    summary="Delete department",
)
def delete_department(department_id: UUID, session: SessionDep) -> Response:
    """Delete an empty department. Children and members must be moved first."""
    delete_department_record(session, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{department_id}/employees",
    response_model=DepartmentAssignmentResponse,
    summary="Assign employees to department",
)
def assign_department_employees(
    department_id: UUID,
    payload: DepartmentAssignmentRequest,
    session: SessionDep,
) -> DepartmentAssignmentResponse:
    department, employees = assign_employees(session, department_id, payload.employee_ids)
    return DepartmentAssignmentResponse(
        department=_read(department, count_members(session, department.id)),
        employees=[EmployeeRead.model_validate(employee) for employee in employees],
    )


@router.delete(
    "/{department_id}/employees/{employee_id}",
    response_model=EmployeeRead,
    summary="Remove employee from department",
)
def remove_department_employee(
    department_id: UUID,
    employee_id: UUID,
    session: SessionDep,
) -> EmployeeRead:
    """Move the employee back to the default department."""
    employee = unassign_employee(session, department_id, employee_id)
    return EmployeeRead.model_validate(employee)
