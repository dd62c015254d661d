from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, status
from fastapi.responses import Response

from app.db import SessionDep
from app.schemas import (
    EducationRead,
    EmployeeCreate,
    EmployeeDetail,
    EmployeeRead,
    EmployeeUpdate,
    ExperienceRead,
)
from app.services.employee_history import list_education, list_experiences
from app.services.employees import (
    create_employee as create_employee_record,
    delete_employee as delete_employee_record,
    get_employee as get_employee_record,
    list_employees as list_employee_records,
    update_employee as update_employee_record,
)

router = APIRouter()


@router.get("/", response_model=List[EmployeeRead], summary="List employees")
def list_employees(
    session: SessionDep,
    query: Optional[str] = None,
    department: Optional[str] = None,
    position: Optional[str] = None,
    employment_status: Optional[str] = None,
) -> List[EmployeeRead]:
    """Newest first; pass `all` to disable a filter."""
    employees = list_employee_records(
        session,
        query=query,
        department=department,
        position=position,
        employment_status=employment_status,
    )
    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.get("/{employee_id}", response_model=EmployeeDetail, summary="Get employee by id")
def get_employee(employee_id: UUID, session: SessionDep) -> EmployeeDetail:
    """Employee with experiences and education embedded."""
    employee = get_employee_record(session, employee_id)
    detail = EmployeeDetail.model_validate(employee)
    detail.experiences = [
        ExperienceRead.model_validate(entry) for entry in list_experiences(session, employee_id)
    ]
    detail.education = [
        EducationRead.model_validate(entry) for entry in list_education(session, employee_id)
    ]
    return detail


@router.post(
    "/",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
)
def create_employee(payload: EmployeeCreate, session: SessionDep) -> EmployeeRead:
    """Create an employee; without a department it lands in "Unassigned"."""
    return EmployeeRead.model_validate(create_employee_record(session, payload))


@router.put("/{employee_id}", response_model=EmployeeRead, summary="Update employee")
def update_employee(
    employee_id: UUID,
    payload: EmployeeUpdate,
    session: SessionDep,
) -> EmployeeRead:
    """Update an employee. Supports partial updates."""
    employee = update_employee_record(session, employee_id, payload)
    return EmployeeRead.model_validate(employee)


@router.delete("/{employee_id}", summary="Delete employee")
def delete_employee(employee_id: UUID, session: SessionDep) -> Response:
    delete_employee_record(session, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
