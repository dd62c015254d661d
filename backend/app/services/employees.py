from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import Session, delete, select

from app.core.errors import NotFoundError, ValidationError
from app.models import Employee, EmployeeEducation, EmployeeExperience
from app.schemas import EmployeeCreate, EmployeeUpdate
from app.services.department_assignment import (
    ensure_department_assignment,
    sync_department_association,
    touches_department,
)

logger = logging.getLogger(__name__)

# Columns that may not be cleared through a partial update
REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "hire_date",
    "position",
    "employment_status",
)


def get_employee(session: Session, employee_id: UUID) -> Employee:
    employee = session.get(Employee, employee_id)
    if not employee:
        raise NotFoundError("Employee not found")
    return employee


def next_employee_number(session: Session) -> str:
    """Next sequential employee number, ignoring non-numeric ones."""
    numbers = [
        int(value)
        for value in session.exec(select(Employee.employee_id)).all()
        if value and value.isdigit()
    ]
    return str(max(numbers) + 1) if numbers else "1"


def list_employees(
    session: Session,
    query: Optional[str] = None,
    department: Optional[str] = None,
    position: Optional[str] = None,
    employment_status: Optional[str] = None,
) -> List[Employee]:
    statement = select(Employee)
    search = (query or "").strip()
    if search:
        pattern = f"%{search}%"
        statement = statement.where(
            or_(
                Employee.first_name.ilike(pattern),
                Employee.last_name.ilike(pattern),
                Employee.email.ilike(pattern),
                Employee.employee_id.ilike(pattern),
            )
        )
    if department and department != "all":
        statement = statement.where(Employee.department == department)
    if position and position != "all":
        statement = statement.where(Employee.position == position)
    if employment_status and employment_status != "all":
        statement = statement.where(Employee.employment_status == employment_status)
    return list(session.exec(statement.order_by(Employee.created_at.desc())).all())


def create_employee(session: Session, payload: EmployeeCreate) -> Employee:
    data = payload.model_dump()
    data["email"] = str(data["email"]).lower()
    sync_department_association(session, data)
    ensure_department_assignment(session, data)

    employee = Employee(**data, employee_id=next_employee_number(session))
    session.add(employee)
    session.commit()
    session.refresh(employee)
    logger.info(
        "Created employee %s (%s) in department %s",
        employee.employee_id,
        employee.id,
        employee.department,
    )
    return employee


def update_employee(
    session: Session, employee_id: UUID, payload: EmployeeUpdate
) -> Employee:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("No fields provided for update")

    employee = get_employee(session, employee_id)
    for field in REQUIRED_FIELDS:
        if field in changes and changes[field] in (None, ""):
            raise ValidationError(f"Required field cannot be empty: {field}")
    if changes.get("email"):
        changes["email"] = str(changes["email"]).lower()
    if "skills" in changes and changes["skills"] is None:
        changes["skills"] = []
    if "years_experience" in changes and changes["years_experience"] is None:
        changes["years_experience"] = 0

    if touches_department(changes):
        sync_department_association(session, changes)
        ensure_department_assignment(session, changes)

    for field, value in changes.items():
        setattr(employee, field, value)
    employee.touch()
    session.add(employee)
    session.commit()
    session.refresh(employee)
    return employee


def delete_employee(session: Session, employee_id: UUID) -> None:
    employee = get_employee(session, employee_id)
    number = employee.employee_id
    session.exec(delete(EmployeeExperience).where(EmployeeExperience.employee_id == employee_id))
    session.exec(delete(EmployeeEducation).where(EmployeeEducation.employee_id == employee_id))
    session.delete(employee)
    session.commit()
    logger.info("Deleted employee %s (%s)", number, employee_id)
