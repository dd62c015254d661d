"""Work experience and education entries attached to an employee."""
from __future__ import annotations

import logging
from typing import List, Type, TypeVar, Union
from uuid import UUID

from sqlmodel import Session, select

from app.core.errors import NotFoundError, ValidationError
from app.models import EmployeeEducation, EmployeeExperience
from app.schemas import (
    EducationCreate,
    EducationUpdate,
    ExperienceCreate,
    ExperienceUpdate,
)
from app.services.employees import get_employee

logger = logging.getLogger(__name__)

HistoryEntry = TypeVar("HistoryEntry", EmployeeExperience, EmployeeEducation)

# Columns that may not be cleared through a partial update
REQUIRED_FIELDS = {
    EmployeeExperience: ("company", "position", "start_date"),
    EmployeeEducation: ("institution", "degree", "start_date"),
}

NOT_FOUND_MESSAGES = {
    EmployeeExperience: "Experience not found",
    EmployeeEducation: "Education entry not found",
}


def _list_entries(
    session: Session, model: Type[HistoryEntry], employee_id: UUID
) -> List[HistoryEntry]:
    get_employee(session, employee_id)
    statement = (
        select(model)
        .where(model.employee_id == employee_id)
        .order_by(model.start_date.desc(), model.created_at.desc())
    )
    return list(session.exec(statement).all())


def _get_entry(
    session: Session, model: Type[HistoryEntry], employee_id: UUID, entry_id: UUID
) -> HistoryEntry:
    entry = session.get(model, entry_id)
    if not entry or entry.employee_id != employee_id:
        raise NotFoundError(NOT_FOUND_MESSAGES[model])
    return entry


def _create_entry(
    session: Session,
    model: Type[HistoryEntry],
    employee_id: UUID,
    payload: Union[ExperienceCreate, EducationCreate],
) -> HistoryEntry:
    get_employee(session, employee_id)
    entry = model(**payload.model_dump(), employee_id=employee_id)
    session.add(entry)
    session.commit()
    session.refresh(entry)
    logger.info("Added %s %s to employee %s", model.__tablename__, entry.id, employee_id)
    return entry


def _update_entry(
    session: Session,
    model: Type[HistoryEntry],
    employee_id: UUID,
    entry_id: UUID,
    payload: Union[ExperienceUpdate, EducationUpdate],
) -> HistoryEntry:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("No fields provided for update")
    for field in REQUIRED_FIELDS[model]:
        if field in changes and changes[field] is None:
            raise ValidationError(f"Required field cannot be empty: {field}")

    entry = _get_entry(session, model, employee_id, entry_id)
    for field, value in changes.items():
        setattr(entry, field, value)
    entry.touch()
    session.add(entry)
    session.commit()
    session.refresh(entry)
    return entry


def _delete_entry(
    session: Session, model: Type[HistoryEntry], employee_id: UUID, entry_id: UUID
) -> None:
    entry = _get_entry(session, model, employee_id, entry_id)
    session.delete(entry)
    session.commit()
    logger.info("Removed %s %s from employee %s", model.__tablename__, entry_id, employee_id)


def list_experiences(session: Session, employee_id: UUID) -> List[EmployeeExperience]:
    """Experiences of an employee, most recent start date first."""
    return _list_entries(session, EmployeeExperience, employee_id)


def create_experience(
    session: Session, employee_id: UUID, payload: ExperienceCreate
) -> EmployeeExperience:
    return _create_entry(session, EmployeeExperience, employee_id, payload)


def update_experience(
    session: Session, employee_id: UUID, experience_id: UUID, payload: ExperienceUpdate
) -> EmployeeExperience:
    return _update_entry(session, EmployeeExperience, employee_id, experience_id, payload)


def delete_experience(session: Session, employee_id: UUID, experience_id: UUID) -> None:
    _delete_entry(session, EmployeeExperience, employee_id, experience_id)


def list_education(session: Session, employee_id: UUID) -> List[EmployeeEducation]:
    """Education entries of an employee, most recent start date first."""
    return _list_entries(session, EmployeeEducation, employee_id)


def create_education(
    session: Session, employee_id: UUID, payload: EducationCreate
) -> EmployeeEducation:
    return _create_entry(session, EmployeeEducation, employee_id, payload)


def update_education(
    session: Session, employee_id: UUID, education_id: UUID, payload: EducationUpdate
) -> EmployeeEducation:
    return _update_entry(session, EmployeeEducation, employee_id, education_id, payload)


def delete_education(session: Session, employee_id: UUID, education_id: UUID) -> None:
    _delete_entry(session, EmployeeEducation, employee_id, education_id)
