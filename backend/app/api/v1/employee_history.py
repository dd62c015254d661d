from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, status
from fastapi.responses import Response

from app.db import SessionDep
from app.schemas import (
    EducationCreate,
    EducationRead,
    EducationUpdate,
    ExperienceCreate,
    ExperienceRead,
    ExperienceUpdate,
)
from app.services import employee_history

router = APIRouter()


@router.get(
    "/{employee_id}/experiences",
    response_model=List[ExperienceRead],
    summary="List employee experiences",
)
def list_experiences(employee_id: UUID, session: SessionDep) -> List[ExperienceRead]:
    """Most recent start date first."""
    entries = employee_history.list_experiences(session, employee_id)
    return [ExperienceRead.model_validate(entry) for entry in entries]


@router.post(
    "/{employee_id}/experiences",
    response_model=ExperienceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add employee experience",
)
def create_experience(
    employee_id: UUID, payload: ExperienceCreate, session: SessionDep
) -> ExperienceRead:
    entry = employee_history.create_experience(session, employee_id, payload)
    return ExperienceRead.model_validate(entry)


@router.put(
    "/{employee_id}/experiences/{experience_id}",
    response_model=ExperienceRead,
    summary="Update employee experience",
)
def update_experience(
    employee_id: UUID,
    experience_id: UUID,
    payload: ExperienceUpdate,
    session: SessionDep,
) -> ExperienceRead:
    entry = employee_history.update_experience(session, employee_id, experience_id, payload)
    return ExperienceRead.model_validate(entry)


@router.delete("/{employee_id}/experiences/{experience_id}", summary="Delete employee experience")
def delete_experience(employee_id: UUID, experience_id: UUID, session: SessionDep) -> Response:
    employee_history.delete_experience(session, employee_id, experience_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{employee_id}/education",
    response_model=List[EducationRead],
    summary="List employee education",
)
def list_education(employee_id: UUID, session: SessionDep) -> List[EducationRead]:
    """Most recent start date first."""
    entries = employee_history.list_education(session, employee_id)
    return [EducationRead.model_validate(entry) for entry in entries]


@router.post(
    "/{employee_id}/education",
    response_model=EducationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add employee education",
)
def create_education(
    employee_id: UUID, payload: EducationCreate, session: SessionDep
) -> EducationRead:
    entry = employee_history.create_education(session, employee_id, payload)
    return EducationRead.model_validate(entry)


@router.put(
    "/{employee_id}/education/{education_id}",
    response_model=EducationRead,
    summary="Update employee education",
)
def update_education(
    employee_id: UUID,
    education_id: UUID,
    payload: EducationUpdate,
    session: SessionDep,
) -> EducationRead:
    entry = employee_history.update_education(session, employee_id, education_id, payload)
    return EducationRead.model_validate(entry)


@router.delete("/{employee_id}/education/{education_id}", summary="Delete employee education")
def delete_education(employee_id: UUID, education_id: UUID, session: SessionDep) -> Response:
    employee_history.delete_education(session, employee_id, education_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
