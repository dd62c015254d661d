from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .employee import EmployeeRead, _blank_to_none


class ExperienceBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    company: str = Field(min_length=1, max_length=255)
    position: str = Field(min_length=1, max_length=255)
    start_date: date
    end_date: Optional[date] = None
    description: Optional[str] = None


class ExperienceCreate(ExperienceBase):
    # employee_id is taken from the URL path
    normalize_blank = field_validator("end_date", "description", mode="before")(
        _blank_to_none
    )


class ExperienceUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    company: Optional[str] = Field(None, min_length=1, max_length=255)
    position: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None

    normalize_blank = field_validator("end_date", "description", mode="before")(
        _blank_to_none
    )


class ExperienceRead(ExperienceBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    employee_id: UUID
    created_at: datetime
    updated_at: datetime


class EducationBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    institution: str = Field(min_length=1, max_length=255)
    degree: str = Field(min_length=1, max_length=255)
    field_of_study: Optional[str] = Field(None, max_length=255)
    start_date: date
    end_date: Optional[date] = None
    description: Optional[str] = None


class EducationCreate(EducationBase):
    normalize_blank = field_validator(
        "field_of_study", "end_date", "description", mode="before"
    )(_blank_to_none)


class EducationUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    institution: Optional[str] = Field(None, min_length=1, max_length=255)
    degree: Optional[str] = Field(None, min_length=1, max_length=255)
    field_of_study: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None

    normalize_blank = field_validator(
        "field_of_study", "end_date", "description", mode="before"
    )(_blank_to_none)


class EducationRead(EducationBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    employee_id: UUID
    created_at: datetime
    updated_at: datetime


class EmployeeDetail(EmployeeRead):
    """Single-employee view with work history and education, newest first."""

    experiences: List[ExperienceRead] = []
    education: List[EducationRead] = []
