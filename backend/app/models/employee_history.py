from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from app.models.timestamps import utc_now


class EmployeeExperience(SQLModel, table=True):
    """A previous job held by an employee."""

    __tablename__ = "employee_experiences"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    employee_id: UUID = Field(foreign_key="employees.id", index=True)
    company: str = Field(max_length=255)
    position: str = Field(max_length=255)
    start_date: date
    end_date: Optional[date] = Field(default=None, nullable=True)
    description: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)

    def touch(self) -> None:
        self.updated_at = utc_now()


class EmployeeEducation(SQLModel, table=True):
    """A degree or course of study completed by an employee."""

    __tablename__ = "employee_education"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    employee_id: UUID = Field(foreign_key="employees.id", index=True)
    institution: str = Field(max_length=255)
    degree: str = Field(max_length=255)
    field_of_study: Optional[str] = Field(default=None, max_length=255)
    start_date: date
    end_date: Optional[date] = Field(default=None, nullable=True)
    description: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)

    def touch(self) -> None:
        self.updated_at = utc_now()
