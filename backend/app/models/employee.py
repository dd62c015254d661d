from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, SQLModel

from app.models.timestamps import utc_now


class Employee(SQLModel, table=True):
    """Employee record."""

    __tablename__ = "employees"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    employee_id: str = Field(index=True, unique=True, max_length=50)
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255, index=True)
    email: str = Field(index=True, unique=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    date_of_birth: Optional[date] = Field(default=None, nullable=True)
    hire_date: date
    position: str = Field(max_length=255)
    # Denormalized copy of departments.name, rewritten whenever department_id changes
    department: Optional[str] = Field(default=None, max_length=255)
    department_id: Optional[UUID] = Field(
        default=None, foreign_key="departments.id", nullable=True, index=True
    )
    salary: Optional[float] = Field(default=None, nullable=True)
    manager_id: Optional[UUID] = Field(
        default=None, foreign_key="employees.id", nullable=True
    )
    employment_status: str = Field(default="active", max_length=20)
    address_street: Optional[str] = Field(default=None, max_length=255)
    address_city: Optional[str] = Field(default=None, max_length=255)
    address_state: Optional[str] = Field(default=None, max_length=255)
    address_zip: Optional[str] = Field(default=None, max_length=20)
    address_country: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_name: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(default=None, max_length=50)
    skills: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    years_experience: int = Field(default=0)
    education_level: Optional[str] = Field(default=None, max_length=255)
    profile_image_url: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)

    def touch(self) -> None:
        self.updated_at = utc_now()
