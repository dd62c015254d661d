from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

EmploymentStatus = Literal["active", "inactive", "terminated"]

# Optional fields where the form sends "" for "not set"
BLANKABLE_FIELDS = (
    "phone",
    "date_of_birth",
    "manager_id",
    "address_street",
    "address_city",
    "address_state",
    "address_zip",
    "address_country",
    "emergency_contact_name",
    "emergency_contact_phone",
    "education_level",
    "profile_image_url",
    "notes",
    "salary",
)


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class EmployeeBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    hire_date: date
    position: str
    salary: Optional[float] = None
    manager_id: Optional[UUID] = None
    employment_status: EmploymentStatus = "active"
    address_street: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_country: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    skills: List[str] = []
    years_experience: int = 0
    education_level: Optional[str] = None
    profile_image_url: Optional[str] = None
    notes: Optional[str] = None


class EmployeeCreate(EmployeeBase):
    # Either may be blank; the department service resolves them
    department: Optional[str] = None
    department_id: Optional[str] = None

    normalize_blank = field_validator(*BLANKABLE_FIELDS, mode="before")(_blank_to_none)

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, value):
        if not isinstance(value, list):
            return []
        return [str(item) for item in value]

    @field_validator("years_experience", mode="before")
    @classmethod
    def coerce_years(cls, value):
        if value is None or value == "":
            return 0
        return value


class EmployeeUpdate(BaseModel):
    """Schema for partial employee updates."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    hire_date: Optional[date] = None
    position: Optional[str] = None
    department: Optional[str] = None
    department_id: Optional[str] = None
    salary: Optional[float] = None
    manager_id: Optional[UUID] = None
    employment_status: Optional[EmploymentStatus] = None
    address_street: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_country: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    skills: Optional[List[str]] = None
    years_experience: Optional[int] = None
    education_level: Optional[str] = None
    profile_image_url: Optional[str] = None
    notes: Optional[str] = None

    normalize_blank = field_validator(*BLANKABLE_FIELDS, mode="before")(_blank_to_none)


class EmployeeRead(EmployeeBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    employee_id: str
    email: str
    department: Optional[str] = None
    department_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime
