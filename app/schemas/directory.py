"""Directory record schemas: users, services and clinics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    """User role enumeration."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    DOCTOR = "doctor"
    STAFF = "staff"
    RECEPTIONIST = "receptionist"
    PATIENT = "patient"


class UserRecord(BaseModel):
    """A person known to the clinic directory."""

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str
    email: str
    role: UserRole
    clinic_id: str | None = None
    phone: str | None = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"


class ServiceRecord(BaseModel):
    """A bookable clinical service."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    duration: int = Field(..., gt=0, description="Duration in minutes")
    cost: float = Field(..., ge=0)
    is_active: bool = True


class ClinicRecord(BaseModel):
    """A clinic location."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    timezone: str = "UTC"
    is_active: bool = True
