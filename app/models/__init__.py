"""In-memory seed data."""

from app.models.directory import clinics, services, users

__all__ = [
    "clinics",
    "services",
    "users",
]
