"""Appointment schemas for the scheduling engine and its API."""

from datetime import date, datetime, time
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class AppointmentStatus(str, Enum):
    """Appointment status enumeration."""

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class ViewMode(str, Enum):
    """Calendar view mode enumeration."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class NavigationDirection(str, Enum):
    """Direction to step the navigation cursor."""

    PREVIOUS = "previous"
    NEXT = "next"


class Appointment(BaseModel):
    """A single scheduled visit."""

    model_config = ConfigDict(frozen=True)

    id: str
    patient_id: str
    doctor_id: str
    clinic_id: str
    service_ids: list[str] = Field(..., min_length=1)
    start_time: datetime
    end_time: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str | None = None
    symptoms: str | None = None
    is_follow_up: bool = False
    parent_appointment_id: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("end_time")
    @classmethod
    def validate_end_time(cls, v: datetime, info: ValidationInfo) -> datetime:
        """Validate end time is after start time."""
        start = info.data.get("start_time")
        if start is not None and v <= start:
            raise ValueError("End time must be after start time")
        return v


class AppointmentDetail(Appointment):
    """Appointment with the display names the console renders on its cards."""

    patient_name: str
    doctor_name: str
    service_name: str
    clinic_name: str


class NavigationCursor(BaseModel):
    """Currently displayed calendar window: a date and a view mode."""

    model_config = ConfigDict(frozen=True)

    current_date: date
    view_mode: ViewMode = ViewMode.WEEK


class FilterState(BaseModel):
    """Status and free-text filters applied to the appointment list."""

    model_config = ConfigDict(frozen=True)

    status_filter: AppointmentStatus | Literal["all"] = "all"
    search_query: str = ""


class TimeSlotBucket(BaseModel):
    """Appointments starting exactly at a day-view slot."""

    slot: time
    appointments: list[AppointmentDetail] = Field(default_factory=list)


class DayView(BaseModel):
    """Half-hourly slot grid for a single day."""

    view_mode: Literal[ViewMode.DAY] = ViewMode.DAY
    date: date
    slots: list[TimeSlotBucket]


class WeekCell(BaseModel):
    """Appointments for one day column within one hourly row."""

    date: date
    appointments: list[AppointmentDetail] = Field(default_factory=list)


class WeekRow(BaseModel):
    """Hourly row of the week grid."""

    hour: time
    cells: list[WeekCell]


class WeekView(BaseModel):
    """Seven day columns by hourly rows."""

    view_mode: Literal[ViewMode.WEEK] = ViewMode.WEEK
    week_start: date
    days: list[date]
    rows: list[WeekRow]


class DayGroup(BaseModel):
    """Appointments sharing a calendar day."""

    date: date
    appointments: list[AppointmentDetail]


class MonthView(BaseModel):
    """Appointments grouped by calendar day, without a time grid."""

    view_mode: Literal[ViewMode.MONTH] = ViewMode.MONTH
    groups: list[DayGroup]


ViewBuckets = Annotated[DayView | WeekView | MonthView, Field(discriminator="view_mode")]


class AppointmentListResponse(BaseModel):
    """Schema for a filtered appointment list response."""

    total: int
    view_mode: ViewMode
    window_start: datetime | None
    window_end: datetime | None
    title: str
    items: list[AppointmentDetail]


class AppointmentStats(BaseModel):
    """Headline counts shown above the appointment calendar."""

    today: int
    total: int
    by_status: dict[AppointmentStatus, int]


class AppointmentStatusUpdate(BaseModel):
    """Schema for updating appointment status."""

    status: AppointmentStatus
    notes: str | None = Field(None, max_length=1000)


class CursorNavigationRequest(BaseModel):
    """Schema for stepping the navigation cursor."""

    cursor: NavigationCursor
    direction: NavigationDirection


class CursorViewModeRequest(BaseModel):
    """Schema for switching the cursor's view mode."""

    cursor: NavigationCursor
    view_mode: ViewMode
