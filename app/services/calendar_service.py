"""Calendar bucketing for the day, week and month appointment views."""

from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from app.schemas.appointments import (
    AppointmentDetail,
    DayGroup,
    DayView,
    MonthView,
    NavigationCursor,
    TimeSlotBucket,
    ViewBuckets,
    ViewMode,
    WeekCell,
    WeekRow,
    WeekView,
)

GRID_START_HOUR = 8
GRID_END_HOUR = 18

# 08:00, 08:30, ... 18:00
DAY_VIEW_SLOTS: tuple[time, ...] = tuple(
    time(hour, minute)
    for hour in range(GRID_START_HOUR, GRID_END_HOUR + 1)
    for minute in (0, 30)
    if hour < GRID_END_HOUR or minute == 0
)

# 08:00, 09:00, ... 18:00
WEEK_VIEW_HOURS: tuple[time, ...] = tuple(
    time(hour) for hour in range(GRID_START_HOUR, GRID_END_HOUR + 1)
)

DAYS_PER_WEEK = 7


def week_start(day: date) -> date:
    """Monday of the week containing ``day``; a Sunday belongs to the week before."""
    return day - timedelta(days=day.weekday())


def week_days(day: date) -> list[date]:
    """The seven dates, Monday first, of the week containing ``day``."""
    monday = week_start(day)
    return [monday + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def bucket_day(appointments: Sequence[AppointmentDetail], day: date) -> DayView:
    """
    Place appointments into the half-hourly slots of the day grid.

    An appointment on ``day`` lands in the slot equal to its start hour and
    minute. Appointments on other days or starting off the grid are not shown.
    """
    slots: dict[tuple[date, time], list[AppointmentDetail]] = {
        (day, slot): [] for slot in DAY_VIEW_SLOTS
    }
    for appointment in appointments:
        start = appointment.start_time
        key = (start.date(), time(start.hour, start.minute))
        if key in slots:
            slots[key].append(appointment)

    return DayView(
        date=day,
        slots=[
            TimeSlotBucket(slot=slot, appointments=items) for (_, slot), items in slots.items()
        ],
    )


def bucket_week(appointments: Sequence[AppointmentDetail], day: date) -> WeekView:
    """
    Place appointments into the week grid of the week containing ``day``.

    Cells match on the calendar day and the start hour; minutes are ignored,
    so a 10:30 appointment shows in the 10:00 row.
    """
    days = week_days(day)
    cells: dict[tuple[date, int], list[AppointmentDetail]] = {
        (column, row.hour): [] for row in WEEK_VIEW_HOURS for column in days
    }
    for appointment in appointments:
        key = (appointment.start_time.date(), appointment.start_time.hour)
        if key in cells:
            cells[key].append(appointment)

    rows = [
        WeekRow(
            hour=row,
            cells=[WeekCell(date=column, appointments=cells[(column, row.hour)]) for column in days],
        )
        for row in WEEK_VIEW_HOURS
    ]
    return WeekView(week_start=days[0], days=days, rows=rows)


def group_by_day(appointments: Sequence[AppointmentDetail]) -> MonthView:
    """Group appointments by calendar day, days ascending and each day by start time."""
    groups: dict[date, list[AppointmentDetail]] = {}
    for appointment in appointments:
        groups.setdefault(appointment.start_time.date(), []).append(appointment)

    return MonthView(
        groups=[
            DayGroup(
                date=day,
                appointments=sorted(groups[day], key=lambda appointment: appointment.start_time),
            )
            for day in sorted(groups)
        ]
    )


def bucket_for_view(
    appointments: Sequence[AppointmentDetail],
    view_mode: ViewMode,
    cursor: NavigationCursor,
) -> ViewBuckets:
    """
    Partition appointments for rendering under ``view_mode``.

    Args:
        appointments: Appointments to place, typically already filtered
        view_mode: Grid to build
        cursor: Navigation cursor supplying the displayed date

    Returns:
        Day, week or month view payload
    """
    if view_mode == ViewMode.DAY:
        return bucket_day(appointments, cursor.current_date)
    if view_mode == ViewMode.WEEK:
        return bucket_week(appointments, cursor.current_date)
    return group_by_day(appointments)


def _short_date(day: date) -> str:
    return f"{day:%a}, {day:%b} {day.day}"


def view_title(cursor: NavigationCursor) -> str:
    """Caption for the displayed window, e.g. ``Mon, Jan 6 - Sun, Jan 12``."""
    day = cursor.current_date
    if cursor.view_mode == ViewMode.WEEK:
        monday = week_start(day)
        sunday = monday + timedelta(days=DAYS_PER_WEEK - 1)
        return f"{_short_date(monday)} - {_short_date(sunday)}"
    if cursor.view_mode == ViewMode.DAY:
        return f"{day:%A}, {day:%B} {day.day}, {day.year}"
    return f"{day:%B} {day.year}"


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Midnight of ``day`` and midnight of the following day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)
