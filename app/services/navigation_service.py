"""Navigation cursor stepping for the appointment calendar."""

import calendar
from datetime import date, timedelta

from app.core.clock import Clock
from app.schemas.appointments import NavigationCursor, NavigationDirection, ViewMode


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole calendar months, clamping to the target month's last day."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def advance_cursor(cursor: NavigationCursor, direction: NavigationDirection) -> NavigationCursor:
    """
    Step the cursor one window forwards or backwards.

    Week mode moves seven days, day mode one day and month mode one calendar
    month. The view mode is kept.
    """
    step = 1 if direction == NavigationDirection.NEXT else -1

    if cursor.view_mode == ViewMode.WEEK:
        current_date = cursor.current_date + timedelta(days=7 * step)
    elif cursor.view_mode == ViewMode.DAY:
        current_date = cursor.current_date + timedelta(days=step)
    else:
        current_date = add_months(cursor.current_date, step)

    return cursor.model_copy(update={"current_date": current_date})


def reset_cursor(cursor: NavigationCursor, clock: Clock) -> NavigationCursor:
    """Move the cursor to today without changing its view mode."""
    return cursor.model_copy(update={"current_date": clock.today()})


def change_view_mode(cursor: NavigationCursor, view_mode: ViewMode) -> NavigationCursor:
    """Switch the view mode; the displayed window is recomputed from the same date."""
    return cursor.model_copy(update={"view_mode": view_mode})
