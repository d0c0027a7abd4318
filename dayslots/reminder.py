"""Clock display and slot reminders."""

from __future__ import annotations

from datetime import datetime

from .store import SLOT_COUNT, DayPlan
from .task import Task

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def format_clock(moment: datetime) -> str:
    """Format a moment as ``yyyy-MM-dd hh:mm:ss ddd``."""
    return f"{moment:%Y-%m-%d %H:%M:%S} {_WEEKDAYS[moment.weekday()]}"


def reminder_message(task: Task) -> str:
    """Return the reminder text shown for a planned task."""
    return f"不要忘了 {task.name} 呀！"


def _reminder_hour(index: int) -> int:
    return index * 2 + 5


def due_reminders(day: DayPlan, hour: int) -> list[tuple[int, str]]:
    """Return (slot, message) for each flagged plan due at ``hour``.

    A plan is due when its reminder is on and ``hour`` is the hour after its
    slot starts. Each reminder fires once: its flag is turned off.
    """
    due = []
    for index in range(1, SLOT_COUNT + 1):
        plan, _ = day.slot(index)
        if plan.need_remind == 1 and hour == _reminder_hour(index):
            due.append((index, reminder_message(plan)))
            plan.need_remind = 0
    return due