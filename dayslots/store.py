"""The day's nine slots and the text files they are kept in."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from itertools import chain
from pathlib import Path

from .task import Task

SLOT_COUNT = 9
FIRST_HOUR = 6
SLOT_LENGTH = 2

_INTEGER = re.compile(r"[+-]?\d+")


def _check_index(index: int) -> None:
    if not 1 <= index <= SLOT_COUNT:
        raise IndexError(f"slot index must be between 1 and {SLOT_COUNT}, got {index}")


def _nine_tasks() -> list[Task]:
    return [Task(timenum=number) for number in range(1, SLOT_COUNT + 1)]


def slot_hours(index: int) -> tuple[int, int]:
    """Return the start and end hour of slot ``index`` (1 to 9)."""
    _check_index(index)
    start = FIRST_HOUR + SLOT_LENGTH * (index - 1)
    return start, start + SLOT_LENGTH


@dataclass
class DayPlan:
    """Plans and records for the nine slots of one day."""

    plans: list[Task] = field(default_factory=_nine_tasks)
    records: list[Task] = field(default_factory=_nine_tasks)

    def __post_init__(self) -> None:
        if len(self.plans) != SLOT_COUNT or len(self.records) != SLOT_COUNT:
            raise ValueError(f"a day has exactly {SLOT_COUNT} plans and {SLOT_COUNT} records")

    def slot(self, index: int) -> tuple[Task, Task]:
        """Return the (plan, record) pair of slot ``index`` (1 to 9)."""
        _check_index(index)
        return self.plans[index - 1], self.records[index - 1]


def _to_int(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _read_lines(path: Path) -> list[str]:
    with path.open(encoding="utf-8") as handle:
        return [line.strip() for line in handle]


def read_tasks(tasks_path: str | os.PathLike, remind_path: str | os.PathLike) -> DayPlan:
    """Load a day from the task list and reminder files.

    An empty or missing task list gives placeholder tasks. Lines beyond the
    expected ones are ignored; missing lines leave fields empty.
    """
    tasks_path = Path(tasks_path)
    remind_path = Path(remind_path)
    day = DayPlan()

    lines = _read_lines(tasks_path) if tasks_path.exists() else []
    if not lines:
        for task in chain(day.plans, day.records):
            task.clear()
    else:
        fields = iter(lines)
        for task in chain(day.plans, day.records):
            task.name = next(fields, task.name)
            task.content = next(fields, task.content)

    if remind_path.exists():
        for task, value in zip(day.plans, _read_lines(remind_path)):
            task.need_remind = _to_int(value)
    return day


def write_tasks(
    day: DayPlan, tasks_path: str | os.PathLike, remind_path: str | os.PathLike
) -> None:
    """Save the names and contents, then the plans' reminder flags."""
    with Path(tasks_path).open("w", encoding="utf-8") as out:
        for task in chain(day.plans, day.records):
            out.write(f"{task.name}\n{task.content}\n")
    with Path(remind_path).open("w", encoding="utf-8") as out:
        for task in day.plans:
            out.write(f"{task.need_remind}\n")