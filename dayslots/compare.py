"""Comparing a day's plans with what was recorded, with reflections."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .store import DayPlan, slot_hours


@dataclass(frozen=True)
class SlotView:
    """Everything shown when one slot is queried."""

    label: str
    plan_name: str
    plan_content: str
    record_name: str
    record_content: str
    focus_time: str
    reflection: str


def read_reflections(day: DayPlan, path: str | os.PathLike) -> None:
    """Load each plan's reflection and focus time from ``path``.

    The file is read as whitespace-separated words, two per plan in slot
    order; words that are missing leave the fields empty.
    """
    path = Path(path)
    words = iter(path.read_text(encoding="utf-8").split() if path.exists() else [])
    for task in day.plans:
        task.reflection = next(words, "")
        task.timeusage = next(words, "")


def write_reflections(day: DayPlan, path: str | os.PathLike) -> None:
    """Save each plan's reflection and focus time, one per line."""
    with Path(path).open("w", encoding="utf-8") as out:
        for task in day.plans:
            out.write(f"{task.reflection}\n{task.timeusage}\n")


def query_label(index: int) -> str:
    """Return the heading shown while slot ``index`` is queried."""
    start, end = slot_hours(index)
    return f"当前查询中：{start}:00-{end}:00"


def view_slot(day: DayPlan, index: int) -> SlotView:
    """Collect the plan, record, focus time and reflection of one slot."""
    plan, record = day.slot(index)
    return SlotView(
        label=query_label(index),
        plan_name=plan.name,
        plan_content=plan.content,
        record_name=record.name,
        record_content=record.content,
        focus_time=plan.timeusage,
        reflection=plan.reflection,
    )


def save_reflection(day: DayPlan, index: int, reflection: str, timeusage: str) -> None:
    """Store a reflection and focus time on the plan of slot ``index``."""
    plan, _ = day.slot(index)
    plan.reflection = reflection
    plan.timeusage = timeusage


def plan_overview(day: DayPlan) -> list[tuple[str, str]]:
    """Return (name, content) of every plan in slot order."""
    return [(task.name, task.content) for task in day.plans]


def record_overview(day: DayPlan) -> list[tuple[str, str]]:
    """Return (name, content) of every record in slot order."""
    return [(task.name, task.content) for task in day.records]