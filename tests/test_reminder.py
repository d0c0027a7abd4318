from datetime import datetime

import pytest

from dayslots.reminder import due_reminders, format_clock, reminder_message
from dayslots.store import DayPlan
from dayslots.task import Task


def test_format_clock_pattern():
    assert format_clock(datetime(2024, 1, 15, 14, 30, 5)) == "2024-01-15 14:30:05 Mon"


def test_format_clock_pads_fields():
    text = format_clock(datetime(2023, 3, 4, 5, 6, 7))
    assert text.startswith("2023-03-04 05:06:07 ")


def test_reminder_message():
    assert reminder_message(Task(name="study")) == "不要忘了 study 呀！"


def test_due_reminder_fires_once():
    day = DayPlan()
    plan, _ = day.slot(1)
    plan.name = "run"
    plan.need_remind = 1
    assert due_reminders(day, 7) == [(1, reminder_message(plan))]
    assert plan.need_remind == 0
    assert due_reminders(day, 7) == []


def test_not_due_at_other_hour():
    day = DayPlan()
    plan, _ = day.slot(2)
    plan.need_remind = 1
    assert due_reminders(day, 7) == []
    assert plan.need_remind == 1


def test_unflagged_plan_not_reminded():
    day = DayPlan()
    assert due_reminders(day, 9) == []


@pytest.mark.parametrize("index", range(1, 10))
def test_each_slot_hour(index):
    day = DayPlan()
    plan, _ = day.slot(index)
    plan.name = f"task{index}"
    plan.need_remind = 1
    result = due_reminders(day, index * 2 + 5)
    assert result == [(index, reminder_message(plan))]