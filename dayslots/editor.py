"""Checking and applying edits to one slot's plan and record."""

from __future__ import annotations

from .task import PLACEHOLDER, Task

MAX_NAME_LENGTH = 20
MAX_CONTENT_LENGTH = 100

EMPTY_NAME = "事务名不能为空"
NAME_TOO_LONG = "事务名过长！请输入不超过20个字！"
CONTENT_TOO_LONG = "事务描述过长！请输入不超过100个字！"


class ValidationError(ValueError):
    """An entry in the slot editor was rejected."""


def _text_length(text: str) -> int:
    """Length in UTF-16 code units, the unit the limits are counted in."""
    return len(text.encode("utf-16-le")) // 2


def _check(name: str, content: str) -> None:
    if not name:
        raise ValidationError(EMPTY_NAME)
    if _text_length(name) > MAX_NAME_LENGTH:
        raise ValidationError(NAME_TOO_LONG)
    if _text_length(content) > MAX_CONTENT_LENGTH:
        raise ValidationError(CONTENT_TOO_LONG)


def validate_entry(
    plan_name: str, plan_content: str, record_name: str, record_content: str
) -> None:
    """Raise ValidationError for the first rule the entry breaks.

    The plan is checked before the record; for each, an empty name, then a
    name over 20 characters, then a content over 100 characters.
    """
    _check(plan_name, plan_content)
    _check(record_name, record_content)


def apply_edit(
    plan: Task,
    record: Task,
    plan_name: str,
    plan_content: str,
    record_name: str,
    record_content: str,
    remind: int | bool,
) -> None:
    """Validate the entry and store it in ``plan`` and ``record``.

    Nothing is changed when the entry is rejected.
    """
    validate_entry(plan_name, plan_content, record_name, record_content)
    plan.name = plan_name
    plan.content = plan_content
    record.name = record_name
    record.content = record_content
    plan.need_remind = 0 if not remind else 1


def clear_slot(plan: Task, record: Task) -> None:
    """Reset both tasks to the placeholder and turn the plan's reminder off."""
    plan.clear()
    record.name = PLACEHOLDER
    record.content = PLACEHOLDER