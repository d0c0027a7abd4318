"""Command-line front end for planning and reviewing the day's slots."""

from __future__ import annotations

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path

from .compare import (
    plan_overview,
    read_reflections,
    record_overview,
    save_reflection,
    view_slot,
    write_reflections,
)
from .countdown import CHOICES, Countdown
from .editor import ValidationError, apply_edit, clear_slot
from .reminder import due_reminders, format_clock
from .store import SLOT_COUNT, read_tasks, slot_hours, write_tasks

TASKS_FILE = "taskslist.txt"
REMIND_FILE = "taskremind.txt"
REFLECTION_FILE = "reftime.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dayslots", description="Plan, record and review nine two-hour slots of a day."
    )
    parser.add_argument(
        "--data-dir", type=Path, default=Path.cwd(), help="directory holding the data files"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    slot_choices = range(1, SLOT_COUNT + 1)

    sub.add_parser("show", help="list every slot's plan and record")

    edit = sub.add_parser("edit", help="change a slot's plan and record")
    edit.add_argument("slot", type=int, choices=slot_choices)
    edit.add_argument("--plan-name")
    edit.add_argument("--plan-content")
    edit.add_argument("--record-name")
    edit.add_argument("--record-content")
    remind = edit.add_mutually_exclusive_group()
    remind.add_argument("--remind", dest="remind", action="store_true", default=None)
    remind.add_argument("--no-remind", dest="remind", action="store_false")

    clear = sub.add_parser("clear", help="reset a slot to the placeholder")
    clear.add_argument("slot", type=int, choices=slot_choices)

    view = sub.add_parser("view", help="compare a slot's plan with its record")
    view.add_argument("slot", type=int, choices=slot_choices)

    reflect = sub.add_parser("reflect", help="save a reflection and focus time for a slot")
    reflect.add_argument("slot", type=int, choices=slot_choices)
    reflect.add_argument("--reflection", required=True)
    reflect.add_argument("--focus", required=True)

    sub.add_parser("plans", help="list every plan")
    sub.add_parser("records", help="list every record")

    remind_cmd = sub.add_parser("remind", help="show reminders due at an hour")
    remind_cmd.add_argument("--hour", type=int, default=None)

    countdown = sub.add_parser("countdown", help="run a focus countdown")
    countdown.add_argument("choice", type=int, choices=range(len(CHOICES)))
    countdown.add_argument("--interval", type=float, default=1.0)
    return parser


def _paths(data_dir: Path) -> tuple[Path, Path, Path]:
    return data_dir / TASKS_FILE, data_dir / REMIND_FILE, data_dir / REFLECTION_FILE


def _slot_label(index: int) -> str:
    start, end = slot_hours(index)
    return f"{start}:00-{end}:00"


def _overview(pairs: list[tuple[str, str]]) -> None:
    for index, (name, content) in enumerate(pairs, start=1):
        print(f"{index} {_slot_label(index)} {name}: {content}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    tasks_path, remind_path, reflection_path = _paths(args.data_dir)
    day = read_tasks(tasks_path, remind_path)

    if args.command == "show":
        print(format_clock(datetime.now()))
        for index in range(1, SLOT_COUNT + 1):
            plan, record = day.slot(index)
            flag = " [remind]" if plan.need_remind == 1 else ""
            print(
                f"{index} {_slot_label(index)} plan: {plan.name} ({plan.content})"
                f" | record: {record.name} ({record.content}){flag}"
            )
    elif args.command == "edit":
        plan, record = day.slot(args.slot)
        try:
            apply_edit(
                plan,
                record,
                plan.name if args.plan_name is None else args.plan_name,
                plan.content if args.plan_content is None else args.plan_content,
                record.name if args.record_name is None else args.record_name,
                record.content if args.record_content is None else args.record_content,
                plan.need_remind if args.remind is None else args.remind,
            )
        except ValidationError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        write_tasks(day, tasks_path, remind_path)
    elif args.command == "clear":
        clear_slot(*day.slot(args.slot))
        write_tasks(day, tasks_path, remind_path)
    elif args.command == "view":
        read_reflections(day, reflection_path)
        view = view_slot(day, args.slot)
        print(view.label)
        print(f"plan: {view.plan_name}")
        print(f"plan detail: {view.plan_content}")
        print(f"record: {view.record_name}")
        print(f"record detail: {view.record_content}")
        print(f"focus time: {view.focus_time}")
        print(f"reflection: {view.reflection}")
    elif args.command == "reflect":
        read_reflections(day, reflection_path)
        save_reflection(day, args.slot, args.reflection, args.focus)
        write_reflections(day, reflection_path)
    elif args.command == "plans":
        _overview(plan_overview(day))
    elif args.command == "records":
        _overview(record_overview(day))
    elif args.command == "remind":
        hour = datetime.now().hour if args.hour is None else args.hour
        for _, message in due_reminders(day, hour):
            print(message)
        write_tasks(day, tasks_path, remind_path)
    elif args.command == "countdown":
        countdown = Countdown(args.choice)
        while (text := countdown.tick()) is not None:
            print(text, flush=True)
            if args.interval > 0:
                time.sleep(args.interval)
        print(countdown.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())