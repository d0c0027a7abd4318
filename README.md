# dayslots

A small day planner for the console. The day from 6:00 to 24:00 is
divided into nine two-hour slots, numbered 1 to 9 (slot 1 is
6:00-8:00, slot 9 is 22:00-24:00). For every slot you keep:

- a **plan**: a name, a short description, and whether you want a
  reminder for it;
- a **record**: a name and a description of what you actually did;
- a **reflection** and a note of how much time you spent focused.

A focus countdown of 30, 60, 90, 120, 150 or 180 minutes is included.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Data files

All data lives in one directory (the current directory unless
`--data-dir` is given):

- `taskslist.txt`: one line per field: name and content of the nine
  plans, then name and content of the nine records (36 lines). If the
  file is missing or empty, every plan and record reads as `nothing`.
- `taskremind.txt`: one line per plan holding its reminder flag,
  `1` for on and `0` for off.
- `reftime.txt`: reflection and focus time of each plan, one per line.
  This file is read back as whitespace-separated words, so a reflection
  or focus time containing spaces does not survive a round trip.

## Command line

```
dayslots [--data-dir DIR] COMMAND ...
```

Commands:

- `show`: print the current date and time, then every slot's plan and
  record, marking plans that have a reminder on.
- `edit SLOT [--plan-name T] [--plan-content T] [--record-name T]
  [--record-content T] [--remind | --no-remind]`: change a slot. Options
  left out keep their current value. Names must not be empty and may be
  at most 20 characters; descriptions at most 100. A rejected edit
  prints the error and exits with status 1, leaving the files untouched.
- `clear SLOT`: reset the slot's plan and record to `nothing` and turn
  its reminder off.
- `view SLOT`: show the slot's plan, record, focus time and reflection
  side by side.
- `reflect SLOT --reflection T --focus T`: save a reflection and focus
  time for the slot.
- `plans` / `records`: list every plan or every record.
- `remind [--hour H]`: print the reminders due at hour `H` (default: the
  current hour). A slot's reminder is due one hour after the slot
  starts (7 for slot 1, 9 for slot 2, ... 23 for slot 9); each reminder
  fires once, after which its flag is saved as off.
- `countdown CHOICE [--interval SECONDS]`: run a focus countdown.
  `CHOICE` 0 to 5 picks 30, 60, 90, 120, 150 or 180 minutes. The
  remaining time is printed as `h:m:s` once per interval (default one
  second), followed by a closing message.

## Using it from Python

```python
from dayslots.store import read_tasks, write_tasks, slot_hours
from dayslots.editor import apply_edit, clear_slot, ValidationError
from dayslots.compare import view_slot, query_label, save_reflection
from dayslots.reminder import due_reminders, format_clock
from dayslots.countdown import Countdown, secs_to_time, duration_for_choice

day = read_tasks("taskslist.txt", "taskremind.txt")

plan, record = day.slot(1)
print(slot_hours(1))      # (6, 8)

try:
    apply_edit(plan, record, "Reading", "Two chapters",
               "Reading", "One chapter", True)
except ValidationError as error:
    print(error)

write_tasks(day, "taskslist.txt", "taskremind.txt")

view = view_slot(day, 1)
print(view.label, view.plan_name, view.record_name)

for index, message in due_reminders(day, 7):
    print(index, message)

print(secs_to_time(3725))          # "1:2:5"
print(duration_for_choice(0))      # 1800

countdown = Countdown(0)
print(countdown.tick())            # "0:29:59"
```

Modules:

- `dayslots.task`: the `Task` dataclass and its `clear()` method.
- `dayslots.store`: `DayPlan`, `slot_hours`, `read_tasks`, `write_tasks`.
- `dayslots.editor`: `validate_entry`, `apply_edit`, `clear_slot` and
  `ValidationError`. Lengths are counted in UTF-16 code units.
- `dayslots.compare`: `SlotView`, `view_slot`, `query_label`,
  `save_reflection`, `read_reflections`, `write_reflections`,
  `plan_overview`, `record_overview`.
- `dayslots.reminder`: `format_clock`, `reminder_message`,
  `due_reminders`.
- `dayslots.countdown`: `Countdown`, `secs_to_time`,
  `duration_for_choice`.
- `dayslots.cli`: the `main` function behind the `dayslots` command.

Validation messages, query labels, reminder texts and the countdown's
closing message are in Chinese.

## What it does not do

- There is no graphical window, tray icon or theme settings; everything
  is done through the command line or from Python.
- Reminders are not raised in the background: they are only shown when
  `dayslots remind` is run.
- The countdown plays no sound.
- Only a single day is kept; there is no history of earlier days.