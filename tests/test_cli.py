from dayslots.cli import REFLECTION_FILE, REMIND_FILE, TASKS_FILE, main
from dayslots.countdown import Countdown
from dayslots.editor import NAME_TOO_LONG
from dayslots.reminder import reminder_message
from dayslots.store import read_tasks
from dayslots.task import PLACEHOLDER, Task


def _load(tmp_path):
    return read_tasks(tmp_path / TASKS_FILE, tmp_path / REMIND_FILE)


def _run(tmp_path, *args):
    return main(["--data-dir", str(tmp_path), *args])


def test_edit_saves_slot(tmp_path):
    code = _run(
        tmp_path, "edit", "3",
        "--plan-name", "read", "--plan-content", "book",
        "--record-name", "wrote", "--record-content", "notes", "--remind",
    )
    assert code == 0
    plan, record = _load(tmp_path).slot(3)
    assert (plan.name, plan.content, plan.need_remind) == ("read", "book", 1)
    assert (record.name, record.content) == ("wrote", "notes")


def test_edit_keeps_unset_fields(tmp_path):
    _run(tmp_path, "edit", "2", "--plan-name", "gym")
    plan, record = _load(tmp_path).slot(2)
    assert plan.name == "gym"
    assert plan.content == PLACEHOLDER
    assert record.name == PLACEHOLDER


def test_edit_rejects_long_name(tmp_path, capsys):
    code = _run(tmp_path, "edit", "1", "--plan-name", "x" * 21)
    assert code == 1
    assert NAME_TOO_LONG in capsys.readouterr().err
    assert not (tmp_path / TASKS_FILE).exists()


def test_clear_resets_slot(tmp_path):
    _run(tmp_path, "edit", "4", "--plan-name", "swim", "--remind")
    assert _run(tmp_path, "clear", "4") == 0
    plan, record = _load(tmp_path).slot(4)
    assert (plan.name, plan.need_remind, record.name) == (PLACEHOLDER, 0, PLACEHOLDER)


def test_show_lists_slots(tmp_path, capsys):
    _run(tmp_path, "edit", "1", "--plan-name", "breakfast", "--remind")
    capsys.readouterr()
    assert _run(tmp_path, "show") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert "breakfast" in lines[1]
    assert lines[1].endswith("[remind]")


def test_plans_overview(tmp_path, capsys):
    _run(tmp_path, "edit", "9", "--plan-name", "sleep", "--plan-content", "early")
    capsys.readouterr()
    _run(tmp_path, "plans")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 9
    assert lines[8].endswith("sleep: early")


def test_remind_prints_and_turns_off(tmp_path, capsys):
    _run(tmp_path, "edit", "1", "--plan-name", "run", "--remind")
    capsys.readouterr()
    assert _run(tmp_path, "remind", "--hour", "7") == 0
    assert capsys.readouterr().out.strip() == reminder_message(Task(name="run"))
    plan, _ = _load(tmp_path).slot(1)
    assert plan.need_remind == 0


def test_countdown_ends_with_message(tmp_path, capsys):
    assert _run(tmp_path, "countdown", "0", "--interval", "0") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == Countdown(0).message
    assert len(lines) == 30 * 60 + 2