# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from todopanel import __version__
from todopanel.domain.task import Category, Priority, Status
from todopanel.interfaces.cli import app
from todopanel.interfaces.cli.common import open_workspace, short_id

runner = CliRunner()


def _only_task_id() -> str:
    tasks = open_workspace().tasks
    assert len(tasks) == 1
    return tasks[0].id


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_add_list_and_complete() -> None:
    result = runner.invoke(app, ["add", "Fix bug", "-p", "high", "--due", "2024-01-10"])
    assert result.exit_code == 0, result.output
    assert "Added task" in result.output

    task_id = _only_task_id()
    task = open_workspace().tasks[0]
    assert task.priority == Priority.HIGH
    assert str(task.due_date) == "2024-01-10"

    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "Fix bug" in result.output
    assert "Total: 1" in result.output

    result = runner.invoke(app, ["complete", task_id[:6]])
    assert result.exit_code == 0, result.output
    assert open_workspace().tasks[0].status == Status.COMPLETED

    result = runner.invoke(app, ["list", "--hide-completed"])
    assert "No tasks match." in result.output


def test_edit_and_status_commands() -> None:
    runner.invoke(app, ["add", "Draft"])
    task_id = _only_task_id()

    result = runner.invoke(app, ["edit", task_id, "--title", "Final", "--actual", "2"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["status", task_id, "onhold"])
    assert result.exit_code == 0, result.output

    task = open_workspace().tasks[0]
    assert task.id == task_id
    assert task.title == "Final"
    assert task.actual_hours == 2
    assert task.status == Status.ON_HOLD


def test_unknown_task_reference_fails() -> None:
    result = runner.invoke(app, ["start", "does-not-exist"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_members_and_assignment() -> None:
    runner.invoke(app, ["add", "Shared work"])
    task_id = _only_task_id()

    result = runner.invoke(app, ["member", "add", "Ada Lovelace", "--role", "Designer"])
    assert result.exit_code == 0, result.output
    assert "(AL)" in result.output

    result = runner.invoke(app, ["assign", task_id, "ada lovelace"])
    assert result.exit_code == 0, result.output

    workspace = open_workspace()
    member = workspace.members[0]
    assert workspace.tasks[0].assigned_members == [member.id]

    result = runner.invoke(app, ["member", "remove", "Ada Lovelace", "--yes"])
    assert result.exit_code == 0, result.output
    assert open_workspace().tasks[0].assigned_members == []


def test_subtasks_by_position() -> None:
    runner.invoke(app, ["add", "Checklist"])
    task_id = _only_task_id()
    runner.invoke(app, ["subtask", "add", task_id, "first"])
    runner.invoke(app, ["subtask", "add", task_id, "second"])

    result = runner.invoke(app, ["subtask", "done", task_id, "2"])
    assert result.exit_code == 0, result.output

    sub_tasks = open_workspace().tasks[0].sub_tasks
    assert [st.is_completed for st in sub_tasks] == [False, True]

    result = runner.invoke(app, ["show", task_id])
    assert "Subtasks (1/2)" in result.output


def test_assets() -> None:
    runner.invoke(app, ["add", "Art pass"])
    task_id = _only_task_id()

    runner.invoke(app, ["asset", "add", task_id, "Assets/hero.png"])
    runner.invoke(app, ["asset", "add", task_id, "Assets/hero.png"])
    result = runner.invoke(app, ["asset", "list", task_id])

    assert result.output.count("Assets/hero.png") == 1
    assert open_workspace().tasks[0].referenced_asset_guids == ["Assets/hero.png"]


def test_duplicate_and_delete() -> None:
    runner.invoke(app, ["add", "Original"])
    task_id = _only_task_id()

    result = runner.invoke(app, ["duplicate", task_id])
    assert result.exit_code == 0, result.output
    titles = [t.title for t in open_workspace().tasks]
    assert titles == ["Original", "Original (Copy)"]

    result = runner.invoke(app, ["delete", task_id, "--yes"])
    assert result.exit_code == 0, result.output
    assert [t.title for t in open_workspace().tasks] == ["Original (Copy)"]


def test_delete_asks_for_confirmation() -> None:
    runner.invoke(app, ["add", "Keep me"])
    task_id = _only_task_id()

    result = runner.invoke(app, ["delete", task_id], input="n\n")

    assert result.exit_code != 0
    assert len(open_workspace().tasks) == 1


def test_export_to_path(tmp_path: Path) -> None:
    runner.invoke(app, ["add", "Exported"])
    target = tmp_path / "out" / "tasks.csv"

    result = runner.invoke(app, ["export", str(target)])

    assert result.exit_code == 0, result.output
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Title,Description")
    assert lines[1].startswith('"Exported"')


def test_settings_init_and_show(todopanel_home: Path) -> None:
    result = runner.invoke(app, ["settings", "show"])
    assert "built-in fallbacks" in result.output

    result = runner.invoke(app, ["settings", "init"])
    assert result.exit_code == 0, result.output
    assert (todopanel_home / "settings.json").exists()

    result = runner.invoke(app, ["settings", "show"])
    assert '"default_due_days": 7' in result.output

    result = runner.invoke(app, ["settings", "init"])
    assert result.exit_code == 1


def test_settings_defaults_apply_to_new_tasks() -> None:
    runner.invoke(app, ["settings", "init"])
    runner.invoke(app, ["add", "With defaults"])

    task = open_workspace().tasks[0]
    assert task.estimated_hours == 2


def test_bracketed_text_is_printed_literally() -> None:
    runner.invoke(app, ["add", "a [/] b"])
    runner.invoke(app, ["add", "[b]x[/b]"])
    runner.invoke(app, ["member", "add", "[red]Eve", "--role", "QA [lead]"])

    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "a [/] b" in result.output
    assert "[b]x[/b]" in result.output

    result = runner.invoke(app, ["member", "list"])
    assert result.exit_code == 0, result.output
    assert "[red]Eve" in result.output
    assert "QA [lead]" in result.output


def test_member_filter_only_resolves_active_members() -> None:
    runner.invoke(app, ["add", "Shared"])
    task_id = _only_task_id()
    runner.invoke(app, ["member", "add", "Ada"])
    runner.invoke(app, ["assign", task_id, "Ada"])

    result = runner.invoke(app, ["member", "deactivate", "Ada"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["list", "--member", "Ada"])
    assert result.exit_code == 1
    assert "not found" in result.output

    runner.invoke(app, ["member", "activate", "Ada"])
    result = runner.invoke(app, ["list", "--member", "Ada"])
    assert result.exit_code == 0, result.output
    assert "Shared" in result.output


def test_add_from_assets_and_filter_by_asset_type() -> None:
    result = runner.invoke(
        app, ["add", "--asset", "Assets/Scripts/Player.cs", "-a", "Assets/Level1.unity"]
    )
    assert result.exit_code == 0, result.output
    assert "Work on Player" in result.output
    runner.invoke(app, ["add", "Paint", "-a", "Assets/hero.png"])
    runner.invoke(app, ["add", "Meeting"])

    tasks = {t.title: t for t in open_workspace().tasks}
    assert tasks["Work on Player"].category == Category.PROGRAMMING
    assert tasks["Paint"].category == Category.ART
    assert tasks["Paint"].referenced_asset_guids == ["Assets/hero.png"]

    ids = {title: short_id(task.id) for title, task in tasks.items()}

    result = runner.invoke(app, ["list", "--asset-type", "scenes"])
    assert result.exit_code == 0, result.output
    assert ids["Work on Player"] in result.output
    assert ids["Paint"] not in result.output
    assert ids["Meeting"] not in result.output

    result = runner.invoke(app, ["list", "-t", "png"])
    assert ids["Paint"] in result.output
    assert ids["Work on Player"] not in result.output

    result = runner.invoke(app, ["list", "--asset-type", " "])
    assert result.exit_code == 1
    assert "Unknown asset type" in result.output
