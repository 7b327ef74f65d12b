# tests/test_query.py

from __future__ import annotations

from datetime import date

from todopanel.domain.settings import TodoSettings
from todopanel.domain.task import (
    Category,
    Priority,
    Status,
    Task,
    TaskFilter,
    compute_stats,
    filter_tasks,
    extensions_for,
    infer_category,
    is_due_soon,
    is_overdue,
    subtask_progress,
)
from todopanel.domain.task.models import SubTask


def _task(title: str, due: date, **kwargs) -> Task:
    return Task(title=title, due_date=due, **kwargs)


def test_higher_priority_sorts_first_regardless_of_due_date() -> None:
    docs = _task("Write docs", date(2024, 1, 5), priority=Priority.LOW)
    bug = _task("Fix bug", date(2024, 1, 10), priority=Priority.HIGH)

    view = filter_tasks([docs, bug])

    assert [t.title for t in view] == ["Fix bug", "Write docs"]


def test_equal_priority_sorts_by_earliest_due_date() -> None:
    later = _task("later", date(2024, 2, 1))
    sooner = _task("sooner", date(2024, 1, 15))

    view = filter_tasks([later, sooner])

    assert [t.due_date for t in view] == [date(2024, 1, 15), date(2024, 2, 1)]


def test_full_ties_keep_board_order() -> None:
    tasks = [_task(name, date(2024, 1, 1)) for name in ("a", "b", "c")]
    assert [t.title for t in filter_tasks(tasks)] == ["a", "b", "c"]


def test_filter_is_pure_and_idempotent() -> None:
    tasks = [
        _task("a", date(2024, 1, 3), priority=Priority.LOW),
        _task("b", date(2024, 1, 2), priority=Priority.CRITICAL),
    ]
    before = [t.model_dump() for t in tasks]

    first = filter_tasks(tasks, TaskFilter(text_search="a"))
    second = filter_tasks(tasks, TaskFilter(text_search="a"))

    assert [t.id for t in first] == [t.id for t in second]
    assert [t.model_dump() for t in tasks] == before
    assert [t.title for t in tasks] == ["a", "b"]


def test_text_search_is_case_insensitive_over_title_and_description() -> None:
    tasks = [
        _task("Shader cleanup", date(2024, 1, 1)),
        _task("Other", date(2024, 1, 1), description="touches the SHADER graph"),
        _task("Unrelated", date(2024, 1, 1)),
    ]
    view = filter_tasks(tasks, TaskFilter(text_search="shader"))
    assert {t.title for t in view} == {"Shader cleanup", "Other"}


def test_hide_completed_and_exact_filters_combine() -> None:
    tasks = [
        _task("done", date(2024, 1, 1), status=Status.COMPLETED, category=Category.ART),
        _task("art", date(2024, 1, 1), category=Category.ART, priority=Priority.HIGH),
        _task("code", date(2024, 1, 1), category=Category.PROGRAMMING, priority=Priority.HIGH),
    ]

    assert [t.title for t in filter_tasks(tasks, TaskFilter(show_completed=False))] == [
        "art",
        "code",
    ]
    view = filter_tasks(
        tasks,
        TaskFilter(category=Category.ART, priority=Priority.HIGH, show_completed=False),
    )
    assert [t.title for t in view] == ["art"]
    assert filter_tasks(tasks, TaskFilter(status=Status.COMPLETED))[0].title == "done"


def test_member_filter() -> None:
    tasks = [
        _task("mine", date(2024, 1, 1), assigned_members=["m1"]),
        _task("theirs", date(2024, 1, 1), assigned_members=["m2"]),
    ]
    assert [t.title for t in filter_tasks(tasks, TaskFilter(assigned_member_id="m1"))] == ["mine"]
    assert len(filter_tasks(tasks)) == 2


def test_overdue_and_due_soon() -> None:
    today = date(2024, 1, 8)
    past = _task("past", date(2024, 1, 7))
    tomorrow = _task("tomorrow", date(2024, 1, 9))
    far = _task("far", date(2024, 1, 20))
    finished = _task("finished", date(2024, 1, 1), status=Status.COMPLETED)

    assert is_overdue(past, today)
    assert not is_overdue(finished, today)
    assert is_due_soon(tomorrow, today)
    assert not is_due_soon(far, today)
    assert not is_due_soon(past, today)

    wide = TodoSettings(due_date_warning_days=14)
    assert is_due_soon(far, today, wide)
    assert not is_due_soon(tomorrow, today, TodoSettings(enable_due_date_warnings=False))


def test_stats_count_the_view() -> None:
    today = date(2024, 1, 8)
    tasks = [
        _task("a", date(2024, 1, 1), status=Status.COMPLETED),
        _task("b", date(2024, 1, 1), status=Status.IN_PROGRESS),
        _task("c", date(2024, 1, 1)),
        _task("d", date(2024, 2, 1)),
    ]

    stats = compute_stats(tasks, today)

    assert (stats.total, stats.completed, stats.in_progress, stats.overdue) == (4, 1, 1, 2)
    assert stats.progress_percent == 25.0
    assert compute_stats([], today).progress_percent == 0.0


def test_subtask_progress() -> None:
    task = _task(
        "t",
        date(2024, 1, 1),
        sub_tasks=[SubTask(title="a", is_completed=True), SubTask(title="b")],
    )
    assert subtask_progress(task) == (1, 2)


def test_asset_type_filter_matches_any_linked_asset_by_extension() -> None:
    script = _task("script", date(2024, 1, 1), referenced_asset_guids=["Assets/Player.CS"])
    mixed = _task(
        "mixed", date(2024, 1, 2), referenced_asset_guids=["guid-1", "Assets\\UI\\icon.png"]
    )
    bare = _task("bare", date(2024, 1, 3))

    scripts = filter_tasks([script, mixed, bare], TaskFilter(asset_extensions=["cs"]))
    textures = filter_tasks(
        [script, mixed, bare], TaskFilter(asset_extensions=list(extensions_for("Textures")))
    )

    assert [t.title for t in scripts] == ["script"]
    assert [t.title for t in textures] == ["mixed"]
    assert len(filter_tasks([script, mixed, bare], TaskFilter())) == 3


def test_asset_type_names_and_extensions() -> None:
    assert extensions_for("scenes") == (".unity",)
    assert extensions_for("*.WAV") == (".wav",)
    assert extensions_for("  ") == ()
    assert TaskFilter(asset_extensions=["PNG", ".Mat", ""]).asset_extensions == [".png", ".mat"]


def test_category_is_inferred_from_the_first_asset() -> None:
    assert infer_category(["Assets/Player.cs", "Assets/hero.png"]) == Category.PROGRAMMING
    assert infer_category(["Assets/Wood.mat"]) == Category.ART
    assert infer_category(["Assets/Level1.unity"]) == Category.DESIGN
    assert infer_category(["Assets/Enemy.prefab"]) == Category.DESIGN
    assert infer_category(["Assets/hit.wav"]) == Category.AUDIO
    assert infer_category(["Assets/Run.anim"]) == Category.ANIMATION
    assert infer_category(["Assets/readme.txt"]) == Category.GENERAL
    assert infer_category(["1f2e3d4c"]) == Category.GENERAL
    assert infer_category([]) == Category.GENERAL
