# tests/test_priority.py

from __future__ import annotations

from arenta.model.task import TaskStatus
from arenta.query.sort import sort_indexed_tasks_by_priority, sort_tasks_by_priority
from arenta.service.task import compare_priority, has_higher_priority_than


def _one_of_each(at, make_task):
    now = at(12)
    return {
        TaskStatus.OVERDUE: make_task(
            "overdue", planned_start=at(9), planned_complete=at(10), now=now
        ),
        TaskStatus.ONGOING: make_task("ongoing", actual_start=at(11), now=now),
        TaskStatus.PLANNED: make_task(
            "planned", planned_start=at(14), planned_complete=at(15), now=now
        ),
        TaskStatus.COMPLETE: make_task(
            "complete", actual_start=at(8), actual_complete=at(9), now=now
        ),
        TaskStatus.BACKLOG: make_task("backlog", now=now),
    }


def test_status_classes_rank_in_fixed_order(at, make_task):
    tasks = _one_of_each(at, make_task)
    ranking = [
        TaskStatus.OVERDUE,
        TaskStatus.ONGOING,
        TaskStatus.PLANNED,
        TaskStatus.COMPLETE,
        TaskStatus.BACKLOG,
    ]
    for higher_index, higher in enumerate(ranking):
        for lower in ranking[higher_index + 1 :]:
            assert has_higher_priority_than(tasks[higher], tasks[lower])
            assert not has_higher_priority_than(tasks[lower], tasks[higher])


def test_overdue_with_earlier_planned_start_ranks_first(at, make_task):
    now = at(12)
    earlier = make_task(planned_start=at(9), planned_complete=at(10), now=now)
    later = make_task(planned_start=at(10), planned_complete=at(11), now=now)

    assert has_higher_priority_than(earlier, later)
    assert not has_higher_priority_than(later, earlier)


def test_ongoing_with_later_actual_start_ranks_first(at, make_task):
    now = at(12)
    recent = make_task(actual_start=at(11), now=now)
    older = make_task(actual_start=at(9), now=now)

    assert compare_priority(recent, older) == -1
    assert compare_priority(older, recent) == 1


def test_complete_with_later_completion_ranks_first(at, make_task):
    now = at(12)
    recent = make_task(actual_start=at(9), actual_complete=at(11), now=now)
    older = make_task(actual_start=at(9), actual_complete=at(10), now=now)

    assert has_higher_priority_than(recent, older)


def test_equal_overdue_tasks_tie(at, make_task):
    now = at(12)
    first = make_task(planned_start=at(9), planned_complete=at(10), now=now)
    second = make_task(planned_start=at(9), planned_complete=at(11), now=now)

    assert not has_higher_priority_than(first, second)
    assert not has_higher_priority_than(second, first)
    assert compare_priority(first, second) == 0


def test_backlog_tasks_tie(make_task, at):
    first = make_task("first", now=at(9))
    second = make_task("second", now=at(9))

    assert compare_priority(first, second) == 0


def test_sort_overdue_ongoing_planned(at, make_task):
    a = make_task("a", planned_start=at(9), planned_complete=at(9, 30), now=at(8))
    b = make_task("b", planned_start=at(9), planned_complete=at(9, 30), now=at(9, 15))
    c = make_task("c", actual_start=at(8), now=at(8, 30))

    assert a["status"] == TaskStatus.PLANNED
    assert b["status"] == TaskStatus.OVERDUE
    assert c["status"] == TaskStatus.ONGOING

    assert [task["description"] for task in sort_tasks_by_priority([a, c, b])] == [
        "b",
        "c",
        "a",
    ]


def test_sort_keeps_collection_order_for_ties(at, make_task):
    tasks = [make_task(f"backlog {i}", now=at(9)) for i in range(5)]

    assert sort_tasks_by_priority(tasks) == tasks


def test_sort_indexed_tasks_keeps_indices(at, make_task):
    tasks = _one_of_each(at, make_task)
    indexed = list(
        enumerate(
            [
                tasks[TaskStatus.BACKLOG],
                tasks[TaskStatus.PLANNED],
                tasks[TaskStatus.OVERDUE],
            ]
        )
    )

    assert [index for index, _ in sort_indexed_tasks_by_priority(indexed)] == [2, 1, 0]
