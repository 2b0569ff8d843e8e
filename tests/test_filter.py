# tests/test_filter.py

from __future__ import annotations

import pendulum
import pytest
import typer

from arenta.model.filter import TaskFilter
from arenta.model.task import TaskStatus
from arenta.query.filter import filter_tasks, satisfy
from arenta.query.filter_type import ComparisonOperator
from arenta.terminal.parse import parse_date, parse_date_filter

TODAY = pendulum.date(2024, 3, 1)


def _filter(
    operator: ComparisonOperator,
    reference_date: pendulum.Date = TODAY,
    include_backlog: bool = False,
) -> TaskFilter:
    return {
        "operator": operator,
        "reference_date": reference_date,
        "include_backlog": include_backlog,
        "verbose": False,
    }


class TestSatisfy:
    def test_backlog_task_only_on_request(self, at, make_task):
        task = make_task(now=at(9))

        assert not satisfy(task, _filter(ComparisonOperator.EQ))
        assert satisfy(task, _filter(ComparisonOperator.EQ, include_backlog=True))

    @pytest.mark.parametrize(
        ("operator", "reference_date", "expected"),
        [
            (ComparisonOperator.EQ, pendulum.date(2024, 3, 1), True),
            (ComparisonOperator.EQ, pendulum.date(2024, 3, 2), False),
            (ComparisonOperator.LT, pendulum.date(2024, 3, 1), False),
            (ComparisonOperator.LT, pendulum.date(2024, 3, 2), True),
            (ComparisonOperator.LE, pendulum.date(2024, 3, 1), True),
            (ComparisonOperator.GT, pendulum.date(2024, 2, 29), True),
            (ComparisonOperator.GE, pendulum.date(2024, 3, 2), False),
        ],
    )
    def test_planned_task_compares_by_local_date(
        self, at, make_task, operator, reference_date, expected
    ):
        task = make_task(planned_start=at(10), planned_complete=at(11), now=at(9))

        assert satisfy(task, _filter(operator, reference_date)) is expected

    def test_any_timestamp_may_match(self, at, make_task):
        task = make_task(
            planned_start=at(10),
            planned_complete=at(11),
            actual_start=at(9, day=3),
            now=at(12, day=3),
        )

        assert satisfy(task, _filter(ComparisonOperator.EQ, pendulum.date(2024, 3, 3)))

    def test_stale_task_without_timestamps_never_matches(self, make_task):
        task = make_task()
        task["status"] = TaskStatus.ONGOING

        assert not satisfy(task, _filter(ComparisonOperator.GE, include_backlog=True))

    def test_filter_tasks_keeps_collection_index(self, at, make_task):
        tasks = [
            make_task("backlog", now=at(9)),
            make_task("today", actual_start=at(8), now=at(9)),
            make_task(
                "yesterday",
                actual_start=pendulum.datetime(2024, 2, 29, 8, tz="local"),
                now=at(9),
            ),
        ]

        filtered = filter_tasks(tasks, _filter(ComparisonOperator.GE))

        assert [index for index, _ in filtered] == [1]


class TestParseDateFilter:
    def test_bare_number_selects_recent_days(self):
        assert parse_date_filter("3", TODAY) == (
            ComparisonOperator.GE,
            pendulum.date(2024, 2, 27),
        )

    def test_operator_defaults_to_equal(self):
        assert parse_date_filter("today", TODAY) == (ComparisonOperator.EQ, TODAY)

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            (">=2024-02-01", (ComparisonOperator.GE, pendulum.date(2024, 2, 1))),
            ("< yesterday", (ComparisonOperator.LT, pendulum.date(2024, 2, 29))),
            ("<=o", (ComparisonOperator.LE, pendulum.date(2024, 3, 2))),
            (">-7", (ComparisonOperator.GT, pendulum.date(2024, 2, 23))),
            ("=-1", (ComparisonOperator.EQ, pendulum.date(2024, 2, 29))),
        ],
    )
    def test_operator_and_date(self, expression, expected):
        assert parse_date_filter(expression, TODAY) == expected

    @pytest.mark.parametrize("expression", ["someday", "<=", "2024-13-01", ">> today"])
    def test_invalid_expression(self, expression):
        with pytest.raises(typer.BadParameter):
            parse_date_filter(expression, TODAY)

    def test_parse_date_none(self):
        assert parse_date(None, TODAY) is None
