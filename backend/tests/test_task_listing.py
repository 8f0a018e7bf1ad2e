"""Tests for task filtering, sorting, and print rows."""

from datetime import date

import pytest

from hulltrack.schemas.task_instance import PRINT_COLUMNS
from hulltrack.services.task_listing import (
    build_task_query,
    print_rows,
    sort_tasks,
    validate_columns,
)


class TestBuildTaskQuery:
    def test_no_filters(self):
        sql = str(build_task_query())
        assert "WHERE" not in sql
        assert "ORDER BY tasks_per_hull.id" in sql

    def test_station_and_status_use_membership(self):
        sql = str(build_task_query(["LAM Hull", "Final 1"], ["Upcoming"], " 39154 "))
        assert "tasks_per_hull.station IN" in sql
        assert "tasks_per_hull.status IN" in sql
        assert "tasks_per_hull.hull_number =" in sql

    def test_hull_value_is_trimmed(self):
        query = build_task_query(hull_number=" 39154 ")
        params = query.compile().params
        assert "39154" in params.values()


class TestValidateColumns:
    def test_defaults_to_every_column(self):
        assert validate_columns(None) == list(PRINT_COLUMNS)
        assert validate_columns([]) == list(PRINT_COLUMNS)

    def test_keeps_table_order(self):
        assert validate_columns(["status", "hull_number"]) == ["hull_number", "status"]

    def test_unknown_column(self):
        with pytest.raises(ValueError, match="completed_by"):
            validate_columns(["status", "completed_by"])


class TestSortTasks:
    def test_no_sort_keeps_order(self, task_factory):
        tasks = [task_factory.create(), task_factory.create()]
        assert sort_tasks(tasks, None) == tasks

    def test_text_sort_is_case_insensitive(self, task_factory):
        tasks = [
            task_factory.create(task_name="wiring"),
            task_factory.create(task_name="Gelcoat"),
            task_factory.create(task_name="helm"),
        ]
        names = [t.task_name for t in sort_tasks(tasks, "task_name")]
        assert names == ["Gelcoat", "helm", "wiring"]

    def test_nulls_sort_first_ascending_and_last_descending(self, task_factory):
        tasks = [
            task_factory.create(start_date=date(2025, 3, 5)),
            task_factory.create(start_date=None),
            task_factory.create(start_date=date(2025, 3, 1)),
        ]
        ascending = [t.start_date for t in sort_tasks(tasks, "start_date")]
        assert ascending == [None, date(2025, 3, 1), date(2025, 3, 5)]

        descending = [t.start_date for t in sort_tasks(tasks, "start_date", descending=True)]
        assert descending == [date(2025, 3, 5), date(2025, 3, 1), None]

    def test_numbers_sort_numerically(self, task_factory):
        tasks = [task_factory.create(schedule_group=g) for g in (10, 2, None)]
        groups = [t.schedule_group for t in sort_tasks(tasks, "schedule_group")]
        assert groups == [None, 2, 10]

    def test_unknown_sort_column(self, task_factory):
        with pytest.raises(ValueError, match="Cannot sort by"):
            sort_tasks([task_factory.create()], "labor_hours")


class TestPrintRows:
    def test_selected_columns_only(self, task_factory):
        task = task_factory.create(hull_number="39154", task_name="Gelcoat", status="Completed")
        assert print_rows([task], ["hull_number", "status"]) == [["39154", "Completed"]]
