"""Filtering, ordering and print rows for per-hull task lists."""

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from sqlalchemy import Select, select

from hulltrack.models.task_instance import TaskInstance
from hulltrack.schemas.task_instance import PRINT_COLUMNS


def build_task_query(
    stations: Sequence[str] | None = None,
    statuses: Sequence[str] | None = None,
    hull_number: str | None = None,
) -> Select:
    """Tasks matching any of ``stations``, any of ``statuses`` and the hull."""
    query = select(TaskInstance)
    if stations:
        query = query.where(TaskInstance.station.in_(list(stations)))
    if statuses:
        query = query.where(TaskInstance.status.in_(list(statuses)))
    if hull_number:
        query = query.where(TaskInstance.hull_number == hull_number.strip())
    return query.order_by(TaskInstance.id)


def validate_columns(columns: Sequence[str] | None) -> list[str]:
    """Selected print columns in table order; all of them when none are given."""
    if not columns:
        return list(PRINT_COLUMNS)
    unknown = [column for column in columns if column not in PRINT_COLUMNS]
    if unknown:
        raise ValueError(f"Unknown column(s): {', '.join(unknown)}")
    return [column for column in PRINT_COLUMNS if column in columns]


def _sort_key(value: Any) -> tuple:
    # Nulls sort as the empty string, ahead of everything else.
    if value is None or value == "":
        return (-1, "")
    if isinstance(value, bool):
        return (1, 0, str(value).casefold())
    if isinstance(value, (int, float)):
        return (0, value)
    if isinstance(value, date):
        return (1, 0, value.isoformat())
    return (1, 0, str(value).casefold())


def sort_tasks(
    tasks: Iterable[TaskInstance],
    sort_by: str | None,
    descending: bool = False,
) -> list[TaskInstance]:
    tasks = list(tasks)
    if not sort_by:
        return tasks
    if sort_by not in PRINT_COLUMNS:
        raise ValueError(f"Cannot sort by {sort_by}")
    return sorted(tasks, key=lambda task: _sort_key(getattr(task, sort_by)), reverse=descending)


def print_rows(tasks: Iterable[TaskInstance], columns: Sequence[str]) -> list[list[Any]]:
    return [[getattr(task, column) for column in columns] for task in tasks]
