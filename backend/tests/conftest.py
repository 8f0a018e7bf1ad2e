"""Pytest configuration with fixtures for async testing."""

from datetime import date, datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import io

import pytest
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession


# ---------------------------------------------------------------------------
# Test Data Factories (using MagicMock for SQLAlchemy 2.0 compatibility)
# ---------------------------------------------------------------------------


def _make_mock(defaults: dict[str, Any], overrides: dict[str, Any]) -> MagicMock:
    """Create a MagicMock with given attributes."""
    merged = {**defaults, **overrides}
    mock = MagicMock()
    for k, v in merged.items():
        setattr(mock, k, v)
    return mock


class BoatModelFactory:
    """Factory for creating BoatModel instances for testing."""

    _counter = 0

    @classmethod
    def create(cls, **overrides: Any) -> MagicMock:
        cls._counter += 1
        defaults = {
            "id": cls._counter,
            "name": f"{38 + cls._counter}CC",
            "created_at": datetime.now(timezone.utc),
        }
        return _make_mock(defaults, overrides)


class StationFactory:
    """Factory for creating Station instances for testing."""

    _counter = 0

    @classmethod
    def create(cls, **overrides: Any) -> MagicMock:
        cls._counter += 1
        defaults = {
            "id": cls._counter,
            "name": f"Station-{cls._counter}",
            "station_sequence": cls._counter,
            "created_at": datetime.now(timezone.utc),
        }
        return _make_mock(defaults, overrides)


class MasterTaskFactory:
    """Factory for creating MasterTask instances for testing."""

    _counter = 0

    @classmethod
    def create(cls, **overrides: Any) -> MagicMock:
        cls._counter += 1
        defaults = {
            "id": cls._counter,
            "model": 1,
            "station": "LAM Hull",
            "task_name": f"Task {cls._counter}",
            "labor_hours": 2.5,
            "associated_options": None,
            "schedule_group": None,
            "duration_days": 1,
            "created_at": datetime.now(timezone.utc),
        }
        return _make_mock(defaults, overrides)


class BoatOrderFactory:
    """Factory for creating BoatOrder instances for testing."""

    _counter = 0

    @classmethod
    def create(cls, options: list | None = None, **overrides: Any) -> MagicMock:
        cls._counter += 1
        hull_number = f"{39150 + cls._counter}"
        defaults = {
            "id": cls._counter,
            "hull_number": hull_number,
            "revision_date": date(2025, 2, 13),
            "file_name": f"Production Order {hull_number} - Feb. 13, 25.pdf",
            "model": 1,
            "created_at": datetime.now(timezone.utc),
            "options": options or [],
        }
        return _make_mock(defaults, overrides)


class TaskInstanceFactory:
    """Factory for creating TaskInstance (tasks_per_hull) rows for testing."""

    _counter = 0

    @classmethod
    def create(cls, **overrides: Any) -> MagicMock:
        cls._counter += 1
        defaults = {
            "id": cls._counter,
            "hull_number": "39154",
            "model": 1,
            "station": "LAM Hull",
            "task_name": f"Task {cls._counter}",
            "start_date": None,
            "end_date": None,
            "status": "Upcoming",
            "completed_by": None,
            "applicable": True,
            "schedule_group": None,
            "task_data_id": cls._counter,
            "updated_at": datetime.now(timezone.utc),
        }
        return _make_mock(defaults, overrides)


class ScheduleRowFactory:
    """Factory for creating ProductionScheduleRow instances for testing."""

    _counter = 0

    @classmethod
    def create(cls, **overrides: Any) -> MagicMock:
        from hulltrack.models.production_schedule import SCHEDULE_DATE_COLUMNS

        cls._counter += 1
        defaults: dict[str, Any] = {
            "id": cls._counter,
            "slot_number": f"FY26-{cls._counter}",
            "takt": None,
            "boat_model": None,
            "hull_number": None,
            "schedule_from": None,
            "schedule_direction": None,
        }
        defaults.update({column: None for column in SCHEDULE_DATE_COLUMNS})
        return _make_mock(defaults, overrides)


# ---------------------------------------------------------------------------
# Result helpers
# ---------------------------------------------------------------------------


def scalar_result(value: Any) -> MagicMock:
    """Mock execute() result for ``scalar_one_or_none`` / ``scalars().first``."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    result.scalars.return_value.first.return_value = value
    return result


def scalars_result(values: list[Any]) -> MagicMock:
    """Mock execute() result for ``scalars().all()``."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = values
    return result


def rows_result(rows: list[tuple]) -> MagicMock:
    """Mock execute() result for ``all()`` over column tuples."""
    result = MagicMock()
    result.all.return_value = rows
    return result


class DbResultFactory:
    """Builders for mocked ``AsyncSession.execute`` results."""

    scalar = staticmethod(scalar_result)
    scalars = staticmethod(scalars_result)
    rows = staticmethod(rows_result)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def model_factory():
    """Provide BoatModelFactory for tests."""
    BoatModelFactory._counter = 0
    return BoatModelFactory


@pytest.fixture
def station_factory():
    """Provide StationFactory for tests."""
    StationFactory._counter = 0
    return StationFactory


@pytest.fixture
def master_task_factory():
    """Provide MasterTaskFactory for tests."""
    MasterTaskFactory._counter = 0
    return MasterTaskFactory


@pytest.fixture
def boat_order_factory():
    """Provide BoatOrderFactory for tests."""
    BoatOrderFactory._counter = 0
    return BoatOrderFactory


@pytest.fixture
def task_factory():
    """Provide TaskInstanceFactory for tests."""
    TaskInstanceFactory._counter = 0
    return TaskInstanceFactory


@pytest.fixture
def schedule_row_factory():
    """Provide ScheduleRowFactory for tests."""
    ScheduleRowFactory._counter = 0
    return ScheduleRowFactory


@pytest.fixture
def mock_db():
    """Provide a mock AsyncSession for unit tests."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.add_all = MagicMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def db_result():
    """Provide DbResultFactory for building execute() results."""
    return DbResultFactory


@pytest.fixture
def make_upload():
    """Build an in-memory UploadFile from bytes."""

    def _make(data: bytes, filename: str) -> UploadFile:
        return UploadFile(file=io.BytesIO(data), filename=filename)

    return _make
