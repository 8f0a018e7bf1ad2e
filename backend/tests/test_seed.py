"""Tests for demo seed data and table checks."""

from unittest.mock import AsyncMock

import pytest

from hulltrack.db.init_db import table_has_data
from hulltrack.db.seed import (
    DEMO_HEADERS,
    DEMO_MODEL_NAME,
    DEMO_TASKS,
    _create_holidays,
    _create_master_tasks,
    _create_schedule_groups,
    _create_stations,
    seed_demo_data,
    seed_if_empty,
)
from hulltrack.models.boat_model import BoatModel
from hulltrack.models.production_schedule import SCHEDULE_STATIONS
from hulltrack.services.filename_parser import parse_order_filename


class TestSeedBuilders:
    def test_stations_follow_line_order(self):
        stations = _create_stations()
        assert [s.name for s in stations] == [label for label, _ in SCHEDULE_STATIONS]
        assert [s.station_sequence for s in stations] == list(range(1, len(SCHEDULE_STATIONS) + 1))

    def test_master_task_stations_exist(self):
        names = {s.name for s in _create_stations()}
        assert all(task.station in names for task in _create_master_tasks(1))

    def test_master_tasks_belong_to_model(self):
        tasks = _create_master_tasks(5)
        assert len(tasks) == len(DEMO_TASKS)
        assert all(task.model == 5 for task in tasks)

    def test_holidays_for_requested_year(self):
        holidays = _create_holidays(2027)
        assert all(h.holiday_date.year == 2027 for h in holidays)
        assert len({h.holiday_date for h in holidays}) == len(holidays)

    def test_schedule_groups_named(self):
        assert all(g.schedule_group for g in _create_schedule_groups())

    def test_demo_model_matches_demo_hull_prefix(self):
        hull_number, _ = parse_order_filename("Production Order 39154 - Feb. 13, 25.pdf")
        assert DEMO_MODEL_NAME.startswith(hull_number[:2])


class TestSeedDemoData:
    @pytest.mark.asyncio
    async def test_counts_and_model_link(self, mock_db):
        added = []
        mock_db.add.side_effect = added.append
        mock_db.add_all.side_effect = added.extend

        async def _assign_ids():
            for obj in added:
                if isinstance(obj, BoatModel) and obj.id is None:
                    obj.id = 11

        mock_db.flush = AsyncMock(side_effect=_assign_ids)

        counts = await seed_demo_data(mock_db, year=2026)

        assert counts["stations"] == len(SCHEDULE_STATIONS)
        assert counts["task_data"] == len(DEMO_TASKS)
        assert counts["boat_order_headers"] == len(DEMO_HEADERS)
        assert counts["models"] == 1
        headers = [obj for obj in added if getattr(obj, "header_text", None)]
        assert {h.model_id for h in headers} == {11}

    @pytest.mark.asyncio
    async def test_seed_if_empty_skips_populated_database(self, mock_db, db_result):
        mock_db.run_sync = AsyncMock(return_value={"stations"})
        result = db_result.scalar(None)
        result.scalar.return_value = True
        mock_db.execute = AsyncMock(return_value=result)

        assert await seed_if_empty(mock_db) is None
        mock_db.add_all.assert_not_called()


class TestTableHasData:
    @pytest.mark.asyncio
    async def test_unknown_table_rejected(self, mock_db):
        mock_db.run_sync = AsyncMock(return_value={"stations", "models"})

        with pytest.raises(ValueError, match="Unknown table"):
            await table_has_data(mock_db, "stations; DROP TABLE models")
        mock_db.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_table(self, mock_db, db_result):
        mock_db.run_sync = AsyncMock(return_value={"stations"})
        result = db_result.scalar(None)
        result.scalar.return_value = None
        mock_db.execute = AsyncMock(return_value=result)

        assert await table_has_data(mock_db, "stations") is False
