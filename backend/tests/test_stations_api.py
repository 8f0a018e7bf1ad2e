"""Tests for Stations CRUD API endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException

from hulltrack.api.v1.stations import (
    create_station,
    delete_station,
    export_stations,
    get_station,
    import_stations,
    list_stations,
    reorder_stations,
    stations_template,
    update_station,
)
from hulltrack.models.station import Station
from hulltrack.schemas.station import StationCreate, StationReorder
from hulltrack.services.spreadsheets import read_rows


@pytest.fixture
def station_payload():
    return StationCreate(name="  LAM Hull ", station_sequence=2)


class TestListStations:
    @pytest.mark.asyncio
    async def test_list_returns_stations(self, mock_db, station_factory, db_result):
        stations = [station_factory.create(), station_factory.create()]
        mock_db.execute = AsyncMock(return_value=db_result.scalars(stations))

        result = await list_stations(db=mock_db)

        assert result == stations
        sql = str(mock_db.execute.await_args.args[0])
        assert "ORDER BY stations.station_sequence ASC NULLS LAST, stations.name" in sql


class TestCreateStation:
    @pytest.mark.asyncio
    async def test_create_success(self, mock_db, station_payload, db_result):
        mock_db.execute = AsyncMock(return_value=db_result.scalar(None))

        result = await create_station(payload=station_payload, db=mock_db)

        assert isinstance(result, Station)
        assert result.name == "LAM Hull"
        assert result.station_sequence == 2
        mock_db.add.assert_called_once()
        mock_db.flush.assert_awaited_once()
        mock_db.refresh.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, mock_db, station_payload, station_factory, db_result):
        mock_db.execute = AsyncMock(return_value=db_result.scalar(station_factory.create()))

        with pytest.raises(HTTPException) as exc_info:
            await create_station(payload=station_payload, db=mock_db)
        assert exc_info.value.status_code == 409
        mock_db.add.assert_not_called()


class TestGetStation:
    @pytest.mark.asyncio
    async def test_get_found(self, mock_db, station_factory, db_result):
        station = station_factory.create()
        mock_db.execute = AsyncMock(return_value=db_result.scalar(station))

        assert await get_station(station_id=station.id, db=mock_db) == station

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_db, db_result):
        mock_db.execute = AsyncMock(return_value=db_result.scalar(None))

        with pytest.raises(HTTPException) as exc_info:
            await get_station(station_id=999, db=mock_db)
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Station not found"


class TestUpdateStation:
    @pytest.mark.asyncio
    async def test_update_fields(self, mock_db, station_factory, db_result):
        station = station_factory.create(name="Old", station_sequence=1)
        mock_db.execute = AsyncMock(return_value=db_result.scalar(station))

        result = await update_station(
            station_id=station.id, payload=StationCreate(name="Final 1", station_sequence=13), db=mock_db
        )

        assert result.name == "Final 1"
        assert result.station_sequence == 13


class TestDeleteStation:
    @pytest.mark.asyncio
    async def test_delete(self, mock_db, station_factory, db_result):
        station = station_factory.create()
        mock_db.execute = AsyncMock(return_value=db_result.scalar(station))

        await delete_station(station_id=station.id, db=mock_db)
        mock_db.delete.assert_awaited_once_with(station)


class TestReorderStations:
    @pytest.mark.asyncio
    async def test_renumbers_in_given_order(self, mock_db, station_factory, db_result):
        a = station_factory.create(id=1, station_sequence=1)
        b = station_factory.create(id=2, station_sequence=2)
        c = station_factory.create(id=3, station_sequence=None)
        mock_db.execute = AsyncMock(return_value=db_result.scalars([a, b, c]))

        result = await reorder_stations(payload=StationReorder(station_ids=[3, 1, 2]), db=mock_db)

        assert result == [c, a, b]
        assert (c.station_sequence, a.station_sequence, b.station_sequence) == (1, 2, 3)
        mock_db.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_id(self, mock_db, station_factory, db_result):
        mock_db.execute = AsyncMock(return_value=db_result.scalars([station_factory.create(id=1)]))

        with pytest.raises(HTTPException) as exc_info:
            await reorder_stations(payload=StationReorder(station_ids=[1, 8]), db=mock_db)
        assert exc_info.value.status_code == 404
        assert "8" in exc_info.value.detail

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate station ids: 1"):
            StationReorder(station_ids=[1, 1, 2])


class TestImportStations:
    @pytest.mark.asyncio
    async def test_existing_names_reported(self, mock_db, db_result, make_upload):
        mock_db.execute = AsyncMock(return_value=db_result.scalars(["LAM Hull"]))
        upload = make_upload(b"name,station_sequence\nLAM Hull,1\nFinal 1,13\nFinal 1,14\n,\n", "s.csv")

        result = await import_stations(file=upload, db=mock_db)

        added = mock_db.add_all.call_args.args[0]
        assert [station.name for station in added] == ["Final 1"]
        assert result.inserted == 1
        assert result.skipped_rows == 1
        assert [error.row_number for error in result.errors] == [2, 4]
        assert "already exists" in result.errors[0].errors["name"]

    @pytest.mark.asyncio
    async def test_empty_upload(self, mock_db, make_upload):
        with pytest.raises(HTTPException) as exc_info:
            await import_stations(file=make_upload(b"", "s.xlsx"), db=mock_db)
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unsupported_upload(self, mock_db, make_upload):
        with pytest.raises(HTTPException) as exc_info:
            await import_stations(file=make_upload(b"data", "s.xls"), db=mock_db)
        assert exc_info.value.status_code == 400
        assert "Unsupported file type" in exc_info.value.detail


class TestExportStations:
    @pytest.mark.asyncio
    async def test_export_lists_stations(self, mock_db, station_factory, db_result):
        stations = [
            station_factory.create(name="LAM Hull", station_sequence=1),
            station_factory.create(name="Shipment", station_sequence=None),
        ]
        mock_db.execute = AsyncMock(return_value=db_result.scalars(stations))

        response = await export_stations(fmt="xlsx", db=mock_db)

        assert 'filename="Stations.xlsx"' in response.headers["content-disposition"]
        assert read_rows(response.body, "Stations.xlsx") == [
            ["name", "station_sequence"],
            ["LAM Hull", 1],
            ["Shipment", None],
        ]

    @pytest.mark.asyncio
    async def test_template_has_header_only(self):
        response = await stations_template(fmt="csv")

        assert response.body.decode("utf-8").splitlines() == ["name,station_sequence"]
        assert "Station_Template.csv" in response.headers["content-disposition"]
