"""Tests for the holiday, do-not-show, and schedule group endpoints."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import HTTPException

from hulltrack.api.v1.do_not_show import (
    create_do_not_show,
    delete_do_not_show,
    export_do_not_show,
    import_do_not_show,
    update_do_not_show,
)
from hulltrack.api.v1.holidays import (
    create_holiday,
    delete_holiday,
    get_holiday,
    list_holidays,
    update_holiday,
)
from hulltrack.api.v1.schedule_groups import (
    bulk_delete_schedule_groups,
    create_schedule_group,
    export_schedule_groups,
    import_schedule_groups,
    update_schedule_group,
)
from hulltrack.models.do_not_show import DoNotShowOption
from hulltrack.models.holiday import CompanyHoliday
from hulltrack.models.schedule_group import ScheduleGroup
from hulltrack.schemas.do_not_show import DoNotShowCreate
from hulltrack.schemas.holiday import CompanyHolidayCreate
from hulltrack.schemas.schedule_group import BulkDelete, ScheduleGroupCreate
from hulltrack.services.spreadsheets import read_rows


def _row(**attrs):
    row = MagicMock()
    for key, value in attrs.items():
        setattr(row, key, value)
    return row


class TestHolidays:
    @pytest.mark.asyncio
    async def test_list_within_range(self, mock_db, db_result):
        mock_db.execute = AsyncMock(return_value=db_result.scalars([]))

        await list_holidays(date_from=date(2025, 1, 1), date_to=date(2025, 12, 31), db=mock_db)

        sql = str(mock_db.execute.await_args.args[0])
        assert "company_holidays.holiday_date >=" in sql
        assert "company_holidays.holiday_date <=" in sql
        assert "ORDER BY company_holidays.holiday_date" in sql

    @pytest.mark.asyncio
    async def test_create(self, mock_db):
        payload = CompanyHolidayCreate(holiday_name=" Independence Day ", holiday_date=date(2025, 7, 4))

        result = await create_holiday(payload=payload, db=mock_db)

        assert isinstance(result, CompanyHoliday)
        assert result.holiday_name == "Independence Day"
        assert result.holiday_date == date(2025, 7, 4)

    @pytest.mark.asyncio
    async def test_update(self, mock_db, db_result):
        holiday = _row(id=1, holiday_name="Xmas", holiday_date=date(2025, 12, 25))
        mock_db.execute = AsyncMock(return_value=db_result.scalar(holiday))

        result = await update_holiday(
            holiday_id=1,
            payload=CompanyHolidayCreate(holiday_name="Christmas", holiday_date=date(2025, 12, 25)),
            db=mock_db,
        )
        assert result.holiday_name == "Christmas"

    @pytest.mark.asyncio
    async def test_get_missing(self, mock_db, db_result):
        mock_db.execute = AsyncMock(return_value=db_result.scalar(None))

        with pytest.raises(HTTPException) as exc_info:
            await get_holiday(holiday_id=3, db=mock_db)
        assert exc_info.value.detail == "Holiday not found"

    @pytest.mark.asyncio
    async def test_delete(self, mock_db, db_result):
        holiday = _row(id=1)
        mock_db.execute = AsyncMock(return_value=db_result.scalar(holiday))

        await delete_holiday(holiday_id=1, db=mock_db)
        mock_db.delete.assert_awaited_once_with(holiday)


class TestDoNotShow:
    @pytest.mark.asyncio
    async def test_create(self, mock_db):
        result = await create_do_not_show(payload=DoNotShowCreate(option_text="Page 1 of 2"), db=mock_db)

        assert isinstance(result, DoNotShowOption)
        assert result.option_text == "Page 1 of 2"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, mock_db, db_result):
        option = _row(id=4, option_text="Dealer")
        mock_db.execute = AsyncMock(return_value=db_result.scalar(option))

        result = await update_do_not_show(
            option_id=4, payload=DoNotShowCreate(option_text="Dealer Copy"), db=mock_db
        )
        assert result.option_text == "Dealer Copy"

        await delete_do_not_show(option_id=4, db=mock_db)
        mock_db.delete.assert_awaited_once_with(option)

    @pytest.mark.asyncio
    async def test_import_skips_blank_rows(self, mock_db, make_upload):
        upload = make_upload(b"option_text\nPage 1 of 2\n\nDealer Copy\n", "dns.csv")

        result = await import_do_not_show(file=upload, db=mock_db)

        added = mock_db.add_all.call_args.args[0]
        assert [o.option_text for o in added] == ["Page 1 of 2", "Dealer Copy"]
        assert result.inserted == 2
        assert result.skipped_rows == 1

    @pytest.mark.asyncio
    async def test_export(self, mock_db, db_result):
        mock_db.execute = AsyncMock(
            return_value=db_result.scalars([_row(id=1, option_text="Dealer Copy")])
        )

        response = await export_do_not_show(fmt="csv", db=mock_db)

        assert 'filename="Do_Not_Show.csv"' in response.headers["content-disposition"]
        assert read_rows(response.body, "dns.csv") == [["option_text"], ["Dealer Copy"]]


class TestScheduleGroups:
    @pytest.mark.asyncio
    async def test_create(self, mock_db):
        payload = ScheduleGroupCreate(
            schedule_group="Rigging", days_offset=2, offset_type="After", station="Open Hull 1"
        )

        result = await create_schedule_group(payload=payload, db=mock_db)

        assert isinstance(result, ScheduleGroup)
        assert result.days_offset == 2

    @pytest.mark.asyncio
    async def test_update(self, mock_db, db_result):
        group = _row(id=1, schedule_group="Rigging", days_offset=1, offset_type=None, station=None)
        mock_db.execute = AsyncMock(return_value=db_result.scalar(group))

        result = await update_schedule_group(
            group_id=1,
            payload=ScheduleGroupCreate(schedule_group="Rigging", days_offset=-1),
            db=mock_db,
        )
        assert result.days_offset == -1

    @pytest.mark.asyncio
    async def test_bulk_delete(self, mock_db):
        mock_db.execute = AsyncMock(return_value=MagicMock(rowcount=2))

        result = await bulk_delete_schedule_groups(payload=BulkDelete(ids=[1, 2, 99]), db=mock_db)

        assert result == {"deleted": 2}
        sql = str(mock_db.execute.await_args.args[0])
        assert sql.startswith("DELETE FROM schedule_groups")
        assert "schedule_groups.id IN" in sql

    def test_bulk_delete_requires_ids(self):
        with pytest.raises(ValueError):
            BulkDelete(ids=[])

    @pytest.mark.asyncio
    async def test_import(self, mock_db, make_upload):
        upload = make_upload(
            b"schedule_group,days_offset,offset_type,station\nRigging,2,After,Open Hull 1\n,,,\n",
            "groups.csv",
        )

        result = await import_schedule_groups(file=upload, db=mock_db)

        added = mock_db.add_all.call_args.args[0]
        assert [(g.schedule_group, g.days_offset) for g in added] == [("Rigging", 2)]
        assert result.inserted == 1
        assert result.skipped_rows == 1

    @pytest.mark.asyncio
    async def test_export(self, mock_db, db_result):
        group = _row(id=1, schedule_group="Rigging", days_offset=2, offset_type="After", station="X")
        mock_db.execute = AsyncMock(return_value=db_result.scalars([group]))

        response = await export_schedule_groups(fmt="xlsx", db=mock_db)

        assert read_rows(response.body, "g.xlsx")[1] == ["Rigging", 2, "After", "X"]
