"""Demo data for a fresh database.

Seeds the production line stations in order, one boat model with a few
master tasks and order headers, schedule groups, and the year's company
holidays, so an uploaded ``Production Order 39xxx`` file expands into tasks
out of the box.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.db.init_db import table_has_data
from hulltrack.models.boat_model import BoatModel, BoatOrderHeader
from hulltrack.models.do_not_show import DoNotShowOption
from hulltrack.models.holiday import CompanyHoliday
from hulltrack.models.production_schedule import SCHEDULE_STATIONS
from hulltrack.models.schedule_group import ScheduleGroup
from hulltrack.models.station import Station
from hulltrack.models.task_data import MasterTask

DEMO_MODEL_NAME = "39CC"

# (station, task name, labor hours, duration days)
DEMO_TASKS: list[tuple[str, str, float, int | None]] = [
    ("LAM Grid", "Lay up stringer grid", 14.0, 2),
    ("LAM Hull", "Spray gelcoat and laminate hull", 36.5, 3),
    ("LAM Deck", "Laminate deck and core", 28.0, 3),
    ("T&G Hull", "Trim and grind hull flanges", 6.0, 1),
    ("P&D Hull", "Patch and detail hull", 10.0, 1),
    ("Open Hull 1", "Install fuel tanks", 8.0, 1),
    ("Open Hull 1", "Run main wiring harness", 12.0, 2),
    ("Final 1", "Install helm console", 9.5, 1),
    ("Final 3", "Final inspection", 4.0, None),
    ("Comm.", "Sea trial and commissioning", 6.0, 1),
]

DEMO_HEADERS = ["STANDARD FEATURES", "OPTIONS", "ELECTRONICS", "ENGINES"]

DEMO_DO_NOT_SHOW = ["Page 1 of 2", "Page 2 of 2", "Dealer Copy"]


def _create_stations() -> list[Station]:
    return [
        Station(name=label, station_sequence=sequence)
        for sequence, (label, _) in enumerate(SCHEDULE_STATIONS, start=1)
    ]


def _create_schedule_groups() -> list[ScheduleGroup]:
    return [
        ScheduleGroup(schedule_group="Lamination", days_offset=0, offset_type="Start", station="LAM Hull"),
        ScheduleGroup(schedule_group="Rigging", days_offset=2, offset_type="After", station="Open Hull 1"),
        ScheduleGroup(schedule_group="Delivery", days_offset=-1, offset_type="Before", station="Shipment"),
    ]


def _create_holidays(year: int) -> list[CompanyHoliday]:
    return [
        CompanyHoliday(holiday_name="New Year's Day", holiday_date=date(year, 1, 1)),
        CompanyHoliday(holiday_name="Independence Day", holiday_date=date(year, 7, 4)),
        CompanyHoliday(holiday_name="Christmas Eve", holiday_date=date(year, 12, 24)),
        CompanyHoliday(holiday_name="Christmas Day", holiday_date=date(year, 12, 25)),
    ]


def _create_master_tasks(model_id: int) -> list[MasterTask]:
    return [
        MasterTask(
            model=model_id,
            station=station,
            task_name=task_name,
            labor_hours=labor_hours,
            duration_days=duration_days,
        )
        for station, task_name, labor_hours, duration_days in DEMO_TASKS
    ]


async def seed_demo_data(session: AsyncSession, year: int | None = None) -> dict[str, int]:
    """Insert the demo catalog and return counts of created rows."""
    year = year or date.today().year

    stations = _create_stations()
    groups = _create_schedule_groups()
    holidays = _create_holidays(year)
    hidden = [DoNotShowOption(option_text=text) for text in DEMO_DO_NOT_SHOW]
    model = BoatModel(name=DEMO_MODEL_NAME)

    session.add_all(stations)
    session.add_all(groups)
    session.add_all(holidays)
    session.add_all(hidden)
    session.add(model)
    await session.flush()

    tasks = _create_master_tasks(model.id)
    headers = [BoatOrderHeader(model_id=model.id, header_text=text) for text in DEMO_HEADERS]
    session.add_all(tasks)
    session.add_all(headers)
    await session.flush()

    return {
        "stations": len(stations),
        "schedule_groups": len(groups),
        "company_holidays": len(holidays),
        "do_not_show_options": len(hidden),
        "models": 1,
        "task_data": len(tasks),
        "boat_order_headers": len(headers),
    }


async def seed_if_empty(session: AsyncSession) -> dict[str, int] | None:
    """Seed demo data only if no stations exist yet.

    Returns:
        Seed counts if data was seeded, None if database already has data.
    """
    if await table_has_data(session, "stations"):
        return None
    return await seed_demo_data(session)
