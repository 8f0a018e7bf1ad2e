"""Station date computation for the production schedule.

Starting from one station, each station further along the walk direction
is placed TAKT calendar days after (or before) the previous one. Dates that
land on a company holiday slide one day at a time in the walk direction.
Weekends are working days here.
"""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from hulltrack.models.production_schedule import SCHEDULE_STATIONS, ProductionScheduleRow
from hulltrack.schemas.production_schedule import AutoScheduleRequest

logger = logging.getLogger(__name__)

STATION_LABELS: tuple[str, ...] = tuple(label for label, _ in SCHEDULE_STATIONS)
COLUMN_BY_LABEL: dict[str, str] = dict(SCHEDULE_STATIONS)
DATE_RANGE_EXCEEDED = "Schedule runs past the supported date range"


class AutoScheduleError(Exception):
    """Raised when auto-schedule parameters are unusable."""


def skip_holidays(day: date, step: int, holidays: set[date]) -> date:
    """Move ``day`` by ``step`` days until it is not a holiday."""
    try:
        while day in holidays:
            day += timedelta(days=step)
    except OverflowError as exc:
        raise AutoScheduleError(DATE_RANGE_EXCEEDED) from exc
    return day


def compute_station_dates(
    start_station: str,
    start_date: date,
    direction: str,
    takt: int,
    holidays: Iterable[date] = (),
) -> dict[str, date]:
    """Return ``{date column: date}`` for the start station and every station
    after it in the walk direction. Stations behind the start are absent.
    """
    if start_station not in COLUMN_BY_LABEL:
        raise AutoScheduleError(f"Unknown schedule station: {start_station}")
    if takt <= 0:
        raise AutoScheduleError("TAKT must be a positive number of days")
    if direction not in ("Forward", "Backwards"):
        raise AutoScheduleError(f"Unknown schedule direction: {direction}")

    step = 1 if direction == "Forward" else -1
    holiday_set = set(holidays)

    index = STATION_LABELS.index(start_station)
    current = skip_holidays(start_date, step, holiday_set)
    dates = {COLUMN_BY_LABEL[start_station]: current}

    index += step
    while 0 <= index < len(STATION_LABELS):
        try:
            current += timedelta(days=takt * step)
        except OverflowError as exc:
            raise AutoScheduleError(DATE_RANGE_EXCEEDED) from exc
        current = skip_holidays(current, step, holiday_set)
        dates[COLUMN_BY_LABEL[STATION_LABELS[index]]] = current
        index += step
    return dates


def apply_auto_schedule(
    row: ProductionScheduleRow,
    request: AutoScheduleRequest,
    holidays: Iterable[date],
) -> dict[str, date]:
    """Write computed dates and the scheduling parameters onto ``row``."""
    dates = compute_station_dates(
        request.schedule_from,
        request.start_date,
        request.direction,
        request.takt,
        holidays,
    )
    for column, value in dates.items():
        setattr(row, column, value)

    row.takt = request.takt
    row.schedule_from = request.schedule_from
    row.schedule_direction = request.direction
    if request.slot_number:
        row.slot_number = request.slot_number
    if request.boat_model is not None:
        row.boat_model = request.boat_model
    if request.hull_number:
        row.hull_number = request.hull_number

    logger.info(
        "Auto-scheduled slot %s from %s (%s, takt %d): %d stations",
        row.slot_number,
        request.schedule_from,
        request.direction,
        request.takt,
        len(dates),
    )
    return dates
