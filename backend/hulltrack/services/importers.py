"""Row-level parsing for the bulk spreadsheet imports, and their exports.

Every layout is a fixed column order with a single header row. Each data
row becomes either ``RowOk`` (a validated create schema) or ``RowInvalid``
(per-column messages); rows missing their required field are skipped and
counted. Numeric cells are coerced leniently and never produce NaN.
"""

import math
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ValidationError

from hulltrack.schemas.boat_model import BoatOrderHeaderCreate, ModelOptionCreate
from hulltrack.schemas.do_not_show import DoNotShowCreate
from hulltrack.schemas.imports import ImportPreview, ImportResult, ImportRowError
from hulltrack.schemas.schedule_group import ScheduleGroupCreate
from hulltrack.schemas.station import StationCreate
from hulltrack.schemas.task_data import MasterTaskCreate


@dataclass(frozen=True)
class SheetLayout:
    """Column order and file naming for one import/export format."""

    columns: tuple[str, ...]
    sheet_title: str
    file_stem: str

    @property
    def header(self) -> list[str]:
        return list(self.columns)


STATION_LAYOUT = SheetLayout(("name", "station_sequence"), "Stations", "Station_Template")
MODEL_OPTION_LAYOUT = SheetLayout(("option_text",), "Options", "Options_Template")
BOAT_ORDER_HEADER_LAYOUT = SheetLayout(("header_text",), "Headers", "Boat_Order_Headers_Template")
DO_NOT_SHOW_LAYOUT = SheetLayout(("option_text",), "Do Not Show", "Do_Not_Show_Template")
MASTER_TASK_LAYOUT = SheetLayout(
    (
        "model",
        "station",
        "task_name",
        "labor_hours",
        "associated_options",
        "schedule_group",
        "duration_days",
    ),
    "Task Template",
    "Task_Template",
)
SCHEDULE_GROUP_LAYOUT = SheetLayout(
    ("schedule_group", "days_offset", "offset_type", "station"),
    "ScheduleGroups",
    "ScheduleGroupsTemplate",
)

# Postgres INTEGER column range
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


# ---------------------------------------------------------------------------
# Row results
# ---------------------------------------------------------------------------


@dataclass
class RowOk:
    row_number: int
    record: BaseModel


@dataclass
class RowInvalid:
    row_number: int
    errors: dict[str, str]
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def reason(self) -> str:
        return "; ".join(self.errors.values())


@dataclass
class ParsedSheet:
    """All rows of one upload, split by outcome."""

    ok: list[RowOk] = field(default_factory=list)
    invalid: list[RowInvalid] = field(default_factory=list)
    skipped: int = 0

    @property
    def records(self) -> list[BaseModel]:
        return [row.record for row in self.ok]

    def add(self, result: "RowOk | RowInvalid") -> None:
        if isinstance(result, RowOk):
            self.ok.append(result)
        else:
            self.invalid.append(result)

    def row_errors(self) -> list[ImportRowError]:
        return [
            ImportRowError(row_number=row.row_number, errors=row.errors, values=row.values)
            for row in self.invalid
        ]

    def preview(self) -> ImportPreview:
        return ImportPreview(
            records=[row.record.model_dump() for row in self.ok],
            errors=self.row_errors(),
            skipped_rows=self.skipped,
        )

    def result(self, inserted: int) -> ImportResult:
        return ImportResult(inserted=inserted, skipped_rows=self.skipped, errors=self.row_errors())


# ---------------------------------------------------------------------------
# Cell coercion
# ---------------------------------------------------------------------------


def cell_text(value: Any) -> str:
    """Trimmed text of a cell; integral floats lose their ``.0``."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def normalize_name(value: Any) -> str:
    return re.sub(r"\s+", " ", cell_text(value)).strip()


def to_float(value: Any, default: float = 0.0) -> float:
    text = cell_text(value)
    if not text:
        return default
    try:
        number = float(text)
    except ValueError:
        return default
    return number if math.isfinite(number) else default


def to_int(value: Any) -> int | None:
    text = cell_text(value)
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    number = int(number)
    return number if INTEGER_MIN <= number <= INTEGER_MAX else None


def to_id_list(value: Any) -> list[int] | None:
    """Parse ``"3, 7"`` style option id lists; unparseable parts are dropped."""
    text = cell_text(value)
    if not text:
        return None
    ids = [to_int(part) for part in re.split(r"[,;\s]+", text) if part]
    ids = [option_id for option_id in ids if option_id is not None]
    return ids or None


def optional_text(value: Any) -> str | None:
    return cell_text(value) or None


# ---------------------------------------------------------------------------
# Row parsing
# ---------------------------------------------------------------------------


def _data_rows(rows: list[list[Any]]) -> Iterator[tuple[int, list[Any]]]:
    # Row 1 is the header.
    yield from enumerate(rows[1:], start=2)


def _cell(row: list[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _row_values(layout: SheetLayout, row: list[Any]) -> dict[str, Any]:
    return {name: cell_text(_cell(row, index)) for index, name in enumerate(layout.columns)}


def _validation_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"]) or "row"
        errors[key] = error["msg"]
    return errors


def _build(
    schema: type[BaseModel],
    row_number: int,
    values: dict[str, Any],
    **fields: Any,
) -> RowOk | RowInvalid:
    try:
        return RowOk(row_number=row_number, record=schema(**fields))
    except ValidationError as exc:
        return RowInvalid(row_number=row_number, errors=_validation_errors(exc), values=values)


def parse_station_rows(rows: list[list[Any]]) -> ParsedSheet:
    sheet = ParsedSheet()
    for row_number, row in _data_rows(rows):
        name = cell_text(_cell(row, 0))
        if not name:
            sheet.skipped += 1
            continue
        sheet.add(
            _build(
                StationCreate,
                row_number,
                _row_values(STATION_LAYOUT, row),
                name=name,
                station_sequence=to_int(_cell(row, 1)),
            )
        )
    return sheet


def _parse_single_text_rows(
    rows: list[list[Any]],
    layout: SheetLayout,
    schema: type[BaseModel],
) -> ParsedSheet:
    column = layout.columns[0]
    sheet = ParsedSheet()
    for row_number, row in _data_rows(rows):
        text = cell_text(_cell(row, 0))
        if not text:
            sheet.skipped += 1
            continue
        sheet.add(_build(schema, row_number, {column: text}, **{column: text}))
    return sheet


def parse_model_option_rows(rows: list[list[Any]]) -> ParsedSheet:
    return _parse_single_text_rows(rows, MODEL_OPTION_LAYOUT, ModelOptionCreate)


def parse_boat_order_header_rows(rows: list[list[Any]]) -> ParsedSheet:
    return _parse_single_text_rows(rows, BOAT_ORDER_HEADER_LAYOUT, BoatOrderHeaderCreate)


def parse_do_not_show_rows(rows: list[list[Any]]) -> ParsedSheet:
    return _parse_single_text_rows(rows, DO_NOT_SHOW_LAYOUT, DoNotShowCreate)


def parse_schedule_group_rows(rows: list[list[Any]]) -> ParsedSheet:
    sheet = ParsedSheet()
    for row_number, row in _data_rows(rows):
        name = cell_text(_cell(row, 0))
        if not name:
            sheet.skipped += 1
            continue
        sheet.add(
            _build(
                ScheduleGroupCreate,
                row_number,
                _row_values(SCHEDULE_GROUP_LAYOUT, row),
                schedule_group=name,
                days_offset=to_int(_cell(row, 1)),
                offset_type=optional_text(_cell(row, 2)),
                station=optional_text(_cell(row, 3)),
            )
        )
    return sheet


def parse_master_task_rows(
    rows: list[list[Any]],
    model_ids: dict[str, int],
    station_names: Iterable[str],
) -> ParsedSheet:
    """Parse task rows, checking model and station names against the catalog.

    ``model_ids`` maps model name to id. Names are compared after trimming
    and collapsing inner whitespace; case is significant.
    """
    models = {normalize_name(name): model_id for name, model_id in model_ids.items()}
    stations = {normalize_name(name) for name in station_names}

    sheet = ParsedSheet()
    for row_number, row in _data_rows(rows):
        task_name = cell_text(_cell(row, 2))
        if not task_name:
            sheet.skipped += 1
            continue

        values = _row_values(MASTER_TASK_LAYOUT, row)
        model_name = normalize_name(_cell(row, 0))
        station_name = normalize_name(_cell(row, 1))

        errors: dict[str, str] = {}
        if station_name not in stations:
            errors["station"] = f'Station "{station_name}" not found.'
        if model_name not in models:
            errors["model"] = f'Model "{model_name}" not found.'
        if errors:
            sheet.add(RowInvalid(row_number=row_number, errors=errors, values=values))
            continue

        sheet.add(
            _build(
                MasterTaskCreate,
                row_number,
                values,
                model=models[model_name],
                station=station_name,
                task_name=task_name,
                labor_hours=to_float(_cell(row, 3)),
                associated_options=to_id_list(_cell(row, 4)),
                schedule_group=to_int(_cell(row, 5)),
                duration_days=to_int(_cell(row, 6)),
            )
        )
    return sheet


# ---------------------------------------------------------------------------
# Export rows (same column order as the matching import)
# ---------------------------------------------------------------------------


def station_export_rows(stations: Iterable[Any]) -> list[list[Any]]:
    return [[station.name, station.station_sequence] for station in stations]


def text_export_rows(items: Iterable[Any], attribute: str) -> list[list[Any]]:
    return [[getattr(item, attribute)] for item in items]


def schedule_group_export_rows(groups: Iterable[Any]) -> list[list[Any]]:
    return [
        [group.schedule_group, group.days_offset, group.offset_type, group.station]
        for group in groups
    ]


def master_task_export_rows(
    tasks: Iterable[Any],
    model_names: dict[int, str],
) -> list[list[Any]]:
    format_ids: Callable[[list[int] | None], str | None] = (
        lambda ids: ", ".join(str(option_id) for option_id in ids) if ids else None
    )
    return [
        [
            model_names.get(task.model, str(task.model)),
            task.station,
            task.task_name,
            task.labor_hours,
            format_ids(task.associated_options),
            task.schedule_group,
            task.duration_days,
        ]
        for task in tasks
    ]
