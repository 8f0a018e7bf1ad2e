"""Pydantic v2 schemas for request/response validation."""

from hulltrack.schemas.boat_model import (
    BoatModelCreate,
    BoatModelResponse,
    BoatOrderHeaderCreate,
    BoatOrderHeaderResponse,
    ModelOptionCreate,
    ModelOptionResponse,
)
from hulltrack.schemas.boat_order import (
    BoatOrderDetail,
    BoatOrderOptionResponse,
    BoatOrderResponse,
    IngestionResult,
    PdfUrlResponse,
)
from hulltrack.schemas.do_not_show import DoNotShowCreate, DoNotShowResponse
from hulltrack.schemas.holiday import CompanyHolidayCreate, CompanyHolidayResponse
from hulltrack.schemas.imports import ImportPreview, ImportResult, ImportRowError
from hulltrack.schemas.production_schedule import (
    AutoScheduleRequest,
    ScheduleCellUpdate,
    ScheduleRowCreate,
    ScheduleRowResponse,
)
from hulltrack.schemas.schedule_group import BulkDelete, ScheduleGroupCreate, ScheduleGroupResponse
from hulltrack.schemas.station import StationCreate, StationReorder, StationResponse
from hulltrack.schemas.task_data import MasterTaskCreate, MasterTaskResponse
from hulltrack.schemas.task_instance import (
    TaskDatesUpdate,
    TaskInstanceResponse,
    TaskStatusUpdate,
)

__all__ = [
    "AutoScheduleRequest",
    "BoatModelCreate",
    "BoatModelResponse",
    "BoatOrderDetail",
    "BoatOrderHeaderCreate",
    "BoatOrderHeaderResponse",
    "BoatOrderOptionResponse",
    "BoatOrderResponse",
    "BulkDelete",
    "CompanyHolidayCreate",
    "CompanyHolidayResponse",
    "DoNotShowCreate",
    "DoNotShowResponse",
    "ImportPreview",
    "ImportResult",
    "ImportRowError",
    "IngestionResult",
    "MasterTaskCreate",
    "MasterTaskResponse",
    "ModelOptionCreate",
    "ModelOptionResponse",
    "PdfUrlResponse",
    "ScheduleCellUpdate",
    "ScheduleGroupCreate",
    "ScheduleGroupResponse",
    "ScheduleRowCreate",
    "ScheduleRowResponse",
    "StationCreate",
    "StationReorder",
    "StationResponse",
    "TaskDatesUpdate",
    "TaskInstanceResponse",
    "TaskStatusUpdate",
]
