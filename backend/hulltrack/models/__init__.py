"""SQLAlchemy ORM models."""

from hulltrack.models.boat_model import BoatModel, BoatOrderHeader, ModelOption
from hulltrack.models.boat_order import BoatOrder, BoatOrderOption
from hulltrack.models.do_not_show import DoNotShowOption
from hulltrack.models.holiday import CompanyHoliday
from hulltrack.models.production_schedule import ProductionScheduleRow
from hulltrack.models.schedule_group import ScheduleGroup
from hulltrack.models.station import Station
from hulltrack.models.task_data import MasterTask
from hulltrack.models.task_instance import TaskInstance

__all__ = [
    "BoatModel",
    "BoatOrder",
    "BoatOrderHeader",
    "BoatOrderOption",
    "CompanyHoliday",
    "DoNotShowOption",
    "MasterTask",
    "ModelOption",
    "ProductionScheduleRow",
    "ScheduleGroup",
    "Station",
    "TaskInstance",
]
