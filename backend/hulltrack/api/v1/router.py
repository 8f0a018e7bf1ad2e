"""API v1 router aggregating all sub-routers."""

from fastapi import APIRouter

from hulltrack.api.v1.boat_orders import router as boat_orders_router
from hulltrack.api.v1.do_not_show import router as do_not_show_router
from hulltrack.api.v1.holidays import router as holidays_router
from hulltrack.api.v1.models import router as models_router
from hulltrack.api.v1.schedule import router as schedule_router
from hulltrack.api.v1.schedule_groups import router as schedule_groups_router
from hulltrack.api.v1.stations import router as stations_router
from hulltrack.api.v1.task_data import router as task_data_router
from hulltrack.api.v1.tasks import router as tasks_router
from hulltrack.core.auth import RequireSession
from hulltrack.db.init_db import check_db_connection

# Public router (no authentication required)
api_v1_router = APIRouter()


@api_v1_router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint returning 200 OK with database reachability."""
    database = "ok" if await check_db_connection() else "unavailable"
    return {"status": "ok", "database": database}


# Every route needs a session key; catalog writes and imports also require
# the admin key on the route itself.
_authenticated = APIRouter(dependencies=[RequireSession])
_authenticated.include_router(boat_orders_router)
_authenticated.include_router(tasks_router)
_authenticated.include_router(models_router)
_authenticated.include_router(stations_router)
_authenticated.include_router(task_data_router)
_authenticated.include_router(schedule_groups_router)
_authenticated.include_router(holidays_router)
_authenticated.include_router(do_not_show_router)
_authenticated.include_router(schedule_router)

api_v1_router.include_router(_authenticated)
