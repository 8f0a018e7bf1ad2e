"""Expansion of a model's master tasks into per-hull task instances."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.models.task_data import MasterTask
from hulltrack.models.task_instance import DEFAULT_TASK_STATUS, TaskInstance


async def fetch_master_tasks(db: AsyncSession, model_id: int) -> list[MasterTask]:
    """All master tasks defined for a model, in insertion order."""
    result = await db.execute(
        select(MasterTask).where(MasterTask.model == model_id).order_by(MasterTask.id)
    )
    return list(result.scalars().all())


def expand_master_tasks(
    master_tasks: Iterable[MasterTask],
    hull_number: str,
    model_id: int,
) -> list[TaskInstance]:
    """Build one unscheduled ``TaskInstance`` per master task.

    An empty input yields an empty list.
    """
    return [
        TaskInstance(
            hull_number=hull_number,
            model=model_id,
            station=master.station,
            task_name=master.task_name,
            start_date=None,
            end_date=None,
            status=DEFAULT_TASK_STATUS,
            completed_by=None,
            applicable=True,
            schedule_group=master.schedule_group,
            task_data_id=master.id,
        )
        for master in master_tasks
    ]
