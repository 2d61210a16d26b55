"""
Aggregate reports over tasks.
"""
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..core.exceptions import InvalidArgument
from ..models import Task, TaskStatus

COMPLETED = TaskStatus.COMPLETED.value

# groupBy value -> ids a completed task counts towards
GROUP_KEYS: Dict[str, Callable[[Task], Iterable[Optional[int]]]] = {
    "team": lambda task: [task.team_id],
    "project": lambda task: [task.project_id],
    "owner": lambda task: [owner.id for owner in task.owners],
}


def last_week_completed(db: Session, now: Optional[datetime] = None) -> List[Task]:
    """Completed tasks last updated within the trailing seven days."""
    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=7)
    return (
        db.query(Task)
        .filter(Task.status == COMPLETED, Task.updated_at >= since, Task.updated_at <= now)
        .order_by(Task.id)
        .all()
    )


def pending_workload(db: Session) -> Dict[str, float]:
    """Sum of timeToComplete (missing counts as 0) over tasks not yet completed."""
    total_days, total_tasks = (
        db.query(func.coalesce(func.sum(Task.time_to_complete), 0), func.count(Task.id))
        .filter(Task.status != COMPLETED)
        .one()
    )
    return {"total_pending_days": float(total_days), "total_tasks": total_tasks}


def closed_by_group(db: Session, group_by: Optional[str]) -> Dict[str, int]:
    """
    Count completed tasks per team, project or owner.

    A task with several owners counts once for each of them; a task without
    the grouped reference counts for nobody.
    """
    keys_for = GROUP_KEYS.get(group_by or "")
    if keys_for is None:
        raise InvalidArgument(f"groupBy must be one of: {', '.join(GROUP_KEYS)}")

    counts: Dict[str, int] = {}
    for task in db.query(Task).filter(Task.status == COMPLETED).all():
        for key in keys_for(task):
            if key is None:
                continue
            counts[str(key)] = counts.get(str(key), 0) + 1
    return counts
