from typing import Dict, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..core.auth import authenticate
from ..core.database import get_db
from ..schemas.task import LastWeekReport, PendingReport
from ..services import reports

router = APIRouter(prefix="/report", tags=["reports"])


@router.get(
    "/last-week",
    response_model=LastWeekReport,
    dependencies=[Depends(authenticate("GET /report/last-week"))]
)
def last_week(db: Session = Depends(get_db)):
    """Tasks completed during the last seven days"""
    tasks = reports.last_week_completed(db)
    return {"count": len(tasks), "tasks": tasks}


@router.get(
    "/pending",
    response_model=PendingReport,
    dependencies=[Depends(authenticate("GET /report/pending"))]
)
def pending(db: Session = Depends(get_db)):
    """Outstanding work in days across all unfinished tasks"""
    return PendingReport(**reports.pending_workload(db))


@router.get(
    "/closed-tasks",
    response_model=Dict[str, int],
    dependencies=[Depends(authenticate("GET /report/closed-tasks"))]
)
def closed_tasks(
    group_by: Optional[str] = Query(None, alias="groupBy", description="team, owner or project"),
    db: Session = Depends(get_db)
):
    """Completed task counts per team, owner or project"""
    return reports.closed_by_group(db, group_by)
