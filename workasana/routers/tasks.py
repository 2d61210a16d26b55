from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..core.auth import authenticate
from ..core.database import get_db
from ..core.exceptions import NotFound
from ..schemas.task import TaskCreate, TaskResponse, TaskUpdate
from ..services.entities import CrudService
from ..services.tasks import TASKS

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(db: Session = Depends(get_db)) -> CrudService:
    return CrudService(TASKS, db)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(authenticate("POST /tasks"))]
)
def create_task(task_data: TaskCreate, service: CrudService = Depends(get_task_service)):
    """Create a new task"""
    return service.create(task_data.model_dump())


@router.get(
    "",
    response_model=List[TaskResponse],
    dependencies=[Depends(authenticate("GET /tasks"))]
)
def get_tasks(
    team: Optional[str] = Query(None, description="Team id"),
    owner: Optional[str] = Query(None, description="Comma-separated owner ids"),
    project: Optional[str] = Query(None, description="Project id"),
    status_filter: Optional[str] = Query(None, alias="status", description="Task status"),
    tags: Optional[str] = Query(None, description="Comma-separated tag ids"),
    service: CrudService = Depends(get_task_service)
):
    """List tasks; all given filters must match"""
    return service.list({
        "team": team,
        "owner": owner,
        "project": project,
        "status": status_filter,
        "tags": tags,
    })


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    dependencies=[Depends(authenticate("GET /tasks/{id}"))]
)
def get_task(task_id: int, service: CrudService = Depends(get_task_service)):
    """Get a specific task by ID"""
    task = service.get(task_id)
    if not task:
        raise NotFound("Task not found")
    return task


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    dependencies=[Depends(authenticate("PUT /tasks/{id}"))]
)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    service: CrudService = Depends(get_task_service)
):
    """Replace only the fields present in the body"""
    task = service.update(task_id, task_update.model_dump(exclude_unset=True))
    if not task:
        raise NotFound("Task not found")
    return task


@router.delete(
    "/{task_id}",
    response_model=TaskResponse,
    dependencies=[Depends(authenticate("DELETE /tasks/{id}"))]
)
def delete_task(task_id: int, service: CrudService = Depends(get_task_service)):
    """Delete a task and return it"""
    task = service.delete(task_id)
    if not task:
        raise NotFound("Task not found")
    return task
