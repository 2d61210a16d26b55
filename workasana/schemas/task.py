"""
Pydantic schemas for tasks and reports.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator

from ..models.task import TaskStatus


def _camel(name: str, camel: str, **kwargs):
    return Field(
        validation_alias=AliasChoices(camel, name),
        serialization_alias=camel,
        **kwargs
    )


class TaskCreate(BaseModel):
    """Schema for creating a task"""
    title: str = Field(..., min_length=1, max_length=200, description="Task title")
    description: Optional[str] = Field(None, max_length=1000, description="Task description")
    status: TaskStatus = Field(TaskStatus.TODO, description="Task status")
    time_to_complete: Optional[float] = _camel(
        "time_to_complete", "timeToComplete", default=None, ge=0, description="Estimated days"
    )
    owners: List[int] = Field(default_factory=list, description="Owner user ids")
    team: Optional[int] = Field(None, description="Team id")
    project: Optional[int] = Field(None, description="Project id")
    tags: List[int] = Field(default_factory=list, description="Tag ids")

    class Config:
        extra = "forbid"


class TaskUpdate(BaseModel):
    """Schema for updating a task; only fields present in the body are replaced"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    status: Optional[TaskStatus] = None
    time_to_complete: Optional[float] = _camel("time_to_complete", "timeToComplete", default=None, ge=0)
    owners: Optional[List[int]] = None
    team: Optional[int] = None
    project: Optional[int] = None
    tags: Optional[List[int]] = None

    class Config:
        extra = "forbid"

    @field_validator("title", "status", "owners", "tags")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class OwnerSummary(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class TeamSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class ProjectSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class TagSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class TaskResponse(BaseModel):
    """Schema for task response, references expanded"""
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    time_to_complete: Optional[float] = _camel("time_to_complete", "timeToComplete", default=None)
    owners: List[OwnerSummary] = Field(default_factory=list)
    team: Optional[TeamSummary] = None
    project: Optional[ProjectSummary] = None
    tags: List[TagSummary] = Field(default_factory=list)
    created_at: datetime = _camel("created_at", "createdAt")
    updated_at: datetime = _camel("updated_at", "updatedAt")

    class Config:
        from_attributes = True


class LastWeekReport(BaseModel):
    count: int
    tasks: List[TaskResponse]


class PendingReport(BaseModel):
    total_pending_days: float = _camel("total_pending_days", "totalPendingDays")
    total_tasks: int = _camel("total_tasks", "totalTasks")
