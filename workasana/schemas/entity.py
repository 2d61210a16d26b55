"""
Pydantic schemas for teams, projects and tags.
"""
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


class EntityCreate(BaseModel):
    """Base create schema for named records"""
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    description: Optional[str] = Field(None, max_length=1000, description="Free-form description")

    class Config:
        extra = "forbid"


class EntityResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(
        None,
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    class Config:
        from_attributes = True


class TeamCreate(EntityCreate):
    pass


class TeamResponse(EntityResponse):
    pass


class ProjectCreate(EntityCreate):
    pass


class ProjectResponse(EntityResponse):
    pass


class TagCreate(EntityCreate):
    pass


class TagResponse(EntityResponse):
    pass
