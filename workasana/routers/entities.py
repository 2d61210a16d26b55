"""
Routers for the simple named entities (users, teams, projects, tags).

Each router is built from an entity descriptor; auth for every route is
decided by ``Settings.public_routes``.
"""
from typing import List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..core.auth import authenticate
from ..core.database import get_db
from ..schemas.entity import (
    ProjectCreate, ProjectResponse, TagCreate, TagResponse, TeamCreate, TeamResponse
)
from ..schemas.user import UserOut
from ..services.entities import PROJECTS, TAGS, TEAMS, CrudService, EntityDescriptor
from ..services.users import USERS


def build_entity_router(
    descriptor: EntityDescriptor,
    response_schema: Type[BaseModel],
    create_schema: Type[BaseModel] = None,
) -> APIRouter:
    """GET (list) and, when ``create_schema`` is given, POST for one entity."""
    path = f"/{descriptor.collection}"
    router = APIRouter(prefix=path, tags=[descriptor.collection])

    def get_service(db: Session = Depends(get_db)) -> CrudService:
        return CrudService(descriptor, db)

    @router.get(
        "",
        response_model=List[response_schema],
        dependencies=[Depends(authenticate(f"GET {path}"))],
        name=f"list_{descriptor.collection}",
    )
    def list_entities(service: CrudService = Depends(get_service)):
        return service.list()

    if create_schema is not None:
        @router.post(
            "",
            response_model=response_schema,
            status_code=status.HTTP_201_CREATED,
            dependencies=[Depends(authenticate(f"POST {path}"))],
            name=f"create_{descriptor.name}",
        )
        def create_entity(payload: create_schema, service: CrudService = Depends(get_service)):
            return service.create(payload.model_dump())

    return router


users_router = build_entity_router(USERS, UserOut)
teams_router = build_entity_router(TEAMS, TeamResponse, TeamCreate)
projects_router = build_entity_router(PROJECTS, ProjectResponse, ProjectCreate)
tags_router = build_entity_router(TAGS, TagResponse, TagCreate)
