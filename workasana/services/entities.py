"""
Generic CRUD operations over an entity descriptor.

Every entity (users, teams, projects, tags, tasks) is served by the same
``CrudService``; what differs per entity lives in its ``EntityDescriptor``:
the model, the list filters it accepts and how an input payload is turned
into model attribute values.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type

from sqlalchemy.orm import Session

from ..core.exceptions import InvalidArgument
from ..models import Project, Tag, Team

logger = logging.getLogger(__name__)

FilterBuilder = Callable[[str], Any]
PayloadPreparer = Callable[[Session, Dict[str, Any]], Dict[str, Any]]


def _passthrough(db: Session, payload: Dict[str, Any]) -> Dict[str, Any]:
    return dict(payload)


@dataclass(frozen=True)
class EntityDescriptor:
    name: str
    collection: str
    model: Type
    filters: Dict[str, FilterBuilder] = field(default_factory=dict)
    prepare: PayloadPreparer = _passthrough


class CrudService:
    """Create/list/read/update/delete for one entity type within one session."""

    def __init__(self, descriptor: EntityDescriptor, db: Session):
        self.descriptor = descriptor
        self.model = descriptor.model
        self.db = db

    def create(self, payload: Dict[str, Any]):
        values = self.descriptor.prepare(self.db, payload)
        obj = self.model(**values)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        logger.info(f"Created {self.descriptor.name} {obj.id}")
        return obj

    def list(self, filters: Optional[Dict[str, Optional[str]]] = None) -> List:
        """
        Return all records matching every given filter.

        Filters whose value is None or empty impose no constraint. Unknown
        filter keys are rejected with InvalidArgument.
        """
        query = self.db.query(self.model)
        for key, value in (filters or {}).items():
            if value is None or value == "":
                continue
            builder = self.descriptor.filters.get(key)
            if builder is None:
                raise InvalidArgument(f"Unsupported {self.descriptor.name} filter: {key}")
            query = query.filter(builder(value))
        return query.order_by(self.model.id).all()

    def get(self, entity_id: int):
        return self.db.get(self.model, entity_id)

    def update(self, entity_id: int, payload: Dict[str, Any]):
        obj = self.get(entity_id)
        if obj is None:
            return None

        values = self.descriptor.prepare(self.db, payload)
        for attr, value in values.items():
            setattr(obj, attr, value)
        if hasattr(obj, "touch"):
            obj.touch()

        self.db.commit()
        self.db.refresh(obj)
        logger.info(f"Updated {self.descriptor.name} {entity_id}: {sorted(values)}")
        return obj

    def delete(self, entity_id: int):
        obj = self.get(entity_id)
        if obj is None:
            return None

        self.db.delete(obj)
        self.db.commit()
        logger.info(f"Deleted {self.descriptor.name} {entity_id}")
        return obj


TEAMS = EntityDescriptor(name="team", collection="teams", model=Team)
PROJECTS = EntityDescriptor(name="project", collection="projects", model=Project)
TAGS = EntityDescriptor(name="tag", collection="tags", model=Tag)
