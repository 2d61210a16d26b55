"""
Task entity: list filters and reference resolution.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import InvalidArgument, ValidationError
from ..models import Project, Tag, Task, TaskStatus, Team, User
from .entities import EntityDescriptor


def _parse_id(value: str, label: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid {label} id: {value!r}")


def _parse_ids(value: str, label: str) -> List[int]:
    return [_parse_id(part.strip(), label) for part in value.split(",") if part.strip()]


def _parse_status(value: str) -> str:
    try:
        return TaskStatus(value).value
    except ValueError:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise InvalidArgument(f"Invalid status {value!r}; expected one of: {allowed}")


TASK_FILTERS = {
    "team": lambda value: Task.team_id == _parse_id(value, "team"),
    "owner": lambda value: Task.owners.any(User.id.in_(_parse_ids(value, "owner"))),
    "project": lambda value: Task.project_id == _parse_id(value, "project"),
    "status": lambda value: Task.status == _parse_status(value),
    "tags": lambda value: Task.tags.any(Tag.id.in_(_parse_ids(value, "tag"))),
}


def _load_one(db: Session, model, entity_id: Optional[int], label: str):
    if entity_id is None:
        return None
    obj = db.get(model, entity_id)
    if obj is None:
        raise ValidationError(f"Unknown {label} id: {entity_id}")
    return obj


def _load_many(db: Session, model, ids: List[int], label: str) -> list:
    unique_ids = list(dict.fromkeys(ids))
    if not unique_ids:
        return []
    found = {obj.id: obj for obj in db.query(model).filter(model.id.in_(unique_ids)).all()}
    missing = [i for i in unique_ids if i not in found]
    if missing:
        raise ValidationError(f"Unknown {label} ids: {', '.join(map(str, missing))}")
    return [found[i] for i in unique_ids]


def prepare_task_values(db: Session, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a validated task payload into model attributes, resolving ids."""
    values = dict(payload)
    if values.get("status") is not None:
        values["status"] = TaskStatus(values["status"]).value
    if "team" in values:
        values["team"] = _load_one(db, Team, values["team"], "team")
    if "project" in values:
        values["project"] = _load_one(db, Project, values["project"], "project")
    if "owners" in values:
        values["owners"] = _load_many(db, User, values["owners"], "owner")
    if "tags" in values:
        values["tags"] = _load_many(db, Tag, values["tags"], "tag")
    return values


TASKS = EntityDescriptor(
    name="task",
    collection="tasks",
    model=Task,
    filters=TASK_FILTERS,
    prepare=prepare_task_values,
)
