from datetime import datetime, timezone
import enum
from sqlalchemy import Column, Integer, Float, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from ..core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, enum.Enum):
    """Task status enumeration"""
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    BLOCKED = "Blocked"


task_owners = Table(
    "task_owners",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)

task_tags = Table(
    "task_tags",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Task(Base):
    """Task model for database"""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)

    status = Column(
        String(20),
        default=TaskStatus.TODO.value,
        nullable=False,
        index=True
    )

    # Estimated effort in days
    time_to_complete = Column(Float, nullable=True)

    team_id = Column(Integer, ForeignKey("teams.id"), nullable=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)

    # Set in Python so every backend stores the same UTC values
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False, index=True)

    team = relationship("Team", lazy="joined")
    project = relationship("Project", lazy="joined")
    owners = relationship("User", secondary=task_owners, lazy="selectin", order_by="User.id")
    tags = relationship("Tag", secondary=task_tags, lazy="selectin", order_by="Tag.id")

    def touch(self):
        """Refresh updated_at; relationship-only edits do not fire onupdate."""
        self.updated_at = utcnow()

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status='{self.status}')>"
