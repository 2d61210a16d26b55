"""Database models for Workasana."""
from .user import User
from .workspace import Team, Project, Tag
from .task import Task, TaskStatus, task_owners, task_tags

__all__ = ["User", "Team", "Project", "Tag", "Task", "TaskStatus", "task_owners", "task_tags"]
