from .task_models import Task, TaskFilter
from .task_store import TaskStore

__all__ = ["Task", "TaskFilter", "TaskStore"]
