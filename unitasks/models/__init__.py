from .course import Course
from .task import Task, TaskStatus

# Export all models for easy importing
__all__ = ["Course", "Task", "TaskStatus"]
