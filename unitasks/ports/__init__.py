from .repositories import CourseRepository, TaskRepository

__all__ = ["CourseRepository", "TaskRepository"]
