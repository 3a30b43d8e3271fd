from .memory import InMemoryCourseRepository, InMemoryTaskRepository
from .sql import SQLCourseRepository, SQLTaskRepository

__all__ = [
    "InMemoryCourseRepository",
    "InMemoryTaskRepository",
    "SQLCourseRepository",
    "SQLTaskRepository",
]
