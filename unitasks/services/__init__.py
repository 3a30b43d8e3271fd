"""
Services module for the task tracker
Contains the validation and persistence rules for tasks and courses
"""
from .course_service import CourseService
from .task_service import TaskService
from .errors import (
    CourseNotFound,
    DomainError,
    EmptyName,
    EmptyTitle,
    InvalidCourseReference,
    InvalidDueDate,
    InvalidPriority,
    InvalidStatus,
    NotFoundError,
    StorageError,
    TaskNotFound,
    ValidationError,
)

__all__ = [
    "CourseService",
    "TaskService",
    "CourseNotFound",
    "DomainError",
    "EmptyName",
    "EmptyTitle",
    "InvalidCourseReference",
    "InvalidDueDate",
    "InvalidPriority",
    "InvalidStatus",
    "NotFoundError",
    "StorageError",
    "TaskNotFound",
    "ValidationError",
]
