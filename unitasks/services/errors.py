"""
Domain error taxonomy for the task and course services.

Adapters map the categories to response codes: ValidationError -> 400,
NotFoundError -> 404, StorageError -> 500.
"""
from typing import Optional


class DomainError(Exception):
    """Base exception for business-rule violations and absences"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input the caller can correct and resubmit"""
    pass


class InvalidPriority(ValidationError):
    def __init__(self, priority: object):
        super().__init__("task priority must be between 1 and 5")
        self.priority = priority


class InvalidDueDate(ValidationError):
    def __init__(self):
        super().__init__("due date must be in the future")


class InvalidStatus(ValidationError):
    def __init__(self, status: object):
        super().__init__(f"unknown task status {status!r}")
        self.status = status


class EmptyTitle(ValidationError):
    def __init__(self):
        super().__init__("task title cannot be empty")


class EmptyName(ValidationError):
    def __init__(self):
        super().__init__("course name cannot be empty")


class InvalidCourseReference(ValidationError):
    def __init__(self, course_id: int):
        super().__init__(f"course {course_id} does not exist")
        self.course_id = course_id


class NotFoundError(DomainError):
    """The requested entity does not exist"""

    def __init__(self, message: str, entity_id: Optional[int] = None):
        super().__init__(message)
        self.entity_id = entity_id


class TaskNotFound(NotFoundError):
    def __init__(self, task_id: Optional[int] = None):
        super().__init__("task not found", task_id)


class CourseNotFound(NotFoundError):
    def __init__(self, course_id: Optional[int] = None):
        super().__init__("course not found", course_id)


class StorageError(Exception):
    """Raised by repositories when the underlying store fails"""
    pass
