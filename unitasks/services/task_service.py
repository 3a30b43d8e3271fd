"""
Task service module for the task tracker
Enforces the task business rules between the request adapters and storage
"""
import logging
from datetime import datetime
from typing import Callable, List

from ..clock import to_naive_utc, utc_now
from ..models import Task, TaskStatus
from ..ports import CourseRepository, TaskRepository
from .errors import (
    CourseNotFound,
    EmptyTitle,
    InvalidCourseReference,
    InvalidDueDate,
    InvalidPriority,
    InvalidStatus,
    TaskNotFound,
)

logger = logging.getLogger(__name__)

MIN_PRIORITY = 1
MAX_PRIORITY = 5


class TaskService:
    """
    Service class for task operations.

    Handles:
    - Field validation (title, priority, status, due date)
    - Checking that a referenced course exists
    - Stamping created_at / updated_at
    - Translating absent rows into TaskNotFound

    All checks run before any write, so a rejected call never leaves a
    partial change behind. Storage errors propagate unchanged.
    """

    def __init__(
        self,
        task_repo: TaskRepository,
        course_repo: CourseRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._tasks = task_repo
        self._courses = course_repo
        self._clock = clock

    def create_task(self, task: Task) -> Task:
        """
        Validate and persist a new task.

        Status defaults to pending when unset. Returns the task with the
        identity assigned by storage.

        Raises:
            ValidationError: If a field breaks a business rule or the
                referenced course does not exist
        """
        now = self._clock()
        self._validate(task, now)
        if task.status is None:
            task.status = TaskStatus.pending
        self._check_course(task)

        task.id = None
        task.created_at = now
        task.updated_at = now

        created = self._tasks.create(task)
        logger.info("Created task %s (%r)", created.id, created.title)
        return created

    def update_task(self, task: Task) -> Task:
        """
        Validate and persist new field values for an existing task.

        created_at is carried over from the stored row; an unset status
        keeps the stored status.

        Raises:
            ValidationError: If a field breaks a business rule
            TaskNotFound: If no task has this id
        """
        now = self._clock()
        self._validate(task, now)

        existing = self._tasks.get_by_id(task.id)
        if existing is None:
            raise TaskNotFound(task.id)
        if task.status is None:
            task.status = existing.status
        if not task.course_id:
            task.course_id = None
        # An unchanged reference is kept even if its course has since been deleted.
        if task.course_id != existing.course_id:
            self._check_course(task)

        task.created_at = existing.created_at
        task.updated_at = max(now, existing.updated_at) if existing.updated_at else now

        if not self._tasks.update(task):
            raise TaskNotFound(task.id)
        logger.info("Updated task %s", task.id)
        return task

    def get_task(self, task_id: int) -> Task:
        task = self._tasks.get_by_id(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def get_all_tasks(self) -> List[Task]:
        """All tasks, soonest due first."""
        return self._tasks.get_all()

    def get_tasks_for_course(self, course_id: int) -> List[Task]:
        if self._courses.get_by_id(course_id) is None:
            raise CourseNotFound(course_id)
        return self._tasks.get_by_course_id(course_id)

    def delete_task(self, task_id: int) -> None:
        if self._tasks.get_by_id(task_id) is None:
            raise TaskNotFound(task_id)
        self._tasks.delete(task_id)
        logger.info("Deleted task %s", task_id)

    def _validate(self, task: Task, now: datetime) -> None:
        if not task.title or not task.title.strip():
            raise EmptyTitle()

        priority = task.priority
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidPriority(priority)
        if priority < MIN_PRIORITY or priority > MAX_PRIORITY:
            logger.debug("Rejected task priority %s", priority)
            raise InvalidPriority(priority)

        if task.status in (None, ""):
            task.status = None
        else:
            try:
                task.status = TaskStatus(task.status)
            except ValueError:
                raise InvalidStatus(task.status) from None

        if task.due_date is not None:
            task.due_date = to_naive_utc(task.due_date)
            if task.due_date <= now:
                logger.debug("Rejected due date %s (now %s)", task.due_date, now)
                raise InvalidDueDate()

        if task.description is None:
            task.description = ""

    def _check_course(self, task: Task) -> None:
        # 0 and None both mean "no course"
        if not task.course_id:
            task.course_id = None
            return
        if self._courses.get_by_id(task.course_id) is None:
            raise InvalidCourseReference(task.course_id)
