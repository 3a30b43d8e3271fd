"""
Course service module for the task tracker
"""
import logging
from datetime import datetime
from typing import Callable, List

from ..clock import utc_now
from ..models import Course
from ..ports import CourseRepository
from .errors import CourseNotFound, EmptyName

logger = logging.getLogger(__name__)


class CourseService:
    """Validation and persistence rules for courses.

    Deleting a course leaves the tasks that reference it untouched.
    """

    def __init__(self, course_repo: CourseRepository, clock: Callable[[], datetime] = utc_now):
        self._courses = course_repo
        self._clock = clock

    def create_course(self, course: Course) -> Course:
        self._validate(course)
        now = self._clock()
        course.id = None
        course.created_at = now
        course.updated_at = now

        created = self._courses.create(course)
        logger.info("Created course %s (%r)", created.id, created.name)
        return created

    def update_course(self, course: Course) -> Course:
        self._validate(course)
        existing = self._courses.get_by_id(course.id)
        if existing is None:
            raise CourseNotFound(course.id)

        now = self._clock()
        course.created_at = existing.created_at
        course.updated_at = max(now, existing.updated_at) if existing.updated_at else now

        if not self._courses.update(course):
            raise CourseNotFound(course.id)
        logger.info("Updated course %s", course.id)
        return course

    def get_course(self, course_id: int) -> Course:
        course = self._courses.get_by_id(course_id)
        if course is None:
            raise CourseNotFound(course_id)
        return course

    def get_all_courses(self) -> List[Course]:
        """All courses ordered by name."""
        return self._courses.get_all()

    def delete_course(self, course_id: int) -> None:
        if self._courses.get_by_id(course_id) is None:
            raise CourseNotFound(course_id)
        self._courses.delete(course_id)
        logger.info("Deleted course %s", course_id)

    def _validate(self, course: Course) -> None:
        if not course.name or not course.name.strip():
            raise EmptyName()
        if course.professor is None:
            course.professor = ""
