"""Dict-backed repositories with the same contract as the SQL ones.

Entities are copied on the way in and out so callers never share state
with the store.
"""
from datetime import datetime
from typing import Dict, List, Optional

from ..models import Course, Task
from ..ports import CourseRepository, TaskRepository


def _copy(entity):
    return type(entity)(**entity.model_dump())


def _task_order(task: Task):
    return (task.due_date is None, task.due_date or datetime.min, task.id)


class InMemoryTaskRepository(TaskRepository):

    def __init__(self):
        self._rows: Dict[int, Task] = {}
        self._next_id = 1

    def get_all(self) -> List[Task]:
        return [_copy(t) for t in sorted(self._rows.values(), key=_task_order)]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        row = self._rows.get(task_id)
        return _copy(row) if row else None

    def get_by_course_id(self, course_id: int) -> List[Task]:
        rows = [t for t in self._rows.values() if t.course_id == course_id]
        return [_copy(t) for t in sorted(rows, key=_task_order)]

    def create(self, task: Task) -> Task:
        task.id = self._next_id
        self._next_id += 1
        self._rows[task.id] = _copy(task)
        return task

    def update(self, task: Task) -> bool:
        existing = self._rows.get(task.id)
        if existing is None:
            return False
        row = _copy(task)
        row.created_at = existing.created_at
        self._rows[task.id] = row
        return True

    def delete(self, task_id: int) -> bool:
        return self._rows.pop(task_id, None) is not None


class InMemoryCourseRepository(CourseRepository):

    def __init__(self):
        self._rows: Dict[int, Course] = {}
        self._next_id = 1

    def get_all(self) -> List[Course]:
        rows = sorted(self._rows.values(), key=lambda c: (c.name, c.id))
        return [_copy(c) for c in rows]

    def get_by_id(self, course_id: int) -> Optional[Course]:
        row = self._rows.get(course_id)
        return _copy(row) if row else None

    def create(self, course: Course) -> Course:
        course.id = self._next_id
        self._next_id += 1
        self._rows[course.id] = _copy(course)
        return course

    def update(self, course: Course) -> bool:
        existing = self._rows.get(course.id)
        if existing is None:
            return False
        row = _copy(course)
        row.created_at = existing.created_at
        self._rows[course.id] = row
        return True

    def delete(self, course_id: int) -> bool:
        return self._rows.pop(course_id, None) is not None
