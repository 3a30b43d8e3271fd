"""
Storage ports used by the services.

Lookups return ``None`` for a missing entity; ``update`` and ``delete``
return ``False`` when no row matched. Any other failure is raised as
``StorageError``.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Course, Task


class TaskRepository(ABC):

    @abstractmethod
    def get_all(self) -> List[Task]:
        """All tasks ordered by due date ascending, undated tasks last."""

    @abstractmethod
    def get_by_id(self, task_id: int) -> Optional[Task]:
        ...

    @abstractmethod
    def get_by_course_id(self, course_id: int) -> List[Task]:
        """Tasks referencing ``course_id``, ordered like ``get_all``."""

    @abstractmethod
    def create(self, task: Task) -> Task:
        """Persist ``task`` and return it with its assigned id."""

    @abstractmethod
    def update(self, task: Task) -> bool:
        ...

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        ...


class CourseRepository(ABC):

    @abstractmethod
    def get_all(self) -> List[Course]:
        """All courses ordered by name ascending."""

    @abstractmethod
    def get_by_id(self, course_id: int) -> Optional[Course]:
        ...

    @abstractmethod
    def create(self, course: Course) -> Course:
        """Persist ``course`` and return it with its assigned id."""

    @abstractmethod
    def update(self, course: Course) -> bool:
        ...

    @abstractmethod
    def delete(self, course_id: int) -> bool:
        ...
