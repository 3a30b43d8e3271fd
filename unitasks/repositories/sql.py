"""SQLModel-backed implementations of the repository ports.

Every operation runs in its own short-lived session and commits
immediately; nothing spans more than one statement.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, select

from ..models import Course, Task
from ..ports import CourseRepository, TaskRepository
from ..services.errors import StorageError

logger = logging.getLogger(__name__)


class _SQLRepository:

    def __init__(self, engine: Engine):
        self._session_factory = sessionmaker(
            bind=engine, class_=Session, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        except (SQLAlchemyError, ValueError) as exc:
            session.rollback()
            logger.error("Storage failure during %s: %s", action, exc)
            raise StorageError(f"{action} failed: {exc}") from exc
        finally:
            session.close()


class SQLTaskRepository(_SQLRepository, TaskRepository):

    @staticmethod
    def _ordered(statement):
        return statement.order_by(Task.due_date.is_(None), Task.due_date, Task.id)

    def get_all(self) -> List[Task]:
        with self._session("list tasks") as session:
            return list(session.exec(self._ordered(select(Task))).all())

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with self._session("get task") as session:
            return session.get(Task, task_id)

    def get_by_course_id(self, course_id: int) -> List[Task]:
        with self._session("list course tasks") as session:
            statement = self._ordered(select(Task).where(Task.course_id == course_id))
            return list(session.exec(statement).all())

    def create(self, task: Task) -> Task:
        with self._session("create task") as session:
            session.add(task)
            session.commit()
            session.refresh(task)
            return task

    def update(self, task: Task) -> bool:
        with self._session("update task") as session:
            result = session.execute(
                update(Task)
                .where(Task.id == task.id)
                .values(
                    title=task.title,
                    description=task.description,
                    due_date=task.due_date,
                    priority=task.priority,
                    status=task.status,
                    course_id=task.course_id,
                    updated_at=task.updated_at,
                )
            )
            session.commit()
            return result.rowcount > 0

    def delete(self, task_id: int) -> bool:
        with self._session("delete task") as session:
            result = session.execute(delete(Task).where(Task.id == task_id))
            session.commit()
            return result.rowcount > 0


class SQLCourseRepository(_SQLRepository, CourseRepository):

    def get_all(self) -> List[Course]:
        with self._session("list courses") as session:
            statement = select(Course).order_by(Course.name, Course.id)
            return list(session.exec(statement).all())

    def get_by_id(self, course_id: int) -> Optional[Course]:
        with self._session("get course") as session:
            return session.get(Course, course_id)

    def create(self, course: Course) -> Course:
        with self._session("create course") as session:
            session.add(course)
            session.commit()
            session.refresh(course)
            return course

    def update(self, course: Course) -> bool:
        # created_at is never written here
        with self._session("update course") as session:
            result = session.execute(
                update(Course)
                .where(Course.id == course.id)
                .values(
                    name=course.name,
                    professor=course.professor,
                    updated_at=course.updated_at,
                )
            )
            session.commit()
            return result.rowcount > 0

    def delete(self, course_id: int) -> bool:
        with self._session("delete course") as session:
            result = session.execute(delete(Course).where(Course.id == course_id))
            session.commit()
            return result.rowcount > 0
