"""Tests for the SQL storage gateway."""
from datetime import datetime

import pytest
from sqlalchemy import text

from unitasks.models import Course, Task, TaskStatus
from unitasks.repositories import SQLCourseRepository, SQLTaskRepository
from unitasks.services import StorageError

NOW = datetime(2026, 3, 1, 9, 30, 15, 250000)


def _course(**overrides):
    fields = {"name": "CS101", "professor": "Dr. Smith", "created_at": NOW, "updated_at": NOW}
    fields.update(overrides)
    return Course(**fields)


def _task(**overrides):
    fields = {
        "title": "HW1",
        "description": "",
        "due_date": datetime(2026, 3, 10, 23, 59),
        "priority": 3,
        "status": TaskStatus.pending,
        "created_at": NOW,
        "updated_at": NOW,
    }
    fields.update(overrides)
    return Task(**fields)


@pytest.fixture(name="task_repo")
def task_repo_fixture(engine):
    return SQLTaskRepository(engine)


@pytest.fixture(name="course_repo")
def course_repo_fixture(engine):
    return SQLCourseRepository(engine)


def test_create_assigns_identity(course_repo):
    first = course_repo.create(_course(name="A"))
    second = course_repo.create(_course(name="B"))
    assert first.id is not None
    assert second.id != first.id


def test_timestamps_stored_as_fixed_format_text(engine, course_repo):
    course_repo.create(_course())
    with engine.connect() as conn:
        stored = conn.execute(text("SELECT created_at, updated_at FROM courses")).one()
    assert tuple(stored) == ("2026-03-01T09:30:15.250000Z", "2026-03-01T09:30:15.250000Z")


def test_timestamps_round_trip(task_repo):
    created = task_repo.create(_task())
    stored = task_repo.get_by_id(created.id)
    assert stored.created_at == NOW
    assert stored.due_date == datetime(2026, 3, 10, 23, 59)
    assert stored.status == TaskStatus.pending


def test_malformed_timestamp_raises_storage_error(engine, task_repo):
    created = task_repo.create(_task())
    with engine.begin() as conn:
        conn.execute(text("UPDATE tasks SET created_at = 'not a date' WHERE id = :id"), {"id": created.id})

    with pytest.raises(StorageError):
        task_repo.get_by_id(created.id)


def test_get_by_id_missing_returns_none(task_repo, course_repo):
    assert task_repo.get_by_id(1) is None
    assert course_repo.get_by_id(1) is None


def test_update_and_delete_report_missing_rows(task_repo, course_repo):
    assert task_repo.update(_task(id=5)) is False
    assert task_repo.delete(5) is False
    assert course_repo.update(_course(id=5)) is False
    assert course_repo.delete(5) is False


def test_update_does_not_touch_created_at(course_repo):
    created = course_repo.create(_course())
    later = datetime(2026, 4, 1)
    assert course_repo.update(_course(id=created.id, name="CS102", created_at=later, updated_at=later))

    stored = course_repo.get_by_id(created.id)
    assert stored.name == "CS102"
    assert stored.created_at == NOW
    assert stored.updated_at == later


def test_get_by_course_id(task_repo, course_repo):
    course = course_repo.create(_course())
    task_repo.create(_task(title="linked", course_id=course.id))
    task_repo.create(_task(title="loose"))

    assert [t.title for t in task_repo.get_by_course_id(course.id)] == ["linked"]


def test_dangling_course_reference_is_allowed(task_repo, course_repo):
    course = course_repo.create(_course())
    task = task_repo.create(_task(course_id=course.id))

    assert course_repo.delete(course.id) is True
    assert task_repo.get_by_id(task.id).course_id == course.id
