from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from unitasks.config import Settings
from unitasks.database import create_db_engine, create_tables
from unitasks.main import create_app
from unitasks.repositories import (
    InMemoryCourseRepository,
    InMemoryTaskRepository,
    SQLCourseRepository,
    SQLTaskRepository,
)
from unitasks.services import CourseService, TaskService


class FakeClock:
    """Controllable replacement for utc_now."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(name="clock")
def clock_fixture():
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0))


@pytest.fixture(name="engine")
def engine_fixture():
    """Create a fresh in-memory database for each test."""
    engine = create_db_engine("sqlite:///:memory:")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="repos", params=["memory", "sql"])
def repos_fixture(request, engine):
    """Run service tests against both repository implementations."""
    if request.param == "memory":
        return InMemoryTaskRepository(), InMemoryCourseRepository()
    return SQLTaskRepository(engine), SQLCourseRepository(engine)


@pytest.fixture(name="task_service")
def task_service_fixture(repos, clock):
    task_repo, course_repo = repos
    return TaskService(task_repo, course_repo, clock=clock)


@pytest.fixture(name="course_service")
def course_service_fixture(repos, clock):
    _, course_repo = repos
    return CourseService(course_repo, clock=clock)


@pytest.fixture(name="client")
def client_fixture(engine):
    """Create a test client bound to the in-memory database."""
    settings = Settings(database_url="sqlite:///:memory:", log_level="DEBUG")
    app = create_app(settings, engine=engine)
    with TestClient(app) as client:
        yield client
