import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Engine

from .config import Settings
from .database import create_db_engine, create_tables
from .logging_setup import setup_logging
from .repositories import SQLCourseRepository, SQLTaskRepository
from .routers import courses, tasks, web
from .services import CourseService, NotFoundError, StorageError, TaskService, ValidationError

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, message: str):
    if request.url.path.startswith("/api"):
        return JSONResponse(status_code=status_code, content={"detail": message})
    return request.app.state.templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def _register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return _error_response(request, 400, exc.message)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(request, 404, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_response(request, 500, "Internal storage error")


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application from ``settings``.

    Everything the handlers need (services, templates, settings) is created
    here and hung off ``app.state``; there is no module-level state.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    if engine is None:
        engine = create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_tables(engine)
        logger.info("Database tables initialized at %s", engine.url)
        yield
        engine.dispose()

    app = FastAPI(
        title="University Task Manager",
        description="Task and course tracker with a web UI and JSON API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    course_repo = SQLCourseRepository(engine)
    app.state.settings = settings
    app.state.task_service = TaskService(SQLTaskRepository(engine), course_repo)
    app.state.course_service = CourseService(course_repo)
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    _register_error_handlers(app)

    app.include_router(tasks.router, prefix="/api", tags=["tasks"])
    app.include_router(courses.router, prefix="/api", tags=["courses"])
    app.include_router(web.router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app
