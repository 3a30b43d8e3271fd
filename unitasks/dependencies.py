from fastapi import Request
from fastapi.templating import Jinja2Templates

from .services import CourseService, TaskService


def get_task_service(request: Request) -> TaskService:
    """Dependency returning the task service wired at startup."""
    return request.app.state.task_service


def get_course_service(request: Request) -> CourseService:
    """Dependency returning the course service wired at startup."""
    return request.app.state.course_service


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
