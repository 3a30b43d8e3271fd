"""Server-rendered pages and form handlers for the web UI."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from ..config import FORM_DUE_DATE_FORMAT
from ..dependencies import get_course_service, get_task_service, get_templates
from ..models import Course, Task, TaskStatus
from ..services import CourseService, TaskService, ValidationError

router = APIRouter(include_in_schema=False)


class FormInputError(ValidationError):
    """A form field that could not be converted to its domain type"""
    pass


def _parse_due_date(raw: str) -> Optional[datetime]:
    if not raw.strip():
        return None
    try:
        return datetime.strptime(raw.strip(), FORM_DUE_DATE_FORMAT)
    except ValueError:
        raise FormInputError("Invalid due date format") from None


def _parse_int(raw: str, field: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise FormInputError(f"Invalid {field}") from None


def _parse_course_id(raw: str) -> Optional[int]:
    if not raw.strip():
        return None
    return _parse_int(raw, "course")


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/")
def index(
    request: Request,
    tasks: TaskService = Depends(get_task_service),
    courses: CourseService = Depends(get_course_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Home page listing all tasks and courses."""
    all_courses = courses.get_all_courses()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "tasks": tasks.get_all_tasks(),
            "courses": all_courses,
            "course_map": {c.id: c.name for c in all_courses},
        },
    )


@router.get("/tasks/new")
def create_task_form(
    request: Request,
    courses: CourseService = Depends(get_course_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    return templates.TemplateResponse(
        request, "create-task.html", {"courses": courses.get_all_courses()}
    )


@router.post("/tasks")
def create_task(
    title: str = Form(""),
    description: str = Form(""),
    due_date: str = Form(""),
    priority: str = Form(""),
    course_id: str = Form(""),
    tasks: TaskService = Depends(get_task_service),
):
    task = Task(
        title=title,
        description=description,
        due_date=_parse_due_date(due_date),
        priority=_parse_int(priority, "priority"),
        status=TaskStatus.pending,
        course_id=_parse_course_id(course_id),
    )
    tasks.create_task(task)
    return _redirect("/")


@router.get("/tasks/{task_id}/edit")
def edit_task_form(
    request: Request,
    task_id: int,
    tasks: TaskService = Depends(get_task_service),
    courses: CourseService = Depends(get_course_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    return templates.TemplateResponse(
        request,
        "edit-task.html",
        {
            "task": tasks.get_task(task_id),
            "courses": courses.get_all_courses(),
            "statuses": list(TaskStatus),
            "due_date_format": FORM_DUE_DATE_FORMAT,
        },
    )


@router.post("/tasks/{task_id}")
def update_task(
    task_id: int,
    title: str = Form(""),
    description: str = Form(""),
    due_date: str = Form(""),
    priority: str = Form(""),
    status_value: str = Form("", alias="status"),
    course_id: str = Form(""),
    tasks: TaskService = Depends(get_task_service),
):
    task = Task(
        id=task_id,
        title=title,
        description=description,
        due_date=_parse_due_date(due_date),
        priority=_parse_int(priority, "priority"),
        status=status_value or None,
        course_id=_parse_course_id(course_id),
    )
    tasks.update_task(task)
    return _redirect("/")


@router.post("/tasks/{task_id}/delete")
def delete_task(task_id: int, tasks: TaskService = Depends(get_task_service)):
    tasks.delete_task(task_id)
    return _redirect("/")


@router.get("/courses")
def list_courses(
    request: Request,
    courses: CourseService = Depends(get_course_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    return templates.TemplateResponse(
        request, "courses.html", {"courses": courses.get_all_courses()}
    )


@router.get("/courses/new")
def create_course_form(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    return templates.TemplateResponse(request, "create-course.html", {})


@router.post("/courses")
def create_course(
    name: str = Form(""),
    professor: str = Form(""),
    courses: CourseService = Depends(get_course_service),
):
    courses.create_course(Course(name=name, professor=professor))
    return _redirect("/courses")


@router.post("/courses/{course_id}/delete")
def delete_course(course_id: int, courses: CourseService = Depends(get_course_service)):
    courses.delete_course(course_id)
    return _redirect("/courses")
