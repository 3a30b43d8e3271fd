from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import get_course_service, get_task_service
from ..models import Course as CourseModel
from ..schemas.course import Course as CourseSchema, CourseCreate, CourseUpdate
from ..schemas.task import Task as TaskSchema
from ..services import CourseService, TaskService

router = APIRouter()


@router.get("/courses", response_model=List[CourseSchema])
def get_courses(service: CourseService = Depends(get_course_service)):
    """Get all courses ordered by name."""
    return service.get_all_courses()


@router.post("/courses", response_model=CourseSchema, status_code=status.HTTP_201_CREATED)
def create_course(course: CourseCreate, service: CourseService = Depends(get_course_service)):
    return service.create_course(CourseModel(**course.model_dump()))


@router.get("/courses/{course_id}", response_model=CourseSchema)
def get_course(course_id: int, service: CourseService = Depends(get_course_service)):
    return service.get_course(course_id)


@router.put("/courses/{course_id}", response_model=CourseSchema)
def update_course(
    course_id: int,
    course_update: CourseUpdate,
    service: CourseService = Depends(get_course_service),
):
    """Update a course. Only provided fields are changed."""
    course = service.get_course(course_id)
    for field, value in course_update.model_dump(exclude_unset=True).items():
        setattr(course, field, value)
    return service.update_course(course)


@router.delete("/courses/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: int, service: CourseService = Depends(get_course_service)):
    """Delete a course. Tasks referencing it are left in place."""
    service.delete_course(course_id)


@router.get("/courses/{course_id}/tasks", response_model=List[TaskSchema])
def get_course_tasks(course_id: int, service: TaskService = Depends(get_task_service)):
    """Get the tasks attached to a course."""
    return service.get_tasks_for_course(course_id)
