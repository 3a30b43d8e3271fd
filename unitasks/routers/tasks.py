from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import get_task_service
from ..models import Task as TaskModel
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate
from ..services import TaskService

router = APIRouter()


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(service: TaskService = Depends(get_task_service)):
    """Get all tasks, soonest due first."""
    return service.get_all_tasks()


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task."""
    return service.create_task(TaskModel(**task.model_dump()))


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID."""
    return service.get_task(task_id)


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Update a specific task. Only provided fields are changed."""
    task = service.get_task(task_id)
    for field, value in task_update.model_dump(exclude_unset=True).items():
        setattr(task, field, value)
    return service.update_task(task)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Delete a specific task."""
    service.delete_task(task_id)
