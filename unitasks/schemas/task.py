from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from ..clock import as_utc
from ..models import TaskStatus


class TaskBase(BaseModel):
    """Base task schema with common fields."""
    title: str
    description: str = ""
    due_date: Optional[datetime] = None
    priority: int
    status: Optional[TaskStatus] = None
    course_id: Optional[int] = None


class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass


class TaskUpdate(BaseModel):
    """Schema for updating existing tasks. Unset fields keep their stored value."""
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[int] = None
    status: Optional[TaskStatus] = None
    course_id: Optional[int] = Field(default=None)


class Task(TaskBase):
    """Complete task schema with all fields."""
    id: int
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def mark_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Stored values are naive UTC
        return as_utc(value)
