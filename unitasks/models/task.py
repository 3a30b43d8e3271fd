from sqlalchemy import Column
from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional
import enum

from ..database import UTCTimestamp


class TaskStatus(str, enum.Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


class Task(SQLModel, table=True):
    """A piece of university work: an assignment, homework or exam.

    Priority ranges from 1 (lowest) to 5 (highest). ``course_id`` is an
    optional reference to a Course; it is not enforced by the database.
    """
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str = Field(default="")
    due_date: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCTimestamp(), nullable=True, index=True)
    )
    priority: int = Field(default=3)
    status: TaskStatus = Field(default=TaskStatus.pending)
    course_id: Optional[int] = Field(default=None, foreign_key="courses.id", index=True)
    created_at: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCTimestamp(), nullable=False)
    )
    updated_at: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCTimestamp(), nullable=False)
    )
