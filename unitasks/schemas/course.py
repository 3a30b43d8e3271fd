from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional

from ..clock import as_utc


class CourseBase(BaseModel):
    name: str
    professor: str = ""


class CourseCreate(CourseBase):
    pass


class CourseUpdate(BaseModel):
    name: Optional[str] = None
    professor: Optional[str] = None


class Course(CourseBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("created_at", "updated_at")
    @classmethod
    def mark_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
