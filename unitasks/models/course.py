from sqlalchemy import Column
from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional

from ..database import UTCTimestamp


class Course(SQLModel, table=True):
    """A university course that tasks can be attached to."""
    __tablename__ = "courses"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    professor: str = Field(default="")
    created_at: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCTimestamp(), nullable=False)
    )
    updated_at: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCTimestamp(), nullable=False)
    )
