from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import String
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, create_engine

# Fixed text format for every timestamp column.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class UTCTimestamp(TypeDecorator):
    """Naive-UTC datetime stored as fixed-format text.

    Aware values are converted to UTC before formatting. A stored value
    that does not match the format raises ``ValueError`` on read instead of
    being silently replaced.
    """

    impl = String(32)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[str]:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.strftime(TIMESTAMP_FORMAT)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[datetime]:
        if value is None:
            return None
        try:
            return datetime.strptime(value, TIMESTAMP_FORMAT)
        except ValueError as exc:
            raise ValueError(f"malformed stored timestamp {value!r}") from exc


def create_db_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for ``database_url``."""
    if database_url.startswith("sqlite"):
        url = make_url(database_url)
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees a fresh empty db.
            return create_engine(
                database_url,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )


def create_tables(engine: Engine) -> None:
    """Create all database tables that do not exist yet."""
    # Import models so they are registered with SQLModel metadata
    from .models import Course, Task  # noqa: F401

    SQLModel.metadata.create_all(bind=engine)
