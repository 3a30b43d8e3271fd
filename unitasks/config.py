from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import os

from dotenv import load_dotenv

# Load environment variables from repo root (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATABASE_URL = "sqlite:///./data/uni-tasks.db"
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"

# Text format of the datetime-local inputs used by the web forms.
FORM_DUE_DATE_FORMAT = "%Y-%m-%dT%H:%M"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Runtime configuration, built once at startup and passed to the app factory."""

    database_url: str = DEFAULT_DATABASE_URL
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:8000"])
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("UNITASKS_DATABASE_URL", DEFAULT_DATABASE_URL),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:8000")),
            templates_dir=Path(os.getenv("UNITASKS_TEMPLATES_DIR", str(DEFAULT_TEMPLATES_DIR))),
            log_level=os.getenv("UNITASKS_LOG_LEVEL", "INFO").upper(),
            host=os.getenv("UNITASKS_HOST", "0.0.0.0"),
            port=int(os.getenv("UNITASKS_PORT", "8000")),
        )
