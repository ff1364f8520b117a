"""
Web Configuration - Centralized settings management
"""
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel
from dotenv import load_dotenv

# Load backend/.env; real environment variables win
_backend_env = Path(__file__).parent.parent.parent / ".env"
if _backend_env.exists():
    load_dotenv(_backend_env)

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class AppConfig(BaseModel):
    """Application configuration with environment variable support"""

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Storage
    database_path: Path = PROJECT_ROOT / "data" / "todo_tasks.db"
    seed_data: bool = False

    # Rate limiting (slowapi limit string, e.g. "60/minute")
    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True

    # CORS
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables"""
        log_file = os.getenv("TODO_LOG_FILE", "")
        return cls(
            host=os.getenv("TODO_HOST", "127.0.0.1"),
            port=int(os.getenv("TODO_PORT", "8000")),
            debug=_env_flag("TODO_DEBUG", "0"),
            database_path=Path(
                os.getenv("TODO_DATABASE_PATH", str(PROJECT_ROOT / "data" / "todo_tasks.db"))
            ),
            seed_data=_env_flag("TODO_SEED_DATA", "0"),
            rate_limit=os.getenv("TODO_RATE_LIMIT", "60/minute"),
            rate_limit_enabled=_env_flag("TODO_RATE_LIMIT_ENABLED", "1"),
            cors_origins=_env_list("TODO_CORS_ORIGINS", "*"),
            log_level=os.getenv("TODO_LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
        )
