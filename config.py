# config.py
import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

logging.basicConfig(level=LOG_LEVEL)

@dataclass(frozen=True)
class StoreSettings:
    backend: str = "memory"
    storage_key: str = "students_dashboard_data"
    file_path: str = "data"
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "student_dashboard_db"
    min_delay_ms: float = 0
    max_delay_ms: float = 0
    course_failure_rate: float = 0.0
    student_failure_rate: float = 0.0

    def __post_init__(self):
        if self.min_delay_ms < 0 or self.max_delay_ms < self.min_delay_ms:
            raise ValueError(f"Invalid delay window: {self.min_delay_ms}-{self.max_delay_ms} ms")
        for name in ("course_failure_rate", "student_failure_rate"):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {rate}")

def load_store_settings() -> StoreSettings:
    """Build store settings from the environment (.env is loaded on import)."""
    return StoreSettings(
        backend=os.getenv("STORAGE_BACKEND", "file").lower(),
        storage_key=os.getenv("STUDENTS_STORAGE_KEY", "students_dashboard_data"),
        file_path=os.getenv("STUDENTS_FILE_PATH", "data"),
        mongodb_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        mongodb_db=os.getenv("MONGODB_DB", "student_dashboard_db"),
        min_delay_ms=float(os.getenv("API_MIN_DELAY_MS", "500")),
        max_delay_ms=float(os.getenv("API_MAX_DELAY_MS", "1500")),
        course_failure_rate=float(os.getenv("COURSE_FAILURE_RATE", "0.1")),
        student_failure_rate=float(os.getenv("STUDENT_FAILURE_RATE", "0.0")),
    )
