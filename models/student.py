# models/student.py
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator
from datetime import datetime, timezone
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

class StudentCreate(BaseModel):
    name: str
    email: str
    enrolledCourse: str
    profileImage: Optional[str] = None  # URL or data URI

class StudentUpdate(BaseModel):
    # Extra keys such as "id" are dropped, identity is never taken from the payload
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    enrolledCourse: Optional[str] = None
    profileImage: Optional[str] = None

class Student(StudentCreate):
    id: str
    createdAt: datetime
    updatedAt: datetime

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Older data may carry naive timestamps
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

class CourseEnrollment(BaseModel):
    courseId: str
    courseName: str
    count: int

class StudentStatistics(BaseModel):
    totalStudents: int
    courseEnrollment: List[CourseEnrollment] = []
    mostPopularCourse: str = "None"

_students_adapter = TypeAdapter(List[Student])

def dump_students(students: List[Student]) -> str:
    """Serialize the whole collection to the persisted JSON text."""
    return _students_adapter.dump_json(students).decode("utf-8")

def load_students(text: Optional[str]) -> List[Student]:
    """Parse the persisted JSON text.

    A missing slot is an empty collection. Unparseable or malformed content is
    logged and also treated as an empty collection.
    """
    if not text:
        return []
    try:
        return _students_adapter.validate_json(text)
    except ValidationError as e:
        logger.error(f"Error loading students from storage: {str(e)}")
        return []
