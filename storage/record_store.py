# storage/record_store.py
import asyncio
import itertools
import logging
import random
import string
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Union

from config import StoreSettings
from models.course import Course
from models.student import (
    CourseEnrollment,
    Student,
    StudentCreate,
    StudentStatistics,
    StudentUpdate,
    dump_students,
    load_students,
)
from storage.backends import StorageBackend
from storage.catalog import list_catalog
from storage.errors import ServiceUnavailableError, StudentNotFoundError

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
# These fields can't be cleared by an update, a None means "leave as is"
_REQUIRED_FIELDS = ("name", "email", "enrolledCourse")

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class RecordStore:
    """Student collection persisted as one text slot behind a simulated remote API.

    Every operation waits a random delay from the configured window before
    touching storage. The whole collection is read from the backend at the start
    of each operation and written back in full after each mutation. There is no
    locking, so concurrent mutations are last-write-wins on the collection.
    """

    def __init__(
        self,
        backend: StorageBackend,
        settings: Optional[StoreSettings] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.backend = backend
        self.settings = settings or StoreSettings()
        self._rng = rng or random.Random()
        self._clock = clock or _utcnow
        self._sequence = itertools.count(1)

    async def _simulate_network_delay(self) -> None:
        delay_ms = self._rng.uniform(self.settings.min_delay_ms, self.settings.max_delay_ms)
        await asyncio.sleep(delay_ms / 1000)

    def _maybe_fail(self, rate: float, message: str) -> None:
        if rate > 0 and self._rng.random() < rate:
            logger.warning(f"Simulated API failure: {message}")
            raise ServiceUnavailableError(message)

    async def _load(self) -> List[Student]:
        text = await self.backend.read(self.settings.storage_key)
        return load_students(text)

    async def _save(self, students: List[Student]) -> None:
        try:
            await self.backend.write(self.settings.storage_key, dump_students(students))
        except Exception as e:
            logger.error(f"Error saving students to storage: {str(e)}")
            raise

    def _new_id(self, existing: List[Student], now: datetime) -> str:
        taken = {s.id for s in existing}
        while True:
            suffix = "".join(self._rng.choice(_ID_ALPHABET) for _ in range(9))
            student_id = f"student_{int(now.timestamp() * 1000)}_{next(self._sequence)}_{suffix}"
            if student_id not in taken:
                return student_id

    def _touch(self, previous: datetime) -> datetime:
        # Strictly after the previous stamp even if the clock hasn't moved
        return max(self._clock(), previous + timedelta(microseconds=1))

    async def list_courses(self) -> List[Course]:
        await self._simulate_network_delay()
        self._maybe_fail(self.settings.course_failure_rate, "Failed to fetch courses. Please try again.")
        return list_catalog()

    async def list_students(self) -> List[Student]:
        await self._simulate_network_delay()
        self._maybe_fail(self.settings.student_failure_rate, "Failed to fetch students. Please try again.")
        students = await self._load()
        logger.info(f"Fetched {len(students)} students")
        return students

    async def create_student(self, draft: Union[StudentCreate, Dict]) -> Student:
        if not isinstance(draft, StudentCreate):
            draft = StudentCreate.model_validate(draft)
        await self._simulate_network_delay()
        self._maybe_fail(self.settings.student_failure_rate, "Failed to create student. Please try again.")

        students = await self._load()
        now = self._clock()
        student = Student(
            **draft.model_dump(),
            id=self._new_id(students, now),
            createdAt=now,
            updatedAt=now,
        )
        students.append(student)
        await self._save(students)
        logger.info(f"Created student {student.id}")
        return student

    async def update_student(self, student_id: str, updates: Union[StudentUpdate, Dict]) -> Student:
        if not isinstance(updates, StudentUpdate):
            updates = StudentUpdate.model_validate(updates)
        await self._simulate_network_delay()
        self._maybe_fail(self.settings.student_failure_rate, "Failed to update student. Please try again.")

        students = await self._load()
        index = next((i for i, s in enumerate(students) if s.id == student_id), None)
        if index is None:
            logger.warning(f"Update failed, student not found: {student_id}")
            raise StudentNotFoundError(student_id)

        changes = {
            key: value
            for key, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or key not in _REQUIRED_FIELDS
        }
        existing = students[index]
        updated = existing.model_copy(
            update={**changes, "id": student_id, "updatedAt": self._touch(existing.updatedAt)}
        )
        students[index] = updated
        await self._save(students)
        logger.info(f"Updated student {student_id}: {sorted(changes)}")
        return updated

    async def delete_student(self, student_id: str) -> None:
        await self._simulate_network_delay()
        self._maybe_fail(self.settings.student_failure_rate, "Failed to delete student. Please try again.")

        students = await self._load()
        remaining = [s for s in students if s.id != student_id]
        if len(remaining) == len(students):
            logger.warning(f"Delete failed, student not found: {student_id}")
            raise StudentNotFoundError(student_id)
        await self._save(remaining)
        logger.info(f"Deleted student {student_id}")

    async def search_students(self, query: Optional[str]) -> List[Student]:
        """Case-insensitive match on name, email or enrolled course name.

        A blank query returns everything. Otherwise the query is matched as
        typed, surrounding spaces included.
        """
        students = await self.list_students()
        if not query or not query.strip():
            return students
        needle = query.lower()
        course_names = {course.id: course.name for course in list_catalog()}
        matched = []
        for student in students:
            # Dangling course references only match on name and email
            course_name = course_names.get(student.enrolledCourse, "")
            if (
                needle in student.name.lower()
                or needle in student.email.lower()
                or needle in course_name.lower()
            ):
                matched.append(student)
        return matched

    async def statistics(self) -> StudentStatistics:
        students = await self.list_students()
        enrollment = [
            CourseEnrollment(
                courseId=course.id,
                courseName=course.name,
                count=sum(1 for s in students if s.enrolledCourse == course.id),
            )
            for course in list_catalog()
        ]
        most_popular = "None"
        best = 0
        for entry in enrollment:
            if entry.count > best:
                best = entry.count
                most_popular = entry.courseName
        return StudentStatistics(
            totalStudents=len(students),
            courseEnrollment=enrollment,
            mostPopularCourse=most_popular,
        )
