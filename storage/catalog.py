# storage/catalog.py
from typing import List
from models.course import Course

COURSES: List[Course] = [
    Course(id="1", name="Computer Science", code="CS101", description="Introduction to Programming", credits=3),
    Course(id="2", name="Mathematics", code="MATH201", description="Advanced Calculus", credits=4),
    Course(id="3", name="Physics", code="PHYS101", description="Classical Mechanics", credits=3),
    Course(id="4", name="Chemistry", code="CHEM101", description="General Chemistry", credits=3),
    Course(id="5", name="Biology", code="BIO101", description="Cell Biology", credits=3),
    Course(id="6", name="English Literature", code="ENG201", description="Modern Literature", credits=3),
    Course(id="7", name="History", code="HIST101", description="World History", credits=3),
    Course(id="8", name="Psychology", code="PSYC101", description="Introduction to Psychology", credits=3),
]

def list_catalog() -> List[Course]:
    # Copies, so callers can't mutate the shared catalog
    return [course.model_copy() for course in COURSES]

def course_display_name(course_id: str, courses: List[Course]) -> str:
    """Course name for an id, or the raw id when it matches no catalog entry."""
    for course in courses:
        if course.id == course_id:
            return course.name
    return course_id
