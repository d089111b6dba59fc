# utils/validation.py
import random
import re
from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel

# One "@", at least one "." after it, no whitespace
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PROFILE_IMAGE_URLS = [
    "https://randomuser.me/api/portraits/men/32.jpg",
    "https://randomuser.me/api/portraits/men/44.jpg",
    "https://randomuser.me/api/portraits/men/76.jpg",
    "https://randomuser.me/api/portraits/men/65.jpg",
    "https://randomuser.me/api/portraits/women/23.jpg",
    "https://randomuser.me/api/portraits/men/85.jpg",
    "https://randomuser.me/api/portraits/women/91.jpg",
    "https://randomuser.me/api/portraits/men/53.jpg",
    "https://randomuser.me/api/portraits/women/36.jpg",
]

def _field(candidate: Any, name: str) -> str:
    if isinstance(candidate, BaseModel):
        value = getattr(candidate, name, None)
    elif isinstance(candidate, Mapping):
        value = candidate.get(name)
    else:
        value = None
    if not isinstance(value, str):
        return ""
    return value.strip()

def validate_student(candidate: Any) -> Dict[str, str]:
    """
    Check a (possibly partial) student against the form rules.
    Args:
        candidate: mapping or pydantic model with name, email and enrolledCourse.
    Returns:
        dict: field name -> message, empty when the candidate is valid.
    """
    errors: Dict[str, str] = {}

    name = _field(candidate, "name")
    if not name:
        errors["name"] = "Name is required"
    elif len(name) < 2:
        errors["name"] = "Name must be at least 2 characters"

    email = _field(candidate, "email")
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_REGEX.match(email):
        errors["email"] = "Please enter a valid email address"

    if not _field(candidate, "enrolledCourse"):
        errors["enrolledCourse"] = "Please select a course"

    return errors

def is_form_valid(errors: Mapping[str, str]) -> bool:
    return len(errors) == 0

def visible_errors(errors: Mapping[str, str], touched: Iterable[str]) -> Dict[str, str]:
    """Only the errors for fields the user has interacted with."""
    touched = set(touched)
    return {field: message for field, message in errors.items() if field in touched}

def generate_profile_image(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(PROFILE_IMAGE_URLS)
