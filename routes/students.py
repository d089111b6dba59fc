# routes/students.py
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Dict, List, Optional
import logging
from models.response import ApiResponse
from models.student import Student, StudentCreate, StudentStatistics, StudentUpdate
from storage.errors import ServiceUnavailableError, StudentNotFoundError
from storage.record_store import RecordStore
from utils.validation import generate_profile_image, is_form_valid, validate_student, visible_errors
from .deps import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["students"])

class ValidationRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    enrolledCourse: Optional[str] = None
    profileImage: Optional[str] = None
    touched: Optional[List[str]] = None  # fields the user has interacted with

class ValidationReport(BaseModel):
    errors: Dict[str, str]
    valid: bool

def _reject_invalid(errors: Dict[str, str]):
    if not is_form_valid(errors):
        logger.info(f"Rejected student payload: {errors}")
        raise HTTPException(status_code=422, detail={"errors": errors})

@router.get("/", response_model=ApiResponse[List[Student]])
async def get_students(search: Optional[str] = None, store: RecordStore = Depends(get_store)):
    try:
        students = await store.search_students(search)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return ApiResponse(data=students, message="Students fetched successfully")

@router.get("/statistics", response_model=ApiResponse[StudentStatistics])
async def get_statistics(store: RecordStore = Depends(get_store)):
    try:
        stats = await store.statistics()
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return ApiResponse(data=stats, message="Statistics computed successfully")

@router.post("/validate", response_model=ValidationReport)
async def validate(candidate: ValidationRequest):
    errors = validate_student(candidate)
    if candidate.touched is not None:
        shown = visible_errors(errors, candidate.touched)
    else:
        shown = errors
    return ValidationReport(errors=shown, valid=is_form_valid(errors))

@router.post("/", response_model=ApiResponse[Student], status_code=201)
async def add_student(student: StudentCreate, store: RecordStore = Depends(get_store)):
    _reject_invalid(validate_student(student))
    draft = StudentCreate(
        name=student.name.strip(),
        email=student.email.strip(),
        enrolledCourse=student.enrolledCourse,
        profileImage=student.profileImage or generate_profile_image(),
    )
    try:
        created = await store.create_student(draft)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return ApiResponse(data=created, message="Student created successfully")

@router.put("/{id}", response_model=ApiResponse[Student])
async def update_student(id: str, updates: StudentUpdate, store: RecordStore = Depends(get_store)):
    supplied = updates.model_dump(exclude_unset=True)
    # Only the fields being changed are checked, the rest were valid when stored
    errors = validate_student(supplied)
    _reject_invalid({field: msg for field, msg in errors.items() if field in supplied})
    for field in ("name", "email"):
        if isinstance(supplied.get(field), str):
            supplied[field] = supplied[field].strip()
    try:
        updated = await store.update_student(id, supplied)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return ApiResponse(data=updated, message="Student updated successfully")

@router.delete("/{id}", response_model=ApiResponse[None])
async def delete_student(id: str, store: RecordStore = Depends(get_store)):
    try:
        await store.delete_student(id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return ApiResponse(data=None, message="Student deleted successfully")
