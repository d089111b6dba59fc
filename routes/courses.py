# routes/courses.py
from fastapi import APIRouter, HTTPException, Depends
from typing import List
from models.course import Course
from models.response import ApiResponse
from storage.errors import ServiceUnavailableError
from storage.record_store import RecordStore
from .deps import get_store

router = APIRouter(prefix="/api/courses", tags=["courses"])

@router.get("/", response_model=ApiResponse[List[Course]])
async def get_courses(store: RecordStore = Depends(get_store)):
    try:
        courses = await store.list_courses()
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return ApiResponse(data=courses, message="Courses fetched successfully")
