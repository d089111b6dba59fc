# models/response.py
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    data: T
    message: Optional[str] = None
    error: Optional[str] = None
