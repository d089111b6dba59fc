# models/course.py
from pydantic import BaseModel

class Course(BaseModel):
    id: str
    name: str
    code: str
    description: str
    credits: int
