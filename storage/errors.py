# storage/errors.py

class StoreError(Exception):
    """Base error for record store operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class StudentNotFoundError(StoreError):
    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__("Student not found")

class ServiceUnavailableError(StoreError):
    """Simulated transient failure. Retrying may succeed; no state was changed."""
