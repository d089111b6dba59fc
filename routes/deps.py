# routes/deps.py
from fastapi import Request
from storage.record_store import RecordStore

def get_store(request: Request) -> RecordStore:
    return request.app.state.store
