# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import CORS_ORIGINS, load_store_settings
from routes import courses, students
from storage.backends import build_backend
from storage.record_store import RecordStore

logger = logging.getLogger(__name__)

def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    if store is None:
        settings = load_store_settings()
        store = RecordStore(build_backend(settings), settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Record store ready: backend={type(store.backend).__name__}, "
            f"slot={store.settings.storage_key}"
        )
        yield

    app = FastAPI(title="Student Dashboard API", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(courses.router)
    app.include_router(students.router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
