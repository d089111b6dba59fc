# storage/backends.py
import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional
from motor.motor_asyncio import AsyncIOMotorClient

from config import StoreSettings

logger = logging.getLogger(__name__)

class StorageBackend:
    """Read-full / write-full access to named text slots."""

    async def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def write(self, key: str, value: str) -> None:
        raise NotImplementedError

class MemoryBackend(StorageBackend):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    async def read(self, key: str) -> Optional[str]:
        await asyncio.sleep(0)
        return self._slots.get(key)

    async def write(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        self._slots[key] = value

class FileBackend(StorageBackend):
    """One UTF-8 file per slot, named <key>.json, under a base directory."""

    def __init__(self, base_dir):
        self.base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def _read_sync(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"Storage file {path} is not valid UTF-8: {str(e)}")
            return None

    def _write_sync(self, key: str, value: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        # A private temp file per write, so overlapping writes never share one
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f"{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        finally:
            if os.path.exists(tmp):
                os.remove(tmp)

    async def read(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read_sync, key)

    async def write(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write_sync, key, value)

class MongoBackend(StorageBackend):
    """Slots stored as {"_id": key, "value": text} documents."""

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def from_uri(cls, uri: str, db_name: str, collection_name: str = "storage"):
        client = AsyncIOMotorClient(uri)
        return cls(client[db_name][collection_name])

    async def read(self, key: str) -> Optional[str]:
        doc = await self.collection.find_one({"_id": key})
        if doc is None:
            return None
        value = doc.get("value")
        if not isinstance(value, str):
            logger.error(f"Storage slot {key} holds a non-text value")
            return None
        return value

    async def write(self, key: str, value: str) -> None:
        await self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

def build_backend(settings: StoreSettings) -> StorageBackend:
    if settings.backend == "memory":
        return MemoryBackend()
    if settings.backend == "file":
        return FileBackend(settings.file_path)
    if settings.backend == "mongo":
        return MongoBackend.from_uri(settings.mongodb_uri, settings.mongodb_db)
    raise ValueError(f"Unknown storage backend: {settings.backend}")
