# /boilerforge-backend/app/services/storage_service.py

"""
Object storage for generated archives.

Two backends share one small interface (`upload` -> public URL):
- LocalStorage writes to disk; main.py serves that directory at /downloads.
- SupabaseStorage talks to the Supabase Storage REST API through httpx.
"""

import asyncio
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

import httpx

from ..core import config

ZIP_CONTENT_TYPE = "application/zip"


class StorageUploadError(Exception):
    """Raised when the archive could not be stored."""


def new_archive_name() -> str:
    return f"boilerplate-{uuid.uuid4()}.zip"


class StorageService(ABC):
    @abstractmethod
    async def upload(self, file_name: str, data: bytes, content_type: str = ZIP_CONTENT_TYPE) -> str:
        """Stores the archive and returns its public download URL."""


class LocalStorage(StorageService):
    def __init__(self, directory: str, public_base_url: str):
        self.directory = Path(directory)
        self.public_base_url = public_base_url.rstrip("/")

    def _write(self, file_name: str, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / file_name).write_bytes(data)

    async def upload(self, file_name: str, data: bytes, content_type: str = ZIP_CONTENT_TYPE) -> str:
        try:
            await asyncio.to_thread(self._write, file_name, data)
        except OSError as e:
            raise StorageUploadError(f"Upload failed: {e}")
        return f"{self.public_base_url}/downloads/{file_name}"


class SupabaseStorage(StorageService):
    def __init__(self, base_url: str, service_key: str, bucket: str,
                 timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not base_url or not service_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set for the supabase storage backend.")
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket = bucket
        self.timeout = timeout
        self._transport = transport

    def public_url(self, file_name: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{file_name}"

    async def upload(self, file_name: str, data: bytes, content_type: str = ZIP_CONTENT_TYPE) -> str:
        headers = {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            "Content-Type": content_type,
        }
        url = f"{self.base_url}/storage/v1/object/{self.bucket}/{file_name}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, content=data, headers=headers)
        except httpx.HTTPError as e:
            raise StorageUploadError(f"Upload failed: {e}")

        if response.status_code >= 400:
            try:
                message = response.json().get("message") or response.text
            except ValueError:
                message = response.text
            raise StorageUploadError(f"Upload failed: {message}")

        return self.public_url(file_name)


def build_storage_service() -> StorageService:
    if config.STORAGE_BACKEND == "supabase":
        return SupabaseStorage(
            base_url=config.SUPABASE_URL,
            service_key=config.SUPABASE_SERVICE_ROLE_KEY,
            bucket=config.STORAGE_BUCKET,
            timeout=config.STORAGE_TIMEOUT_SECONDS,
        )
    if config.STORAGE_BACKEND == "local":
        return LocalStorage(config.LOCAL_STORAGE_DIR, config.PUBLIC_BASE_URL)
    raise ValueError(f"Unknown STORAGE_BACKEND '{config.STORAGE_BACKEND}'. Use 'local' or 'supabase'.")


_storage_instance = None


def get_storage_service() -> StorageService:
    """The configured backend, built once on first use."""
    global _storage_instance
    if _storage_instance is None:
        _storage_instance = build_storage_service()
    return _storage_instance


def get_storage_provider() -> Callable[[], StorageService]:
    """
    FastAPI dependency. Hands out the factory rather than the backend, so a
    misconfigured backend only fails requests that actually upload, and
    fails them inside the route's own error handling.
    """
    return get_storage_service
