"""업로드 이미지를 위한 오브젝트 스토리지 백엔드입니다.

업로더는 ``upload(container, key, content)``와 ``public_url(container, key)``
두 연산에만 의존합니다. ``LocalObjectStore``는 ``settings.UPLOAD_DIR`` 아래에
파일을 두고(``/uploads``로 서빙), ``SupabaseObjectStore``는 HTTP로 Supabase
스토리지 버킷과 통신합니다.
"""

import asyncio
import logging
import os
from typing import Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """오브젝트를 저장하지 못했을 때 발생합니다."""


class ObjectStore:
    async def upload(self, container: str, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        raise NotImplementedError

    def public_url(self, container: str, key: str) -> str:
        raise NotImplementedError


class LocalObjectStore(ObjectStore):
    def __init__(self, root: Optional[str] = None, base_url: Optional[str] = None):
        self.root = root
        self.base_url = base_url

    def _root(self) -> str:
        return self.root or settings.UPLOAD_DIR

    def _base_url(self) -> str:
        return (self.base_url if self.base_url is not None else settings.PUBLIC_BASE_URL).rstrip("/")

    def _write(self, container: str, key: str, content: bytes) -> None:
        folder = os.path.join(self._root(), container)
        os.makedirs(folder, exist_ok=True)
        with open(os.path.join(folder, key), "wb") as f:
            f.write(content)

    async def upload(self, container: str, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        try:
            await asyncio.to_thread(self._write, container, key, content)
        except OSError as exc:
            logger.warning("[storage] local write failed for %s/%s: %s", container, key, exc)
            raise StorageError(f"Failed to store {container}/{key}") from exc

    def public_url(self, container: str, key: str) -> str:
        return f"{self._base_url()}/uploads/{container}/{key}"


class SupabaseObjectStore(ObjectStore):
    def __init__(
        self,
        base_url: Optional[str] = None,
        service_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.SUPABASE_URL).rstrip("/")
        self.service_key = service_key or settings.SUPABASE_SERVICE_KEY
        self.timeout = timeout or settings.STORAGE_TIMEOUT_SECONDS
        self._transport = transport

    def _build_headers(self, content_type: Optional[str]) -> dict:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            "Content-Type": content_type or "application/octet-stream",
            "x-upsert": "false",
        }

    async def upload(self, container: str, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        if not self.base_url:
            raise StorageError("SUPABASE_URL is not configured.")
        url = f"{self.base_url}/storage/v1/object/{container}/{key}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, content=content, headers=self._build_headers(content_type))
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("[storage] supabase upload failed for %s/%s: %s", container, key, exc)
            raise StorageError(f"Failed to store {container}/{key}") from exc

    def public_url(self, container: str, key: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{container}/{key}"


def get_object_store() -> ObjectStore:
    backend = (settings.STORAGE_BACKEND or "local").strip().lower()
    if backend == "supabase":
        return SupabaseObjectStore()
    if backend != "local":
        logger.warning("[storage] unknown STORAGE_BACKEND=%s, falling back to local", backend)
    return LocalObjectStore()
