"""In-memory object stores used by the upload tests."""

import asyncio

from app.services.storage_service import ObjectStore, StorageError


class ScriptedObjectStore(ObjectStore):
    """Stores objects in memory. Content listed in ``delays`` is held back; content in ``failures`` raises."""

    def __init__(self, delays=None, failures=None):
        self.delays = dict(delays or {})
        self.failures = set(failures or ())
        self.objects = {}
        self.calls = []
        self.completed = []

    async def upload(self, container, key, content, content_type=None):
        self.calls.append((container, key))
        await asyncio.sleep(self.delays.get(content, 0))
        if content in self.failures:
            raise StorageError(f"rejected {key}")
        self.objects[key] = content
        self.completed.append(content)

    def public_url(self, container, key):
        return f"https://cdn.test/{container}/{key}"

    def content_for(self, url):
        return self.objects[url.rsplit("/", 1)[-1]]


class BlockingObjectStore(ObjectStore):
    """Every upload waits until ``release`` is set."""

    def __init__(self):
        self.release = asyncio.Event()
        self.started = 0

    async def upload(self, container, key, content, content_type=None):
        self.started += 1
        await self.release.wait()

    def public_url(self, container, key):
        return f"https://cdn.test/{container}/{key}"
