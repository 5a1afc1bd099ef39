"""
Storage providers the index loader reads from.

Two roles:
- KeyValueProvider: a cache-like store returning parsed JSON by key
- BlobProvider: a static asset origin returning raw bytes by path

Providers are passed to the loader explicitly, so tests can substitute
in-memory fakes.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol

import httpx
from anyio import to_thread

logger = logging.getLogger(__name__)


# ============================================================================
# Provider interfaces
# ============================================================================

@dataclass(frozen=True)
class BlobResponse:
    """Raw response from a blob provider."""
    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body)


class KeyValueProvider(Protocol):
    """Key/value store returning parsed JSON, or None when the key is absent."""

    async def get(self, key: str) -> Optional[Any]:
        ...


class BlobProvider(Protocol):
    """Blob store addressed by a relative path."""

    async def fetch(self, path: str) -> BlobResponse:
        ...


# ============================================================================
# Filesystem providers
# ============================================================================

class DirectoryKeyValueStore:
    """Key/value store backed by `<root>/<key>.json` files."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def _read(self, key: str) -> Optional[Any]:
        target = self.root / f"{key}.json"
        if not target.is_file():
            return None
        with open(target, "r", encoding="utf-8") as f:
            return json.load(f)

    async def get(self, key: str) -> Optional[Any]:
        return await to_thread.run_sync(self._read, key)


class LocalBlobProvider:
    """Serves files from a built asset directory."""

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def _read(self, path: str) -> BlobResponse:
        target = (self.root / path.lstrip("/")).resolve()
        # Reject paths that escape the asset root
        if not target.is_relative_to(self.root) or not target.is_file():
            return BlobResponse(status=404)
        return BlobResponse(status=200, body=target.read_bytes())

    async def fetch(self, path: str) -> BlobResponse:
        return await to_thread.run_sync(self._read, path)


# ============================================================================
# Remote provider
# ============================================================================

class HttpBlobProvider:
    """Fetches assets from a remote origin over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, path: str) -> BlobResponse:
        url = f"{self.base_url}/{path.lstrip('/')}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(url)
        logger.debug(f"GET {url} -> {resp.status_code}")
        return BlobResponse(status=resp.status_code, body=resp.content)
