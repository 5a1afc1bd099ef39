"""
Shared fixtures: a small book index and in-memory substitute providers.
"""

import json
from typing import Any, Optional

import pytest

from docsearch.indexing import BlobResponse
from docsearch.models import SearchIndex


SAMPLE_INDEX = {
    "version": "1.0.0",
    "generated_at": "2026-01-01T00:00:00Z",
    "config": {"heading_split_level": 2, "include_auth": False},
    "documents": [
        {
            "path": "/intro",
            "title": "Introduction",
            "body": "Welcome to the book. This guide explains installation and configuration.",
            "headings": [
                {"level": 2, "text": "Installation", "anchor": "#installation"},
                {"level": 2, "text": "About this book", "anchor": "#about"},
            ],
        },
        {
            "path": "/guide/install",
            "title": "Installation Guide",
            "body": "Run the installer. Installation requires network access.",
            "headings": [
                {"level": 2, "text": "Prerequisites", "anchor": "#prerequisites"},
                {"level": 2, "text": "Installation on Linux", "anchor": "#linux"},
            ],
        },
        {
            "path": "/reference/config",
            "title": "Configuration Reference",
            "body": "Every configuration key is listed below.",
            "auth": {"authn": "required", "authz": ["admin"]},
        },
    ],
}


@pytest.fixture
def sample_payload() -> dict:
    """A fresh copy of the sample index payload."""
    return json.loads(json.dumps(SAMPLE_INDEX))


@pytest.fixture
def sample_index(sample_payload) -> SearchIndex:
    return SearchIndex.from_dict(sample_payload)


def make_index(*documents: dict) -> SearchIndex:
    """Build an index from bare document dicts."""
    return SearchIndex.from_dict({
        "version": "1.0.0",
        "generated_at": "",
        "config": {"heading_split_level": 2, "include_auth": False},
        "documents": list(documents),
    })


class FakeKeyValue:
    """In-memory key/value provider that records reads."""

    def __init__(self, data: Optional[dict] = None, error: Optional[Exception] = None):
        self.data = data or {}
        self.error = error
        self.calls: list[str] = []

    async def get(self, key: str) -> Optional[Any]:
        self.calls.append(key)
        if self.error:
            raise self.error
        return self.data.get(key)


class FakeBlob:
    """In-memory blob provider that records fetches."""

    def __init__(
        self,
        files: Optional[dict] = None,
        error: Optional[Exception] = None,
        status: Optional[int] = None,
    ):
        self.files = files or {}
        self.error = error
        self.status = status
        self.calls: list[str] = []

    async def fetch(self, path: str) -> BlobResponse:
        self.calls.append(path)
        if self.error:
            raise self.error
        if path not in self.files:
            return BlobResponse(status=404)
        return BlobResponse(status=self.status or 200, body=self.files[path])
