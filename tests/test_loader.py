"""
Tests for the fallback-chain index loader and filesystem providers.

Run with: pytest tests/test_loader.py -v
"""

import asyncio
import json

import httpx
import pytest

from docsearch.indexing import (
    DirectoryKeyValueStore,
    HttpBlobProvider,
    IndexLoader,
    IndexUnavailable,
    LocalBlobProvider,
)

from conftest import FakeBlob, FakeKeyValue


def _load(loader: IndexLoader, deadline=None):
    return asyncio.run(loader.load(deadline=deadline))


class TestIndexLoader:
    """Test the key/value -> blob fallback chain."""

    def test_key_value_hit_skips_blob(self, sample_payload):
        kv = FakeKeyValue({"search-index": sample_payload})
        blob = FakeBlob()
        index = _load(IndexLoader(kv, blob))

        assert len(index) == 3
        assert kv.calls == ["search-index"]
        assert blob.calls == []

    def test_key_value_miss_falls_back_to_blob(self, sample_payload):
        kv = FakeKeyValue()
        blob = FakeBlob({"search-index.json": json.dumps(sample_payload).encode()})
        index = _load(IndexLoader(kv, blob))

        assert index.documents[0].path == "/intro"
        assert blob.calls == ["search-index.json"]

    def test_no_key_value_provider_uses_blob(self, sample_payload):
        blob = FakeBlob({"search-index.json": json.dumps(sample_payload).encode()})
        assert len(_load(IndexLoader(None, blob))) == 3

    def test_key_value_fault_falls_back_to_blob(self, sample_payload):
        """A failing primary provider should not stop the fallback."""
        kv = FakeKeyValue(error=ConnectionError("kv down"))
        blob = FakeBlob({"search-index.json": json.dumps(sample_payload).encode()})

        assert len(_load(IndexLoader(kv, blob))) == 3

    def test_malformed_key_value_payload_falls_back(self, sample_payload):
        kv = FakeKeyValue({"search-index": {"documents": "nope"}})
        blob = FakeBlob({"search-index.json": json.dumps(sample_payload).encode()})

        assert len(_load(IndexLoader(kv, blob))) == 3

    def test_both_missing_is_unavailable(self):
        with pytest.raises(IndexUnavailable, match="Search index not available"):
            _load(IndexLoader(FakeKeyValue(), FakeBlob()))

    def test_blob_error_status_is_unavailable(self, sample_payload):
        blob = FakeBlob({"search-index.json": b"{}"}, status=500)
        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(FakeKeyValue(), blob))

    def test_blob_network_fault_is_unavailable(self):
        blob = FakeBlob(error=httpx.ConnectError("refused"))
        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(None, blob))

    def test_blob_malformed_json_is_unavailable(self):
        blob = FakeBlob({"search-index.json": b"{not json"})
        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(None, blob))

    def test_blob_wrong_shape_is_unavailable(self):
        blob = FakeBlob({"search-index.json": b"[1, 2, 3]"})
        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(None, blob))

    def test_no_providers_is_unavailable(self):
        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(None, None))

    def test_custom_key_and_path(self, sample_payload):
        kv = FakeKeyValue()
        blob = FakeBlob({"assets/idx.json": json.dumps(sample_payload).encode()})
        loader = IndexLoader(kv, blob, key="idx", blob_path="assets/idx.json")

        assert len(_load(loader)) == 3
        assert kv.calls == ["idx"]

    def test_reloads_on_every_call(self, sample_payload):
        kv = FakeKeyValue({"search-index": sample_payload})
        loader = IndexLoader(kv, None)
        _load(loader)
        _load(loader)

        assert kv.calls == ["search-index", "search-index"]

    def test_deadline_expiry_is_unavailable(self, sample_payload):
        """A slow provider should be abandoned once the deadline passes."""

        class SlowKeyValue:
            cancelled = False

            async def get(self, key):
                try:
                    await asyncio.sleep(5)
                except asyncio.CancelledError:
                    SlowKeyValue.cancelled = True
                    raise
                return sample_payload

        with pytest.raises(IndexUnavailable) as exc_info:
            _load(IndexLoader(SlowKeyValue(), FakeBlob()), deadline=0.05)

        assert exc_info.value.reason == "timeout"
        assert SlowKeyValue.cancelled is True


class TestFilesystemProviders:
    """Test directory-backed providers."""

    def test_directory_key_value_store(self, tmp_path, sample_payload):
        (tmp_path / "search-index.json").write_text(json.dumps(sample_payload), encoding="utf-8")
        store = DirectoryKeyValueStore(tmp_path)

        assert asyncio.run(store.get("search-index")) == sample_payload
        assert asyncio.run(store.get("missing")) is None

    def test_local_blob_provider(self, tmp_path):
        (tmp_path / "search-index.json").write_bytes(b'{"documents": []}')
        provider = LocalBlobProvider(tmp_path)

        response = asyncio.run(provider.fetch("search-index.json"))
        assert response.ok
        assert response.json() == {"documents": []}

        assert asyncio.run(provider.fetch("missing.json")).status == 404

    def test_local_blob_provider_rejects_escape(self, tmp_path):
        root = tmp_path / "book"
        root.mkdir()
        (tmp_path / "secret.json").write_text("{}")

        response = asyncio.run(LocalBlobProvider(root).fetch("../secret.json"))
        assert response.status == 404

    def test_loader_over_directories(self, tmp_path, sample_payload):
        """The server wiring: empty key/value dir, index in the asset bundle."""
        kv_dir = tmp_path / "kv"
        kv_dir.mkdir()
        assets = tmp_path / "book"
        assets.mkdir()
        (assets / "search-index.json").write_text(json.dumps(sample_payload), encoding="utf-8")

        loader = IndexLoader(DirectoryKeyValueStore(kv_dir), LocalBlobProvider(assets))
        assert len(_load(loader)) == 3


class TestHttpBlobProvider:
    """Test the remote asset provider against a mock transport."""

    def _provider(self, handler):
        return HttpBlobProvider("https://docs.example.com/", transport=httpx.MockTransport(handler))

    def test_fetches_under_base_url(self, sample_payload):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json=sample_payload)

        index = _load(IndexLoader(None, self._provider(handler)))

        assert seen == ["https://docs.example.com/search-index.json"]
        assert len(index) == 3

    def test_not_found_is_unavailable(self):
        provider = self._provider(lambda request: httpx.Response(404))
        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(None, provider))

    def test_transport_error_is_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(IndexUnavailable):
            _load(IndexLoader(None, self._provider(handler)))
