"""
Search index data models.

The index is produced by the book build and consumed read-only here.
These dataclasses mirror the `search-index.json` shape:

    {
        "version": "1.0.0",
        "generated_at": "...",
        "config": {"heading_split_level": 2, "include_auth": false},
        "documents": [{"path": ..., "title": ..., "body": ..., "headings": [...]}]
    }
"""

from dataclasses import dataclass, field
from typing import Any, Optional


class MalformedIndexError(ValueError):
    """Raised when a loaded payload does not have the search index shape."""


def _require(data: dict, key: str, kind: type, where: str) -> Any:
    """Fetch a required key and check its type."""
    if key not in data:
        raise MalformedIndexError(f"{where}: missing '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise MalformedIndexError(
            f"{where}: '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Heading:
    """A heading inside a page, with its deep-link anchor."""
    level: int
    text: str
    anchor: str

    @classmethod
    def from_dict(cls, data: dict) -> "Heading":
        if not isinstance(data, dict):
            raise MalformedIndexError("heading must be an object")
        return cls(
            level=int(data.get("level", 0)),
            text=_require(data, "text", str, "heading"),
            anchor=str(data.get("anchor", "")),
        )


@dataclass(frozen=True)
class AuthRequirement:
    """
    Access requirements attached to a document.

    Carried through for forward compatibility only. Nothing in the search
    path filters on these values.
    """
    authn: Optional[str] = None
    authz: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: dict) -> "AuthRequirement":
        if not isinstance(data, dict):
            raise MalformedIndexError("auth must be an object")
        return cls(
            authn=data.get("authn"),
            authz=frozenset(data.get("authz") or ()),
        )


@dataclass(frozen=True)
class IndexConfig:
    """Build-time settings recorded in the index (advisory)."""
    heading_split_level: int = 2
    max_excerpt_length: Optional[int] = None
    include_auth: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "IndexConfig":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise MalformedIndexError("config must be an object")
        return cls(
            heading_split_level=int(data.get("heading_split_level", 2)),
            max_excerpt_length=data.get("max_excerpt_length"),
            include_auth=bool(data.get("include_auth", False)),
        )


@dataclass(frozen=True)
class SearchDocument:
    """One indexed page. `path` is unique within an index."""
    path: str
    title: str
    body: str = ""
    headings: tuple[Heading, ...] = ()
    auth: Optional[AuthRequirement] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SearchDocument":
        if not isinstance(data, dict):
            raise MalformedIndexError("document must be an object")
        path = _require(data, "path", str, "document")
        where = f"document {path!r}"

        body = data.get("body") or ""
        if not isinstance(body, str):
            raise MalformedIndexError(f"{where}: 'body' must be str")

        raw_headings = data.get("headings") or []
        if not isinstance(raw_headings, list):
            raise MalformedIndexError(f"{where}: 'headings' must be list")

        raw_auth = data.get("auth")
        return cls(
            path=path,
            title=_require(data, "title", str, where),
            body=body,
            headings=tuple(Heading.from_dict(h) for h in raw_headings),
            auth=AuthRequirement.from_dict(raw_auth) if raw_auth is not None else None,
        )


@dataclass(frozen=True)
class SearchIndex:
    """Immutable in-memory search index. Document order is significant."""
    version: str
    generated_at: str
    config: IndexConfig
    documents: tuple[SearchDocument, ...]

    @classmethod
    def from_dict(cls, data: Any) -> "SearchIndex":
        """Build an index from its parsed JSON payload.

        Args:
            data: Parsed JSON (expected to be an object)

        Returns:
            SearchIndex

        Raises:
            MalformedIndexError: If the payload does not have the index shape
        """
        if not isinstance(data, dict):
            raise MalformedIndexError(
                f"search index must be an object, got {type(data).__name__}"
            )
        documents = _require(data, "documents", list, "search index")
        return cls(
            version=str(data.get("version", "")),
            generated_at=str(data.get("generated_at", "")),
            config=IndexConfig.from_dict(data.get("config")),
            documents=tuple(SearchDocument.from_dict(d) for d in documents),
        )

    def __len__(self) -> int:
        return len(self.documents)
