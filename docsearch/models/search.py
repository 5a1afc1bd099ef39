"""
Search result models for the query pipeline.

Results are transient: built and discarded within one query.
"""

from dataclasses import dataclass, field
from typing import Optional

from .index import SearchDocument


@dataclass
class MatchInfo:
    """Which fields of a document matched the query."""
    title: bool = False
    body: bool = False
    headings: list[str] = field(default_factory=list)  # original case, first occurrence order


@dataclass
class SearchResult:
    """Represents a scored document with its match metadata."""
    document: SearchDocument
    score: int
    matches: MatchInfo = field(default_factory=MatchInfo)
    excerpt: Optional[str] = None

    def top_headings(self, limit: int = 3) -> list[str]:
        """Matched headings, truncated for display."""
        return self.matches.headings[:limit]

    def anchor_for(self, heading_text: str) -> str:
        """Anchor of the first document heading with exactly this text."""
        for heading in self.document.headings:
            if heading.text == heading_text:
                return heading.anchor
        return ""
