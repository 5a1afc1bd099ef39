"""
Response schemas for the search API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """A single ranked document in a JSON search response."""

    path: str = Field(..., description="Page path, used as the link target")
    title: str = Field(..., description="Page title")
    headings: list[str] = Field(
        default_factory=list,
        description="Matched headings (at most 3), in first-match order"
    )
    excerpt: Optional[str] = Field(
        None,
        description="Body text around the first matching term; omitted without a body match"
    )
    score: int = Field(..., description="Relevance score (title 10, heading 5, body 1 per term)")


class SearchResponse(BaseModel):
    """Response schema for JSON search results."""

    results: list[SearchHit] = Field(default_factory=list, description="Ranked results, at most 20")


class ErrorResponse(BaseModel):
    """Response schema for error responses."""

    error: str = Field(..., description="Error message")
