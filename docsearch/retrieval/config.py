"""
Search pipeline configuration.

Weights and window sizes are fixed by the search contract; they live in a
dataclass so tests and the CLI can reference them by name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for scoring, excerpting and ranking."""
    # Score added per distinct matching term
    title_weight: int = 10
    heading_weight: int = 5  # per matching heading
    body_weight: int = 1

    # Excerpt window around the first match: [pos - lead, pos + tail)
    excerpt_lead: int = 50
    excerpt_tail: int = 100
    ellipsis: str = "..."

    # Result limits
    max_results: int = 20
    max_rendered_headings: int = 3


DEFAULT_CONFIG = SearchConfig()
