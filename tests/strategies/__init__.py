"""Hypothesis strategies for textscan property-based testing.

Usage:
    from tests.strategies import scan_sources, balanced_groups
"""

from .scan import (
    COMPOSED_CLUSTERS,
    balanced_groups,
    composed_clusters,
    identifier_text,
    inline_whitespace,
    line_breaks,
    plain_text,
    scan_sources,
)

__all__ = [
    "COMPOSED_CLUSTERS",
    "balanced_groups",
    "composed_clusters",
    "identifier_text",
    "inline_whitespace",
    "line_breaks",
    "plain_text",
    "scan_sources",
]
