"""
Source normalizer: case-folded copy of contract source for matching.

Python strings are immutable, so the caller's original text is never
touched and can still be shown as-is.
"""

from __future__ import annotations


def normalize_source(source: str | None) -> str:
    """Return a lower-cased copy of source; None is treated as empty text."""
    if not source:
        return ""
    return source.lower()
