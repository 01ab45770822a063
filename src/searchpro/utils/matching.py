"""Substring matching and highlight helpers for SearchPro."""
from __future__ import annotations

import html
import re
from functools import lru_cache
from typing import Iterable, List, NamedTuple, Pattern, Tuple

from ..dataset import Record


class Segment(NamedTuple):
    matched: bool
    text: str


@lru_cache(maxsize=64)
def literal_pattern(query: str) -> Pattern[str]:
    """Case-insensitive pattern matching ``query`` literally.

    Shared by ``filter_records`` and ``highlight`` so that a record is kept
    exactly when its highlight contains a matched segment.
    """
    return re.compile(re.escape(query), re.IGNORECASE)


def contains_match(query: str, text: str) -> bool:
    return literal_pattern(query).search(text) is not None


def filter_records(dataset: Iterable[Record], query: str) -> Tuple[Record, ...]:
    pattern = literal_pattern(query)
    return tuple(rec for rec in dataset if pattern.search(rec.name) is not None)


def highlight(text: str, query: str) -> List[Segment]:
    """Split ``text`` into matched/unmatched runs of ``query`` occurrences.

    Joining the segment texts gives back ``text`` unchanged. An empty query,
    or a query that never occurs, yields one unmatched segment.
    """
    if not query:
        return [Segment(False, text)]

    segments: List[Segment] = []
    pos = 0
    for m in literal_pattern(query).finditer(text):
        if m.start() > pos:
            segments.append(Segment(False, text[pos:m.start()]))
        segments.append(Segment(True, m.group(0)))
        pos = m.end()
    if pos < len(text) or not segments:
        segments.append(Segment(False, text[pos:]))
    return segments


def render_markup(segments: Iterable[Segment], tag: str = "b") -> str:
    """Rich-text rendering for Qt labels; every run is HTML-escaped."""
    parts: List[str] = []
    for seg in segments:
        escaped = html.escape(seg.text, quote=False)
        parts.append(f"<{tag}>{escaped}</{tag}>" if seg.matched else escaped)
    return "".join(parts)


__all__ = ["Segment", "contains_match", "filter_records", "highlight", "literal_pattern", "render_markup"]
