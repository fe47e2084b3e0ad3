from __future__ import annotations

from .patterns import (
    HIGHLIGHT_MAX_CHARS,
    HIGHLIGHT_MIN_CHARS,
    IMPACT_PATTERNS,
    MAX_EXPERIENCE_HIGHLIGHTS,
    SENTENCE_SPLIT_RE,
)
from .utils import unique_in_order


def _has_impact_signal(sentence: str) -> bool:
    return any(pattern.search(sentence) for pattern in IMPACT_PATTERNS)


def extract_experience_highlights(text: str) -> list[str]:
    highlights: list[str] = []
    for sentence in SENTENCE_SPLIT_RE.split(text):
        trimmed = sentence.strip()
        if not HIGHLIGHT_MIN_CHARS < len(trimmed) < HIGHLIGHT_MAX_CHARS:
            continue
        if _has_impact_signal(trimmed):
            highlights.append(trimmed)
    return unique_in_order(highlights)[:MAX_EXPERIENCE_HIGHLIGHTS]
