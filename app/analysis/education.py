from __future__ import annotations

from .patterns import (
    DEGREE_KEYWORDS,
    EDUCATION_BULLET_RE,
    EDUCATION_LINE_MAX_CHARS,
    EDUCATION_LINE_MIN_CHARS,
    EDUCATION_PHRASE_RE,
    FIELD_KEYWORDS,
    INSTITUTION_KEYWORDS,
    MAX_EDUCATION_ENTRIES,
)
from .utils import unique_in_order


def _contains_any(lowered: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in lowered for keyword in keywords)


def _education_lines(text: str) -> list[str]:
    entries: list[str] = []
    for line in text.split("\n"):
        lowered = line.lower().strip()
        if not EDUCATION_LINE_MIN_CHARS <= len(lowered) <= EDUCATION_LINE_MAX_CHARS:
            continue
        if not (_contains_any(lowered, DEGREE_KEYWORDS) or _contains_any(lowered, INSTITUTION_KEYWORDS)):
            continue
        if any(entry.lower() == lowered for entry in entries):
            continue
        cleaned = EDUCATION_BULLET_RE.sub("", line.strip())
        if len(cleaned) > 5:
            entries.append(cleaned)
    return entries


def extract_education(text: str) -> list[str]:
    """Lines and inline phrases that mention a degree or an institution.

    The line scan runs first; inline degree phrases ("B.Tech in ...") are
    appended only when no existing entry already contains them.
    """
    entries = _education_lines(text)
    for match in EDUCATION_PHRASE_RE.finditer(text):
        cleaned = match.group(0).strip()
        if not 8 < len(cleaned) < 100:
            continue
        lowered = cleaned.lower()
        if any(lowered in entry.lower() for entry in entries):
            continue
        entries.append(cleaned)
    return unique_in_order(entries)[:MAX_EDUCATION_ENTRIES]


def education_fields(text: str) -> list[str]:
    lowered = text.lower()
    return [keyword for keyword in FIELD_KEYWORDS if keyword in lowered]
