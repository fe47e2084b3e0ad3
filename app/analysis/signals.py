from __future__ import annotations

from dataclasses import dataclass, fields

from .patterns import ACTION_VERB_PATTERNS, QUANTIFIABLE_PATTERNS, SECTION_PATTERNS
from .utils import unique_in_order


@dataclass(frozen=True, slots=True)
class ActionVerbHit:
    verb: str
    count: int


@dataclass(frozen=True, slots=True)
class SectionMap:
    summary: bool = False
    experience: bool = False
    education: bool = False
    skills: bool = False
    projects: bool = False
    certifications: bool = False
    awards: bool = False
    publications: bool = False
    languages: bool = False
    references: bool = False
    volunteer: bool = False

    def found(self) -> list[str]:
        """Names of detected sections, in declaration order."""
        return [item.name for item in fields(self) if getattr(self, item.name)]


def count_action_verbs(text: str) -> list[ActionVerbHit]:
    lowered = text.lower()
    hits: list[ActionVerbHit] = []
    for verb, pattern in ACTION_VERB_PATTERNS:
        count = len(pattern.findall(lowered))
        if count > 0:
            hits.append(ActionVerbHit(verb=verb, count=count))
    # sorted() is stable, so equal counts keep reference order.
    return sorted(hits, key=lambda hit: hit.count, reverse=True)


def detect_sections(text: str) -> SectionMap:
    lowered = text.lower()
    return SectionMap(
        **{name: bool(pattern.search(lowered)) for name, pattern in SECTION_PATTERNS.items()}
    )


def find_quantifiables(text: str) -> list[str]:
    """Percentages, dollar amounts, durations and counts, in pattern order."""
    found: list[str] = []
    for pattern in QUANTIFIABLE_PATTERNS:
        found.extend(pattern.findall(text))
    return unique_in_order(found)
