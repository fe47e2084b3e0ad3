from __future__ import annotations

from dataclasses import dataclass

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import ScoreBreakdown

from .contact import ContactInfo
from .signals import SectionMap
from .utils import round_half_up

MAX_SCORE = 100


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    email: float = 5
    phone: float = 4
    linkedin: float = 3
    github: float = 3
    per_skill: float = 2
    skills_cap: float = 25
    per_action_verb: float = 1.5
    action_verbs_cap: float = 15
    required_sections: tuple[str, ...] = ("experience", "education", "skills")
    required_section_weight: float = 5
    optional_sections: tuple[str, ...] = ("summary", "projects", "certifications", "awards")
    optional_section_weight: float = 1.25
    length_thresholds: tuple[int, ...] = (200, 400, 600)
    length_step: float = 5
    per_quantifiable: float = 2
    quantifiables_cap: float = 10


def _number(path: str, default: float) -> float:
    value = get_scoring_value(path, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _sequence(path: str, default: tuple, cast=str) -> tuple:
    value = get_scoring_value(path, None)
    if not isinstance(value, list) or not value:
        return default
    try:
        return tuple(cast(item) for item in value)
    except (TypeError, ValueError):
        return default


def get_scoring_weights() -> ScoringWeights:
    """Bucket weights from ``resume_score.*`` in the scoring config.

    Built from the cached YAML mapping on each call, so
    ``clear_scoring_config_cache`` is enough to pick up a new file.
    """
    base = ScoringWeights()
    return ScoringWeights(
        email=_number("resume_score.contact.email", base.email),
        phone=_number("resume_score.contact.phone", base.phone),
        linkedin=_number("resume_score.contact.linkedin", base.linkedin),
        github=_number("resume_score.contact.github", base.github),
        per_skill=_number("resume_score.skills.per_item", base.per_skill),
        skills_cap=_number("resume_score.skills.cap", base.skills_cap),
        per_action_verb=_number("resume_score.action_verbs.per_item", base.per_action_verb),
        action_verbs_cap=_number("resume_score.action_verbs.cap", base.action_verbs_cap),
        required_sections=_sequence("resume_score.sections.required", base.required_sections),
        required_section_weight=_number(
            "resume_score.sections.required_weight", base.required_section_weight
        ),
        optional_sections=_sequence("resume_score.sections.optional", base.optional_sections),
        optional_section_weight=_number(
            "resume_score.sections.optional_weight", base.optional_section_weight
        ),
        length_thresholds=_sequence("resume_score.length.thresholds", base.length_thresholds, int),
        length_step=_number("resume_score.length.step", base.length_step),
        per_quantifiable=_number("resume_score.quantifiables.per_item", base.per_quantifiable),
        quantifiables_cap=_number("resume_score.quantifiables.cap", base.quantifiables_cap),
    )


def contact_points(contact: ContactInfo, weights: ScoringWeights) -> float:
    points = 0.0
    if contact.has_email:
        points += weights.email
    if contact.has_phone:
        points += weights.phone
    if contact.has_linkedin:
        points += weights.linkedin
    if contact.has_github:
        points += weights.github
    return points


def skills_points(skill_count: int, weights: ScoringWeights) -> float:
    return min(weights.skills_cap, skill_count * weights.per_skill)


def action_verb_points(verb_count: int, weights: ScoringWeights) -> float:
    return min(weights.action_verbs_cap, verb_count * weights.per_action_verb)


def length_points(words: int, weights: ScoringWeights) -> float:
    return sum(weights.length_step for threshold in weights.length_thresholds if words >= threshold)


def quantifiable_points(quantifiable_count: int, weights: ScoringWeights) -> float:
    return min(weights.quantifiables_cap, quantifiable_count * weights.per_quantifiable)


def score_resume(
    *,
    skills: list[str],
    action_verbs: list[str],
    sections: SectionMap,
    contact: ContactInfo,
    words: int,
    quantifiable_count: int,
    weights: ScoringWeights | None = None,
) -> ScoreBreakdown:
    """Weighted bucket sum, rounded half up and clamped to 0..100."""
    weights = weights or get_scoring_weights()
    found = set(sections.found())

    buckets = {
        "contact": contact_points(contact, weights),
        "skills": skills_points(len(skills), weights),
        "action_verbs": action_verb_points(len(action_verbs), weights),
        "required_sections": sum(
            weights.required_section_weight for name in weights.required_sections if name in found
        ),
        "optional_sections": sum(
            weights.optional_section_weight for name in weights.optional_sections if name in found
        ),
        "length": length_points(words, weights),
        "quantifiables": quantifiable_points(quantifiable_count, weights),
    }
    total = max(0, min(MAX_SCORE, round_half_up(sum(buckets.values()))))
    return ScoreBreakdown(**buckets, total=total)
