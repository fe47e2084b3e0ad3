from __future__ import annotations

import logging

from app.core.config import settings
from app.schemas.analysis import (
    AnalysisMetadata,
    AnalysisResult,
    ContactSummary,
    SkillsByCategory,
    SkillsSummary,
)

from .contact import extract_contact_info, extract_name
from .education import education_fields, extract_education
from .feedback import generate_feedback
from .highlights import extract_experience_highlights
from .scoring import score_resume
from .signals import count_action_verbs, detect_sections, find_quantifiables
from .skills import extract_skills, recommended_skills
from .utils import word_count

logger = logging.getLogger(__name__)

MAX_ACTION_VERB_SAMPLES = 15
MAX_QUANTIFIABLE_SAMPLES = 10


def _first(values: tuple[str, ...]) -> str | None:
    return values[0] if values else None


def _preview(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def analyze(text: str, page_count: int) -> AnalysisResult:
    """Run every extractor over resume text and assemble the assessment.

    Pure and deterministic: no I/O, no clock, and no exception for any
    string input. Empty text produces empty signals and a zero score.
    """
    text = text or ""
    words = word_count(text)

    contact = extract_contact_info(text)
    skill_set = extract_skills(text)
    present = skill_set.present
    verb_hits = count_action_verbs(text)
    action_verbs = [hit.verb for hit in verb_hits]
    sections = detect_sections(text)
    sections_found = sections.found()
    quantifiables = find_quantifiables(text)

    breakdown = score_resume(
        skills=present,
        action_verbs=action_verbs,
        sections=sections,
        contact=contact,
        words=words,
        quantifiable_count=len(quantifiables),
    )
    feedback = generate_feedback(
        skills=present,
        sections=sections,
        contact=contact,
        action_verb_count=len(action_verbs),
        quantifiable_count=len(quantifiables),
    )

    logger.debug(
        "resume_analysis_complete chars=%s words=%s pages=%s skills=%s verbs=%s sections=%s score=%s",
        len(text),
        words,
        page_count,
        len(present),
        len(action_verbs),
        len(sections_found),
        breakdown.total,
    )

    return AnalysisResult(
        score=breakdown.total,
        contact_info=ContactSummary(
            name=extract_name(text),
            email=_first(contact.emails),
            phone=_first(contact.phones),
            linkedin=_first(contact.linkedin),
            github=_first(contact.github),
        ),
        skills=SkillsSummary(
            present=present,
            missing=recommended_skills(text),
            by_category=SkillsByCategory(**skill_set.categories()),
        ),
        metadata=AnalysisMetadata(
            page_count=page_count,
            word_count=words,
            action_verb_count=len(action_verbs),
            quantifiable_count=len(quantifiables),
            sections_found=sections_found,
            action_verbs_found=action_verbs[:MAX_ACTION_VERB_SAMPLES],
            quantifiable_examples=quantifiables[:MAX_QUANTIFIABLE_SAMPLES],
            education_fields=education_fields(text),
        ),
        education=extract_education(text),
        experience_highlights=extract_experience_highlights(text),
        strengths=feedback.strengths,
        improvements=feedback.improvements,
        score_breakdown=breakdown,
        extracted_text=_preview(text, settings.text_preview_chars),
        full_text_length=len(text),
    )
