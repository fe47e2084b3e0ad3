from __future__ import annotations

from dataclasses import dataclass, field

from app.core.config.scoring import get_scoring_value

from .contact import ContactInfo
from .signals import SectionMap


@dataclass(frozen=True, slots=True)
class FeedbackThresholds:
    strong_skill_count: int = 10
    moderate_skill_count: int = 5
    min_quantifiables: int = 3
    strong_action_verb_count: int = 10


@dataclass(slots=True)
class Feedback:
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)


def _threshold(path: str, default: int) -> int:
    value = get_scoring_value(path, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def get_feedback_thresholds() -> FeedbackThresholds:
    base = FeedbackThresholds()
    return FeedbackThresholds(
        strong_skill_count=_threshold("feedback.strong_skill_count", base.strong_skill_count),
        moderate_skill_count=_threshold("feedback.moderate_skill_count", base.moderate_skill_count),
        min_quantifiables=_threshold("feedback.min_quantifiables", base.min_quantifiables),
        strong_action_verb_count=_threshold(
            "feedback.strong_action_verb_count", base.strong_action_verb_count
        ),
    )


def generate_feedback(
    *,
    skills: list[str],
    sections: SectionMap,
    contact: ContactInfo,
    action_verb_count: int,
    quantifiable_count: int,
    thresholds: FeedbackThresholds | None = None,
) -> Feedback:
    """Turn extracted signals into strengths and improvements.

    Every rule is evaluated; a resume usually gets messages in both lists.
    """
    thresholds = thresholds or get_feedback_thresholds()
    feedback = Feedback()
    strengths = feedback.strengths
    improvements = feedback.improvements

    if contact.has_email and contact.has_phone:
        strengths.append("Contact information is complete with email and phone")
    else:
        improvements.append("Add both email and phone number for easy contact")

    if contact.has_linkedin:
        strengths.append("LinkedIn profile included - great for networking")
    else:
        improvements.append("Consider adding your LinkedIn profile URL")

    if contact.has_github:
        strengths.append("GitHub profile showcases your coding work")

    skill_count = len(skills)
    if skill_count >= thresholds.strong_skill_count:
        strengths.append(f"Strong skill variety with {skill_count} skills identified")
    elif skill_count >= thresholds.moderate_skill_count:
        improvements.append("Consider adding more relevant skills to your resume")
    else:
        improvements.append("Add more technical and soft skills to strengthen your profile")

    if sections.experience and sections.education and sections.skills:
        strengths.append("Resume has all essential sections")
    else:
        if not sections.experience:
            improvements.append("Add a clear Experience section")
        if not sections.education:
            improvements.append("Add an Education section")
        if not sections.skills:
            improvements.append("Add a dedicated Skills section")

    if not sections.summary:
        improvements.append("Consider adding a Professional Summary at the top")

    if sections.projects:
        strengths.append("Projects section helps showcase practical experience")
    else:
        improvements.append("Adding a Projects section can highlight your practical work")

    if quantifiable_count < thresholds.min_quantifiables:
        improvements.append("Add more quantifiable achievements (numbers, percentages, metrics)")
    else:
        strengths.append("Good use of quantifiable metrics in achievements")

    if action_verb_count >= thresholds.strong_action_verb_count:
        strengths.append("Strong use of action verbs throughout")
    else:
        improvements.append("Use more action verbs (achieved, developed, implemented, etc.)")

    return feedback
