from .analyzer import analyze
from .contact import ContactInfo, extract_contact_info, extract_name
from .education import education_fields, extract_education
from .feedback import Feedback, FeedbackThresholds, generate_feedback
from .highlights import extract_experience_highlights
from .scoring import ScoringWeights, get_scoring_weights, score_resume
from .signals import ActionVerbHit, SectionMap, count_action_verbs, detect_sections, find_quantifiables
from .skills import SkillSet, extract_skills, recommended_skills

__all__ = [
    "analyze",
    "ContactInfo",
    "extract_contact_info",
    "extract_name",
    "SkillSet",
    "extract_skills",
    "recommended_skills",
    "ActionVerbHit",
    "SectionMap",
    "count_action_verbs",
    "detect_sections",
    "find_quantifiables",
    "extract_education",
    "education_fields",
    "extract_experience_highlights",
    "ScoringWeights",
    "get_scoring_weights",
    "score_resume",
    "Feedback",
    "FeedbackThresholds",
    "generate_feedback",
]
