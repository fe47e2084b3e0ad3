from __future__ import annotations

from pydantic import BaseModel, Field


class ContactSummary(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None


class SkillsByCategory(BaseModel):
    programming: list[str] = Field(default_factory=list)
    frameworks: list[str] = Field(default_factory=list)
    databases: list[str] = Field(default_factory=list)
    cloud: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)


class SkillsSummary(BaseModel):
    present: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list, max_length=8)
    by_category: SkillsByCategory = Field(default_factory=SkillsByCategory)


class AnalysisMetadata(BaseModel):
    page_count: int = 0
    word_count: int = Field(default=0, ge=0)
    action_verb_count: int = Field(default=0, ge=0)
    quantifiable_count: int = Field(default=0, ge=0)
    sections_found: list[str] = Field(default_factory=list)
    action_verbs_found: list[str] = Field(default_factory=list, max_length=15)
    quantifiable_examples: list[str] = Field(default_factory=list, max_length=10)
    education_fields: list[str] = Field(default_factory=list)


class ScoreBreakdown(BaseModel):
    contact: float = 0.0
    skills: float = 0.0
    action_verbs: float = 0.0
    required_sections: float = 0.0
    optional_sections: float = 0.0
    length: float = 0.0
    quantifiables: float = 0.0
    total: int = Field(default=0, ge=0, le=100)


class AnalysisResult(BaseModel):
    score: int = Field(ge=0, le=100)
    contact_info: ContactSummary
    skills: SkillsSummary
    metadata: AnalysisMetadata
    education: list[str] = Field(default_factory=list, max_length=5)
    experience_highlights: list[str] = Field(default_factory=list, max_length=8)
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    score_breakdown: ScoreBreakdown
    extracted_text: str = ""
    full_text_length: int = Field(default=0, ge=0)
