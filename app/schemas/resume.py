from __future__ import annotations

from pydantic import BaseModel, Field

from .analysis import AnalysisResult


class AnalyzeTextRequest(BaseModel):
    text: str = Field(default="", max_length=200000)
    page_count: int = Field(default=1, ge=1, le=500)


class ResumeAnalysisResponse(AnalysisResult):
    success: bool = True
