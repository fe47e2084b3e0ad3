from __future__ import annotations

from pydantic import BaseModel, Field


class RawDocument(BaseModel):
    text: str = ""
    page_count: int = Field(default=0, ge=0)
    parsing_warnings: list[str] = Field(default_factory=list)
