from __future__ import annotations

import logging

from fastapi import status

from app.analysis import analyze
from app.core.config import settings
from app.parsing.parse import PdfExtractionError, extract_pdf_text
from app.schemas.resume import AnalyzeTextRequest, ResumeAnalysisResponse

logger = logging.getLogger(__name__)

NOT_A_PDF_MESSAGE = "Please upload a PDF file"
NO_MEANINGFUL_TEXT_MESSAGE = (
    "Could not extract meaningful text from this PDF. "
    "It may be a scanned document or image-based PDF."
)
GENERIC_FAILURE_MESSAGE = "Failed to parse PDF"


class ResumeUploadError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.status_code = status_code


def is_pdf_upload(filename: str | None, content_type: str | None) -> bool:
    if content_type and "pdf" in content_type.lower():
        return True
    return bool(filename) and filename.lower().endswith(".pdf")


def _ensure_meaningful_text(text: str) -> None:
    if len(text.strip()) < settings.min_extracted_chars:
        raise ResumeUploadError(NO_MEANINGFUL_TEXT_MESSAGE)


def _response(text: str, page_count: int) -> ResumeAnalysisResponse:
    result = analyze(text, page_count)
    return ResumeAnalysisResponse(**result.model_dump())


def analyze_resume_upload(
    *,
    filename: str | None,
    content_type: str | None,
    content: bytes,
) -> ResumeAnalysisResponse:
    """Validate an uploaded resume, extract its text and analyze it."""
    if not is_pdf_upload(filename, content_type):
        raise ResumeUploadError(NOT_A_PDF_MESSAGE)

    try:
        document = extract_pdf_text(content)
    except PdfExtractionError as exc:
        raise ResumeUploadError(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR) from exc

    _ensure_meaningful_text(document.text)
    response = _response(document.text, document.page_count)
    logger.info(
        "resume_upload_analyzed bytes=%s pages=%s chars=%s score=%s",
        len(content),
        document.page_count,
        len(document.text),
        response.score,
    )
    return response


def analyze_resume_text(payload: AnalyzeTextRequest) -> ResumeAnalysisResponse:
    _ensure_meaningful_text(payload.text)
    response = _response(payload.text, payload.page_count)
    logger.info(
        "resume_text_analyzed pages=%s chars=%s score=%s",
        payload.page_count,
        len(payload.text),
        response.score,
    )
    return response
