import asyncio
import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.schemas.resume import AnalyzeTextRequest, ResumeAnalysisResponse
from app.services.resume_service import (
    GENERIC_FAILURE_MESSAGE,
    ResumeUploadError,
    analyze_resume_text,
    analyze_resume_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter()

READ_CHUNK_BYTES = 1024 * 64


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/parse-resume", response_model=ResumeAnalysisResponse)
@rate_limit()
async def parse_resume(request: Request, file: UploadFile = File(...)):
    _ = request
    content = await _read_upload(file)
    try:
        return await asyncio.to_thread(
            analyze_resume_upload,
            filename=file.filename,
            content_type=file.content_type,
            content=content,
        )
    except ResumeUploadError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - guard rail
        logger.exception("resume_upload_failed filename_len=%s: %s", len(file.filename or ""), exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_FAILURE_MESSAGE,
        ) from exc


@router.post("/analyze-text", response_model=ResumeAnalysisResponse)
@rate_limit()
async def analyze_text(request: Request, payload: AnalyzeTextRequest):
    _ = request
    try:
        return await asyncio.to_thread(analyze_resume_text, payload)
    except ResumeUploadError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
