from __future__ import annotations

import contextlib

from fastapi import APIRouter, Depends, File, Form, UploadFile

from resume_analyzer.ai.registry import ProviderRegistry, get_registry
from resume_analyzer.api.uploads import check_extension, spooled_upload
from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import ValidationError
from resume_analyzer.schemas.analysis import AnalysisResponse, AnalyzeTextRequest, ErrorResponse

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _provider_key(raw: str | None) -> str:
    key = (raw or "").strip().lower()
    return key or settings.default_ai_provider


@router.post("/analyze", response_model=AnalysisResponse, responses=_ERROR_RESPONSES)
async def analyze_files(
    resume: UploadFile | None = File(default=None),
    job_description: UploadFile | None = File(default=None, alias="jobDescription"),
    ai_provider: str = Form(default="", alias="aiProvider"),
    registry: ProviderRegistry = Depends(get_registry),
):
    if resume is None or job_description is None:
        raise ValidationError("Both resume and job description files are required")

    check_extension(resume)
    check_extension(job_description)
    provider = _provider_key(ai_provider)

    async with contextlib.AsyncExitStack() as stack:
        resume_path = await stack.enter_async_context(spooled_upload(resume, field="resume"))
        job_path = await stack.enter_async_context(spooled_upload(job_description, field="jobDescription"))
        result = await registry.analyze_from_files(provider, resume_path, job_path)

    return AnalysisResponse(analysis=result, provider=provider)


@router.post("/analyze-text", response_model=AnalysisResponse, responses=_ERROR_RESPONSES)
async def analyze_text(
    payload: AnalyzeTextRequest,
    registry: ProviderRegistry = Depends(get_registry),
):
    provider = _provider_key(payload.ai_provider)
    result = await registry.analyze(provider, payload.resume_text, payload.job_description_text)
    return AnalysisResponse(analysis=result, provider=provider)
