from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from resume_analyzer.ai.types import AnalysisResult


class HealthResponse(BaseModel):
    status: str
    message: str


class ServiceStatus(BaseModel):
    id: str
    name: str
    available: bool
    status: Literal["active", "offline"]


class ServicesResponse(BaseModel):
    services: list[ServiceStatus]


class AnalyzeTextRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(default="", alias="resumeText", max_length=200000)
    job_description_text: str = Field(default="", alias="jobDescriptionText", max_length=200000)
    ai_provider: str = Field(default="", alias="aiProvider", max_length=100)


class AnalysisResponse(BaseModel):
    success: Literal[True] = True
    analysis: AnalysisResult
    provider: str


class ErrorResponse(BaseModel):
    error: str
    message: str
