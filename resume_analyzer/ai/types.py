from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator


Role = Literal["system", "user", "assistant"]
ProviderStatus = Literal["active", "offline"]

MAX_LIST_ITEMS = 5
DEFAULT_SUMMARY = "Analysis completed"


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


def clamp_score(value: int | float) -> int:
    if isinstance(value, float) and math.isnan(value):
        return 0
    if isinstance(value, float) and math.isinf(value):
        return 100 if value > 0 else 0
    return max(0, min(100, int(round(value))))


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str = DEFAULT_SUMMARY
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    keyword_match: int = Field(default=0, alias="keywordMatch")
    skill_gaps: tuple[str, ...] = Field(default=(), alias="skillGaps")
    recommendations: tuple[str, ...] = ()
    optimized_content: str = Field(default="", alias="optimizedContent")

    @field_validator("summary")
    @classmethod
    def _require_summary(cls, value: str) -> str:
        return value if value.strip() else DEFAULT_SUMMARY

    @field_validator("strengths", "improvements", "skill_gaps", "recommendations")
    @classmethod
    def _cap_list(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(value[:MAX_LIST_ITEMS])

    @field_validator("keyword_match", mode="before")
    @classmethod
    def _clamp_keyword_match(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("keywordMatch must be a number")
        return clamp_score(value)

    @field_validator("optimized_content", mode="before")
    @classmethod
    def _default_optimized_content(cls, value: Any) -> str:
        return "" if value is None else value


class AnalyzerProvider(Protocol):
    name: str

    def is_available(self) -> bool: ...

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult: ...


@dataclass(frozen=True)
class ProviderInfo:
    id: str
    display_name: str
    available: bool

    @property
    def status(self) -> ProviderStatus:
        return "active" if self.available else "offline"
