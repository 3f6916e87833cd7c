from __future__ import annotations

import asyncio
import logging
import time
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from resume_analyzer.ai.providers.copilot_provider import CopilotProvider
from resume_analyzer.ai.providers.notion_provider import NotionProvider
from resume_analyzer.ai.providers.openai_provider import OpenAIProvider
from resume_analyzer.ai.types import AnalysisResult, AnalyzerProvider, ProviderInfo
from resume_analyzer.core.errors import NotFoundError, UnavailableError, ValidationError
from resume_analyzer.parsing import extract_text

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Maps provider keys to analyzers and mediates every analysis request.

    The provider map is filled once at construction and only read afterwards,
    so one registry can serve concurrent requests.
    """

    def __init__(self, providers: Mapping[str, AnalyzerProvider] | None = None):
        self._providers: dict[str, AnalyzerProvider] = {}
        for key, provider in (providers or {}).items():
            self.register(key, provider)

    def register(self, key: str, provider: AnalyzerProvider) -> None:
        if key in self._providers:
            logger.warning("provider_registered_twice key=%s", key)
        self._providers[key] = provider

    def get(self, key: str) -> AnalyzerProvider | None:
        return self._providers.get(key)

    def keys(self) -> list[str]:
        return list(self._providers)

    def list_providers(self) -> list[ProviderInfo]:
        return [
            ProviderInfo(id=key, display_name=provider.name, available=provider.is_available())
            for key, provider in self._providers.items()
        ]

    async def aclose(self) -> None:
        for provider in self._providers.values():
            close = getattr(provider, "aclose", None)
            if close is not None:
                await close()

    def _resolve(self, key: str) -> AnalyzerProvider:
        provider = self._providers.get(key)
        if provider is None:
            raise NotFoundError(f"AI service '{key}' not found")
        if not provider.is_available():
            raise UnavailableError(f"AI service '{key}' is not available")
        return provider

    async def _run(self, key: str, provider: AnalyzerProvider, resume_text: str, job_text: str) -> AnalysisResult:
        started = time.perf_counter()
        try:
            result = await provider.analyze(resume_text, job_text)
        except Exception as exc:
            logger.warning("analysis_failed provider=%s error=%s", key, type(exc).__name__)
            raise
        logger.info(
            "analysis_completed provider=%s latency_ms=%s keyword_match=%s",
            key,
            int((time.perf_counter() - started) * 1000),
            result.keyword_match,
        )
        return result

    async def analyze(self, key: str, resume_text: str, job_text: str) -> AnalysisResult:
        provider = self._resolve(key)
        if not (resume_text or "").strip():
            raise ValidationError("Resume text cannot be empty")
        if not (job_text or "").strip():
            raise ValidationError("Job description text cannot be empty")
        return await self._run(key, provider, resume_text, job_text)

    async def analyze_from_files(
        self, key: str, resume_path: str | Path, job_path: str | Path
    ) -> AnalysisResult:
        provider = self._resolve(key)
        resume_text = await asyncio.to_thread(extract_text, resume_path)
        job_text = await asyncio.to_thread(extract_text, job_path)
        if not resume_text.strip():
            raise ValidationError("Resume file appears to be empty or unreadable")
        if not job_text.strip():
            raise ValidationError("Job description file appears to be empty or unreadable")
        return await self._run(key, provider, resume_text, job_text)


def build_default_registry() -> ProviderRegistry:
    return ProviderRegistry(
        {
            "openai": OpenAIProvider(),
            "notion": NotionProvider(),
            "copilot": CopilotProvider(),
        }
    )


@lru_cache(maxsize=1)
def get_registry() -> ProviderRegistry:
    return build_default_registry()
