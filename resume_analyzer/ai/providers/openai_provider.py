from __future__ import annotations

import logging
import time
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

from resume_analyzer.ai.config import load_openai_config, openai_api_key
from resume_analyzer.ai.parser import parse_analysis_response
from resume_analyzer.ai.prompt import build_analysis_messages
from resume_analyzer.ai.types import AnalysisResult
from resume_analyzer.core.errors import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)


def _redact(message: str, secret: str) -> str:
    if not secret:
        return message
    return message.replace(secret, "***")


class OpenAIProvider:
    name = "OpenAI GPT"

    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self._client = client
        self._client_key: str | None = None

    def is_available(self) -> bool:
        return openai_api_key() is not None

    async def _get_client(self, api_key: str, base_url: str | None, timeout_s: float) -> AsyncOpenAI:
        if self._client is None or (self._client_key is not None and self._client_key != api_key):
            await self.aclose()
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout_s,
                max_retries=0,
            )
            self._client_key = api_key
        return self._client

    async def aclose(self) -> None:
        """Close the client this provider built; an injected client belongs to the caller."""
        if self._client is not None and self._client_key is not None:
            await self._client.close()
            self._client = None
            self._client_key = None

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult:
        api_key = openai_api_key()
        if api_key is None:
            raise ConfigurationError(
                "OpenAI service is not available. Please check API key configuration."
            )

        cfg = load_openai_config()
        messages = build_analysis_messages(resume_text, job_text)
        payload = [{"role": m.role, "content": m.content} for m in messages]

        create_kwargs: dict[str, Any] = {
            "model": cfg.model,
            "messages": payload,
            "temperature": cfg.temperature,
            "max_tokens": cfg.max_output_tokens,
        }
        if cfg.json_mode:
            create_kwargs["response_format"] = {"type": "json_object"}

        started = time.perf_counter()
        try:
            client = await self._get_client(api_key, cfg.base_url, cfg.timeout_s)
            response = await client.chat.completions.create(**create_kwargs)
            content = response.choices[0].message.content if response.choices else ""
        except (OpenAIError, AttributeError, IndexError, TypeError) as exc:
            latency_ms = int((time.perf_counter() - started) * 1000)
            logger.warning(
                "openai_analysis_failed model=%s latency_ms=%s error=%s",
                cfg.model,
                latency_ms,
                type(exc).__name__,
            )
            raise ProviderError(f"OpenAI analysis failed: {_redact(str(exc), api_key)}") from exc

        latency_ms = int((time.perf_counter() - started) * 1000)
        if not content:
            logger.warning("openai_analysis_empty model=%s latency_ms=%s", cfg.model, latency_ms)
            raise ProviderError("OpenAI analysis failed: empty response from model")

        outcome = parse_analysis_response(content)
        logger.info(
            "openai_analysis_done model=%s prompt_len=%s latency_ms=%s parse=%s",
            cfg.model,
            len(payload[-1]["content"]),
            latency_ms,
            outcome.kind,
        )
        return outcome.result
