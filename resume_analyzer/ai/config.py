import os
from dataclasses import dataclass

CREDENTIAL_ENV = "OPENAI_API_KEY"


@dataclass(frozen=True)
class OpenAIConfig:
    model: str
    base_url: str | None
    timeout_s: float
    temperature: float
    max_output_tokens: int
    json_mode: bool


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def openai_api_key() -> str | None:
    key = (os.getenv(CREDENTIAL_ENV) or "").strip()
    if not key or _looks_like_placeholder(key):
        return None
    return key


def load_openai_config() -> OpenAIConfig:
    model = (os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()
    return OpenAIConfig(
        model=model,
        base_url=(os.getenv("OPENAI_BASE_URL") or "").strip() or None,
        timeout_s=_float_env("OPENAI_TIMEOUT_S", 30.0),
        temperature=_float_env("OPENAI_TEMPERATURE", 0.3),
        max_output_tokens=_int_env("OPENAI_MAX_OUTPUT_TOKENS", 2000),
        json_mode=(os.getenv("OPENAI_RESPONSE_FORMAT") or "").strip().lower() == "json",
    )
