"""Turn a model's free-form reply into an ``AnalysisResult``.

The structured path decodes the outermost ``{...}`` region as JSON. When
there is no such region, or it does not decode, the fallback
path scrapes headings, bullet lists and a percentage out of the prose. Both
paths always return a valid result; nothing here raises.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Literal

from resume_analyzer.ai.types import DEFAULT_SUMMARY, MAX_LIST_ITEMS, AnalysisResult, clamp_score

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY = (
    "Resume analysis completed. The AI provided detailed feedback that may need manual review."
)
FALLBACK_CONTENT_CHARS = 500
BASELINE_SCORE = 50
SCORE_STEP = 10

POSITIVE_WORDS = ("strong", "good", "excellent", "well", "effective")
NEGATIVE_WORDS = ("weak", "poor", "missing", "lack", "insufficient")

SECTION_KEYWORDS = {
    "strengths": "strength",
    "improvements": "improv",
    "skill_gaps": "skill",
    "recommendations": "recommend",
}

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)
_LIST_MARKER_RE = re.compile(r"^(?:[-•]|\d+\.)\s*")
_PERCENT_RE = re.compile(r"(\d+)%")


@dataclass(frozen=True)
class ParseOutcome:
    kind: Literal["parsed", "fallback"]
    result: AnalysisResult


def _string_field(payload: dict[str, Any], key: str, default: str) -> str:
    value = payload.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return default


def _list_field(payload: dict[str, Any], key: str) -> list[str]:
    value = payload.get(key)
    if not isinstance(value, list):
        return []
    items: list[str] = []
    for item in value:
        if isinstance(item, bool):
            continue
        if isinstance(item, (int, float)):
            item = str(item)
        if isinstance(item, str) and item.strip():
            items.append(item)
    return items[:MAX_LIST_ITEMS]


def _score_field(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return clamp_score(value)


def _from_payload(payload: dict[str, Any]) -> AnalysisResult:
    return AnalysisResult(
        summary=_string_field(payload, "summary", DEFAULT_SUMMARY),
        strengths=_list_field(payload, "strengths"),
        improvements=_list_field(payload, "improvements"),
        keyword_match=_score_field(payload, "keywordMatch"),
        skill_gaps=_list_field(payload, "skillGaps"),
        recommendations=_list_field(payload, "recommendations"),
        optimized_content=_string_field(payload, "optimizedContent", ""),
    )


def extract_list_items(text: str, keyword: str) -> list[str]:
    lines = text.splitlines()
    start = None
    for index, line in enumerate(lines):
        if keyword in line.lower():
            start = index + 1
            break
    if start is None:
        return []

    items: list[str] = []
    for line in lines[start:]:
        stripped = line.strip()
        if not stripped:
            break
        marker = _LIST_MARKER_RE.match(stripped)
        if marker is None:
            continue
        item = stripped[marker.end():].strip()
        if item:
            items.append(item)
        if len(items) >= MAX_LIST_ITEMS:
            break
    return items


def estimate_keyword_match(text: str) -> int:
    match = _PERCENT_RE.search(text)
    if match:
        digits = match.group(1).lstrip("0") or "0"
        if len(digits) > 3:
            return 100
        return clamp_score(int(digits))

    lower = text.lower()
    score = BASELINE_SCORE
    score += SCORE_STEP * sum(1 for word in POSITIVE_WORDS if word in lower)
    score -= SCORE_STEP * sum(1 for word in NEGATIVE_WORDS if word in lower)
    return clamp_score(score)


def fallback_result(text: str) -> AnalysisResult:
    sections = {field: extract_list_items(text, keyword) for field, keyword in SECTION_KEYWORDS.items()}
    return AnalysisResult(
        summary=FALLBACK_SUMMARY,
        keyword_match=estimate_keyword_match(text),
        optimized_content=text[:FALLBACK_CONTENT_CHARS] + "...",
        **sections,
    )


def parse_analysis_response(raw: str) -> ParseOutcome:
    text = raw or ""
    match = _JSON_OBJECT_RE.search(text)
    if match:
        try:
            payload = json.loads(match.group(0))
        except (ValueError, RecursionError) as exc:
            logger.warning("analysis_json_decode_failed chars=%s: %s", len(text), exc)
        else:
            return ParseOutcome(kind="parsed", result=_from_payload(payload))
    return ParseOutcome(kind="fallback", result=fallback_result(text))


def to_analysis_result(raw: str) -> AnalysisResult:
    return parse_analysis_response(raw).result
