"""Deterministic text heuristics shared by the offline demo providers."""

from __future__ import annotations

import hashlib
import re
from collections import Counter

_WORD_RE = re.compile(r"[a-z][a-z0-9+#.\-]*[a-z0-9+#]|[a-z]")
_NUMBER_RE = re.compile(r"\d+(?:[.,]\d+)?\s*(?:%|k\b|m\b|\+)?")

STOPWORDS = frozenset(
    {
        "and", "the", "for", "with", "you", "your", "our", "are", "will", "who", "that",
        "this", "from", "have", "has", "was", "were", "can", "all", "any", "not", "but",
        "about", "into", "their", "they", "them", "its", "also", "such", "using", "use",
        "work", "working", "team", "teams", "role", "seeking", "looking", "must", "should",
        "years", "year", "experience", "experienced", "ability", "strong", "plus", "including",
        "etc", "across", "within", "other", "more", "well", "new", "job", "candidate",
    }
)


def tokenize(text: str) -> list[str]:
    return _WORD_RE.findall((text or "").lower())


def job_keywords(job_text: str, limit: int = 20) -> list[str]:
    counts = Counter(
        token for token in tokenize(job_text) if len(token) >= 3 and token not in STOPWORDS
    )
    return [word for word, _ in counts.most_common(limit)]


def keyword_overlap(resume_text: str, job_text: str) -> tuple[list[str], list[str], int]:
    keywords = job_keywords(job_text)
    if not keywords:
        return [], [], 0
    resume_tokens = set(tokenize(resume_text))
    matched = [word for word in keywords if word in resume_tokens]
    missing = [word for word in keywords if word not in resume_tokens]
    percent = round(100 * len(matched) / len(keywords))
    return matched, missing, percent


def count_quantified_lines(text: str) -> int:
    return sum(1 for line in (text or "").splitlines() if _NUMBER_RE.search(line))


def stable_choice(options: tuple[str, ...], *parts: str) -> str:
    seed = "\x1f".join(parts)
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).digest()
    return options[digest[0] % len(options)]
