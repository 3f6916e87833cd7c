from __future__ import annotations

from resume_analyzer.ai.providers.heuristics import (
    count_quantified_lines,
    keyword_overlap,
    stable_choice,
    tokenize,
)
from resume_analyzer.ai.types import AnalysisResult

TECH_LEVELS = ("junior", "mid-level", "senior", "staff")


class CopilotProvider:
    """Offline stand-in that gives a technically flavoured critique."""

    name = "GitHub Copilot"

    def is_available(self) -> bool:
        return True

    def _tech_level(self, resume_text: str, job_text: str) -> str:
        return stable_choice(TECH_LEVELS, resume_text, job_text)

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult:
        matched, missing, percent = keyword_overlap(resume_text, job_text)
        level = self._tech_level(resume_text, job_text)
        word_count = len(tokenize(resume_text))
        quantified = count_quantified_lines(resume_text)

        strengths = [f"Demonstrates {word} relevant to the role" for word in matched[:3]]
        if quantified:
            strengths.append(f"{quantified} line(s) with measurable outcomes")
        strengths.append(f"Technical profile reads as {level}")

        improvements = []
        if missing:
            improvements.append("Cover more of the stack named in the job description")
        if not quantified:
            improvements.append("Quantify impact with latency, scale or cost figures")
        if word_count < 150:
            improvements.append("Expand project descriptions with architecture and tooling details")
        improvements.append("Lead each bullet with the technology and the result")

        recommendations = [f"Add concrete project evidence for {word}" for word in missing[:3]]
        recommendations.append(f"Frame experience for a {level} engineering audience")
        recommendations.append("Link to repositories or technical write-ups where possible")

        return AnalysisResult(
            summary=(
                f"Technical review at a {level} level: the resume covers {len(matched)} "
                f"of the job's top {len(matched) + len(missing)} keywords."
            ),
            strengths=strengths,
            improvements=improvements,
            keyword_match=percent,
            skill_gaps=missing,
            recommendations=recommendations,
            optimized_content="",
        )
