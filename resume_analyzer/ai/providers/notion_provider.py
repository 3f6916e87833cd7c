from __future__ import annotations

from resume_analyzer.ai.providers.heuristics import count_quantified_lines, keyword_overlap, tokenize
from resume_analyzer.ai.types import AnalysisResult


class NotionProvider:
    """Offline stand-in focused on writing and structure."""

    name = "Notion AI"

    def is_available(self) -> bool:
        return True

    async def analyze(self, resume_text: str, job_text: str) -> AnalysisResult:
        matched, missing, percent = keyword_overlap(resume_text, job_text)
        lines = [line.strip() for line in resume_text.splitlines() if line.strip()]
        bullets = [line for line in lines if line[:1] in {"-", "•", "*"}]
        quantified = count_quantified_lines(resume_text)
        word_count = len(tokenize(resume_text))

        strengths = []
        if matched:
            strengths.append(f"Uses the job's own language: {', '.join(matched[:3])}")
        if bullets:
            strengths.append("Experience is organised into scannable bullet points")
        if quantified:
            strengths.append("Includes quantified achievements")
        if word_count >= 200:
            strengths.append("Provides enough detail for a reviewer to assess fit")

        improvements = []
        if not bullets:
            improvements.append("Break dense paragraphs into short bullet points")
        if quantified < 2:
            improvements.append("Add numbers to show the scope of your achievements")
        if word_count < 200:
            improvements.append("Add a short professional summary tailored to this role")
        if missing:
            improvements.append("Mirror more of the job description's terminology")

        recommendations = [
            "Open with a two-line summary that names the target role",
            "Start each bullet with a strong action verb",
        ]
        if missing:
            recommendations.append(f"Work '{missing[0]}' into a relevant bullet")

        rewrite = ""
        focus = matched[:2] or missing[:2]
        if bullets and focus:
            first = bullets[0].lstrip("-•* ").rstrip(".")
            rewrite = f"- {first}, aligned with the role's focus on {', '.join(focus)}."

        return AnalysisResult(
            summary=(
                f"Writing review: {len(lines)} content lines, {len(bullets)} bullet points, "
                f"about {percent}% keyword alignment with the job description."
            ),
            strengths=strengths,
            improvements=improvements,
            keyword_match=percent,
            skill_gaps=missing,
            recommendations=recommendations,
            optimized_content=rewrite,
        )
