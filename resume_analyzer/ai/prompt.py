from __future__ import annotations

from resume_analyzer.ai.types import ChatMessage

SYSTEM_PROMPT = (
    "You are a professional resume optimization specialist. "
    "You compare a resume against a job description and reply with one JSON object only."
)

RESULT_SCHEMA = """{
  "summary": "Two or three sentences on how well the resume fits this role",
  "strengths": ["Up to 5 strengths that match the job"],
  "improvements": ["Up to 5 concrete areas to improve"],
  "keywordMatch": 0,
  "skillGaps": ["Up to 5 skills the job asks for that the resume does not show"],
  "recommendations": ["Up to 5 specific, actionable edits"],
  "optimizedContent": "Two or three rewritten resume bullet points aimed at this job"
}"""


def build_analysis_prompt(resume_text: str, job_text: str) -> str:
    return "\n".join(
        [
            "Analyze the resume below against the job description.",
            "",
            "JOB DESCRIPTION:",
            job_text.strip(),
            "",
            "RESUME:",
            resume_text.strip(),
            "",
            "Return a JSON object with exactly these seven fields and nothing else:",
            RESULT_SCHEMA,
            "",
            "keywordMatch is an integer from 0 to 100 for keyword alignment.",
            "Weigh skills alignment, relevance of experience, quantified impact, and industry terminology.",
            "Keep every list item short and specific to this role.",
        ]
    )


def build_analysis_messages(resume_text: str, job_text: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_analysis_prompt(resume_text, job_text)),
    ]
