from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ParsedDoc(BaseModel):
    doc_id: str
    source_type: str
    text: str
    parsing_warnings: list[str] = Field(default_factory=list)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "txt"}:
            raise ValueError("source_type must be one of: pdf, docx, txt")
        return normalized
