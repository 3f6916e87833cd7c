from __future__ import annotations

import hashlib
from pathlib import Path

from docx import Document
from pypdf import PdfReader

from resume_analyzer.core.errors import ExtractionError

from .models import ParsedDoc

SUPPORTED_EXTENSIONS = (".txt", ".pdf", ".docx", ".doc")


def _compute_doc_id(text: str, file_path: Path) -> str:
    seed = text if text.strip() else file_path.name
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _parse_txt(file_path: Path) -> tuple[str, list[str]]:
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return text, []


def _parse_pdf(file_path: Path) -> tuple[str, list[str]]:
    warnings: list[str] = []
    reader = PdfReader(str(file_path))
    text_parts: list[str] = []
    for page in reader.pages:
        page_text = (page.extract_text() or "").strip()
        if page_text:
            text_parts.append(page_text)
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), warnings


def _parse_docx(file_path: Path) -> tuple[str, list[str]]:
    warnings: list[str] = []
    document = Document(str(file_path))
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), warnings


def parse_document(file_path: str | Path) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise ExtractionError(f"Input document not found: '{path.name}'")

    extension = path.suffix.lower()
    if extension == ".txt":
        source_type, parser = "txt", _parse_txt
    elif extension == ".pdf":
        source_type, parser = "pdf", _parse_pdf
    elif extension in {".docx", ".doc"}:
        source_type, parser = "docx", _parse_docx
    else:
        raise ExtractionError(
            f"Unsupported file type '{extension}'. Supported types: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    try:
        text, warnings = parser(path)
    except Exception as exc:
        raise ExtractionError(f"Failed to extract text from file: {exc}") from exc

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, file_path=path),
        source_type=source_type,
        text=text,
        parsing_warnings=warnings,
    )


def extract_text(file_path: str | Path) -> str:
    return parse_document(file_path).text
