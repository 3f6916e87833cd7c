from resume_analyzer.parsing.parse import extract_text, parse_document

__all__ = ["extract_text", "parse_document"]
