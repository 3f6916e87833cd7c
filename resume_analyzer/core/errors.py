"""Errors raised while routing and running an analysis.

Every class carries a short machine-readable ``code`` and the HTTP status the
API layer answers with. Parsing problems inside the result parser are not
errors; they degrade into the fallback result instead.
"""

from __future__ import annotations


class AnalysisError(RuntimeError):
    code = "analysis_error"
    status_code = 500


class ValidationError(AnalysisError):
    """Required input is missing or empty."""

    code = "validation_error"
    status_code = 400


class UnsupportedFileTypeError(ValidationError):
    code = "unsupported_file_type"


class UploadTooLargeError(ValidationError):
    code = "file_too_large"
    status_code = 413


class ExtractionError(ValidationError):
    code = "extraction_failed"
    status_code = 422


class NotFoundError(AnalysisError):
    """No provider is registered under the requested key."""

    code = "provider_not_found"
    status_code = 404


class UnavailableError(AnalysisError):
    """The provider is registered but reports itself unavailable."""

    code = "provider_unavailable"
    status_code = 409


class ConfigurationError(AnalysisError):
    """The provider was invoked without its required credential."""

    code = "provider_not_configured"
    status_code = 503


class ProviderError(AnalysisError):
    """The upstream model or its transport failed."""

    code = "provider_error"
    status_code = 502
