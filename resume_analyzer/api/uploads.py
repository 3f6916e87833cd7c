"""Spooling of uploaded documents to short-lived temp files."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import UploadFile

from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import UnsupportedFileTypeError, UploadTooLargeError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf", ".docx", ".doc", ".txt"}
CHUNK_BYTES = 1024 * 64


def upload_extension(filename: str | None) -> str:
    return Path(filename or "").suffix.lower()


def check_extension(upload: UploadFile) -> str:
    ext = upload_extension(upload.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileTypeError(
            "Invalid file type. Only PDF, DOCX, DOC, and TXT files are allowed."
        )
    return ext


@asynccontextmanager
async def spooled_upload(upload: UploadFile, *, field: str) -> AsyncIterator[Path]:
    """Write ``upload`` to a temp file, yield its path, and always delete it."""
    ext = check_extension(upload)
    limit = settings.max_upload_bytes
    directory = Path(settings.upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    fd, name = tempfile.mkstemp(prefix=f"{field}-", suffix=ext, dir=directory)
    path = Path(name)
    try:
        total = 0
        with os.fdopen(fd, "wb") as handle:
            while True:
                chunk = await upload.read(CHUNK_BYTES)
                if not chunk:
                    break
                total += len(chunk)
                if total > limit:
                    raise UploadTooLargeError(
                        f"File too large. Maximum size is {limit // (1024 * 1024)}MB."
                    )
                handle.write(chunk)
        logger.debug("upload_spooled field=%s bytes=%s", field, total)
        yield path
    finally:
        with contextlib.suppress(FileNotFoundError):
            path.unlink()
