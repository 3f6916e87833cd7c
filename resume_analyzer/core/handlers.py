from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_analyzer.core.errors import AnalysisError

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str) -> dict[str, str]:
    return {"error": code, "message": message}


async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.info
    log("request_failed path=%s error=%s message=%s", request.url.path, exc.code, exc)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.code, str(exc)))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()) if part != 'body')}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("validation_error", problems or "Invalid request."),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_crashed path=%s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("internal_error", "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AnalysisError, analysis_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
