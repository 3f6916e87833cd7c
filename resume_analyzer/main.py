import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk

from resume_analyzer.api.v1.analyze import router as analyze_router
from resume_analyzer.api.v1.health import router as health_router
from resume_analyzer.api.v1.services import router as services_router
from resume_analyzer.core.config import settings
from resume_analyzer.core.cors import cors_allow_origin_regex, cors_allowed_origins
from resume_analyzer.core.handlers import register_exception_handlers
from resume_analyzer.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Analyzer API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(services_router, prefix="/api", tags=["Services"])
app.include_router(analyze_router, prefix="/api", tags=["Analysis"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("resume_analyzer.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3001")))
