import logging
from contextlib import asynccontextmanager

from resume_analyzer.ai.registry import get_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    registry = get_registry()
    for info in registry.list_providers():
        if info.available:
            logger.info("provider_ready id=%s name=%s", info.id, info.display_name)
        else:
            logger.warning(
                "provider_offline id=%s name=%s: credentials not configured, it will report as offline",
                info.id,
                info.display_name,
            )
    yield
    await registry.aclose()
