from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Serving design tools for %s (%s)", app.state.scan_cache.root, app.state.scan_cache.config.styling)
    yield
    app.state.scan_cache.invalidate()
