from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from designtools.api.lifespan import lifespan
from designtools.api.routes.classes import router as classes_router
from designtools.api.routes.components import router as components_router
from designtools.api.routes.health import router as health_router
from designtools.api.routes.root import router as root_router
from designtools.api.routes.scan import router as scan_router
from designtools.api.routes.shadows import router as shadows_router
from designtools.api.routes.tokens import router as tokens_router
from designtools.api.write_queue import FileWriteQueue
from designtools.core.errors import (
    AmbiguousError,
    DesignToolsError,
    InvalidPathError,
    NotFoundError,
    UnparsableError,
)
from designtools.core.project import ProjectConfig
from designtools.core.scan import ScanCache

logger = logging.getLogger(__name__)

_STATUS_CODES: tuple[tuple[type[DesignToolsError], int], ...] = (
    (NotFoundError, 404),
    (AmbiguousError, 409),
    (InvalidPathError, 400),
    (UnparsableError, 422),
)


async def design_tools_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    status_code = next((code for cls, code in _STATUS_CODES if isinstance(exc, cls)), 500)
    kind = getattr(exc, "kind", "error")
    logger.info("Request failed (%s): %s", kind, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error": kind})


def create_app(config: ProjectConfig | None = None) -> FastAPI:
    app = FastAPI(
        title="designtools API",
        description="Scan and edit design tokens, shadows and utility classes in source files.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.scan_cache = ScanCache(config or ProjectConfig.from_env())
    app.state.write_queue = FileWriteQueue()

    app.add_exception_handler(DesignToolsError, design_tools_error_handler)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(scan_router)
    app.include_router(tokens_router)
    app.include_router(shadows_router)
    app.include_router(components_router)
    app.include_router(classes_router)

    return app
