from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from designtools.api.dependencies import get_project
from designtools.core.project import ProjectConfig

router = APIRouter()


@router.get("/")
async def root(project: ProjectConfig = Depends(get_project)) -> dict[str, Any]:
    """Root discovery endpoint listing the project being edited and the API surface."""
    return {
        "meta": {
            "title": "designtools",
            "description": "Scan and edit design tokens, shadows and utility classes in source files.",
            "version": "0.1.0",
            "root": str(project.root),
            "styling": project.styling,
        },
        "links": {
            "self": "/",
            "scan": "/scan/all",
            "tokens": "/scan/tokens",
            "shadows": "/scan/shadows",
            "components": "/scan/components",
            "rescan": "/scan/rescan",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
