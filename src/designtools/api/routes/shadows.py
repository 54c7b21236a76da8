from __future__ import annotations

from functools import partial

from fastapi import APIRouter, Depends

from designtools.api.dependencies import get_project, get_write_queue
from designtools.api.schemas import DesignTokenWriteRequest, ExportTokensRequest, ShadowWriteRequest
from designtools.api.write_queue import FileWriteQueue
from designtools.core import writes
from designtools.core.paths import safe_path
from designtools.core.presets import DESIGN_PRESETS
from designtools.core.project import ProjectConfig
from designtools.core.writes import WriteResult

router = APIRouter(prefix="/shadows", tags=["shadows"])


@router.get("/presets")
async def presets() -> list[dict[str, str]]:
    """Starting points for new shadows, grouped by category."""
    return [p._asdict() for p in DESIGN_PRESETS]


@router.post("", response_model=WriteResult)
async def write_shadow(
    body: ShadowWriteRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(writes.write_shadow, project.root, body.file_path, body.variable, body.value, body.selector),
    )


@router.post("/create", response_model=WriteResult)
async def create_shadow(
    body: ShadowWriteRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(writes.create_shadow, project.root, body.file_path, body.variable, body.value, body.selector),
    )


@router.post("/design-token", response_model=WriteResult)
async def write_design_token(
    body: DesignTokenWriteRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(writes.write_design_token, project.root, body.file_path, body.token_path, body.value),
    )


@router.post("/export-tokens", response_model=WriteResult)
async def export_tokens(
    body: ExportTokensRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    shadows = [(s.name, s.value, s.description) for s in body.shadows]
    return await queue.run(path, partial(writes.export_design_tokens, project.root, body.file_path, shadows))
