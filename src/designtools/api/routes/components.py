from __future__ import annotations

import asyncio
from functools import partial

from fastapi import APIRouter, Depends

from designtools.api.dependencies import get_project, get_write_queue
from designtools.api.schemas import (
    CleanupResponse,
    ComponentWriteRequest,
    ElementWriteRequest,
    MarkRequest,
    UnmarkRequest,
)
from designtools.api.write_queue import FileWriteQueue
from designtools.core import writes
from designtools.core.paths import safe_path
from designtools.core.project import ProjectConfig
from designtools.core.writes import WriteResult

router = APIRouter(tags=["components"])


@router.post("/component", response_model=WriteResult)
async def write_component(
    body: ComponentWriteRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    """Rewrite a class in a component's source, affecting every instance."""
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(
            writes.write_component_class,
            project.root,
            body.file_path,
            body.old_class,
            body.new_class,
            body.variant_context,
        ),
    )


@router.post("/element", response_model=WriteResult)
async def write_element(
    body: ElementWriteRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    """Edit a single rendered element instance."""
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(
            writes.write_element,
            project.root,
            body.file_path,
            body.kind,
            body.identifier,
            value=body.value,
            old_value=body.old_value,
            prop=body.prop,
            line_hint=body.line_hint,
            eid=body.eid,
            mark=body.mark,
        ),
    )


@router.post("/element/mark", response_model=WriteResult)
async def mark_element(
    body: MarkRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(writes.mark_element, project.root, body.file_path, body.identifier, body.line_hint),
    )


@router.post("/element/unmark", response_model=WriteResult)
async def unmark_element(
    body: UnmarkRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    return await queue.run(path, partial(writes.unmark_element, project.root, body.file_path, body.eid))


@router.post("/element/cleanup", response_model=CleanupResponse)
async def cleanup_markers(
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> CleanupResponse:
    """Strip every leftover element marker from the project, one queued write per file."""
    cleaned: list[str] = []
    for rel_path in await asyncio.to_thread(writes.marker_file_paths, project.root):
        path = safe_path(project.root, rel_path)
        if await queue.run(path, partial(writes.strip_markers_in, project.root, rel_path)):
            cleaned.append(rel_path)
    return CleanupResponse(cleaned=cleaned)
