from __future__ import annotations

from functools import partial

from fastapi import APIRouter, Depends

from designtools.api.dependencies import get_project, get_write_queue
from designtools.api.schemas import TokenWriteRequest
from designtools.api.write_queue import FileWriteQueue
from designtools.core import writes
from designtools.core.paths import safe_path
from designtools.core.project import ProjectConfig
from designtools.core.writes import WriteResult

router = APIRouter(prefix="/tokens", tags=["tokens"])


@router.post("", response_model=WriteResult)
async def write_token(
    body: TokenWriteRequest,
    project: ProjectConfig = Depends(get_project),
    queue: FileWriteQueue = Depends(get_write_queue),
) -> WriteResult:
    path = safe_path(project.root, body.file_path)
    return await queue.run(
        path,
        partial(writes.write_token, project.root, body.file_path, body.selector, body.token, body.value),
    )
