from __future__ import annotations

from fastapi import Request

from designtools.api.write_queue import FileWriteQueue
from designtools.core.project import ProjectConfig
from designtools.core.scan import ScanCache


def get_scan_cache(request: Request) -> ScanCache:
    """Return the scan cache handle the app was created with."""
    cache: ScanCache = request.app.state.scan_cache
    return cache


def get_project(request: Request) -> ProjectConfig:
    return get_scan_cache(request).config


def get_write_queue(request: Request) -> FileWriteQueue:
    queue: FileWriteQueue = request.app.state.write_queue
    return queue
