from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from designtools.api.dependencies import get_scan_cache
from designtools.api.schemas import RescanResponse
from designtools.core.scan import ScanCache
from designtools.models import ComponentEntry, ScanResult, ShadowMap, TokenMap

router = APIRouter(prefix="/scan", tags=["scan"])


@router.get("/all", response_model=ScanResult)
async def scan_all(cache: ScanCache = Depends(get_scan_cache)) -> ScanResult:
    return await asyncio.to_thread(cache.get)


@router.get("/tokens", response_model=TokenMap)
async def scan_tokens(cache: ScanCache = Depends(get_scan_cache)) -> TokenMap:
    result = await asyncio.to_thread(cache.get)
    return result.tokens


@router.get("/shadows", response_model=ShadowMap)
async def scan_shadows(cache: ScanCache = Depends(get_scan_cache)) -> ShadowMap:
    result = await asyncio.to_thread(cache.get)
    return result.shadows


@router.get("/components", response_model=list[ComponentEntry])
async def scan_components(cache: ScanCache = Depends(get_scan_cache)) -> list[ComponentEntry]:
    result = await asyncio.to_thread(cache.get)
    return result.components


@router.post("/rescan", response_model=RescanResponse)
async def rescan(cache: ScanCache = Depends(get_scan_cache)) -> RescanResponse:
    """Drop the cached scan and rebuild it from disk."""
    result = await asyncio.to_thread(cache.rescan)
    return RescanResponse(
        tokens=len(result.tokens.tokens),
        shadows=len(result.shadows.shadows),
        components=len(result.components),
    )
