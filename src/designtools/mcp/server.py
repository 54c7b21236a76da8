"""FastMCP server exposing designtools scan and write tools."""

from __future__ import annotations

import asyncio
from typing import Any

from fastmcp import FastMCP

from designtools.core import writes
from designtools.core.computed_classes import computed_to_class
from designtools.core.errors import DesignToolsError
from designtools.core.scan import ScanCache
from designtools.core.utility_classes import parse_classes as _parse_classes
from designtools.core.writes import WriteResult


def _describe(result: WriteResult) -> str:
    if not result.changed:
        return f"No change to {result.file_path}"
    return f"Wrote {result.identifier} = {result.value} in {result.file_path}"


def create_mcp_server(cache: ScanCache) -> FastMCP:
    """Create a FastMCP server bound to one project's scan cache."""

    mcp = FastMCP("designtools", instructions="Scan and edit design tokens, shadows and utility classes.")

    @mcp.tool()
    async def scan_tokens(category: str | None = None) -> list[dict[str, Any]]:
        """List design tokens from the project's primary stylesheet."""
        result = await asyncio.to_thread(cache.get)
        tokens = result.tokens.tokens
        return [t.model_dump() for t in tokens if category is None or t.category == category]

    @mcp.tool()
    async def scan_shadows() -> list[dict[str, Any]]:
        """List shadows from custom properties, token files and framework presets."""
        result = await asyncio.to_thread(cache.get)
        return [s.model_dump(exclude_none=True) for s in result.shadows.shadows]

    @mcp.tool()
    async def scan_components() -> list[dict[str, Any]]:
        """List components with their variant dimensions."""
        result = await asyncio.to_thread(cache.get)
        return [c.model_dump() for c in result.components]

    @mcp.tool()
    async def rescan() -> str:
        """Drop cached scan results and scan the project again."""
        result = await asyncio.to_thread(cache.rescan)
        return (
            f"Scanned {len(result.tokens.tokens)} tokens, {len(result.shadows.shadows)} shadows, "
            f"{len(result.components)} components"
        )

    @mcp.tool()
    async def parse_classes(classes: str) -> list[dict[str, Any]]:
        """Parse a utility class string into structured properties."""
        return [p.model_dump() for p in _parse_classes(classes).all()]

    @mcp.tool()
    async def class_from_computed(css_property: str, value: str, prefix: str | None = None) -> str:
        """Suggest the utility class for a rendered CSS value."""
        try:
            return computed_to_class(css_property, value, prefix).class_name
        except DesignToolsError as exc:
            return f"Error: {exc}"

    @mcp.tool()
    async def write_token(file_path: str, token: str, value: str, selector: str = ":root") -> str:
        """Replace a custom property's value inside a selector block."""
        try:
            return _describe(writes.write_token(cache.root, file_path, selector, token, value))
        except DesignToolsError as exc:
            return f"Error: {exc}"

    @mcp.tool()
    async def write_shadow(
        file_path: str, variable: str, value: str, selector: str = ":root", create: bool = False
    ) -> str:
        """Write a shadow to a selector block, @theme, or a Sass file (selector "scss")."""
        try:
            return _describe(writes.write_shadow(cache.root, file_path, variable, value, selector, create=create))
        except DesignToolsError as exc:
            return f"Error: {exc}"

    @mcp.tool()
    async def write_component_class(
        file_path: str, old_class: str, new_class: str, variant_context: str | None = None
    ) -> str:
        """Swap a class in a component source file."""
        try:
            return _describe(writes.write_component_class(cache.root, file_path, old_class, new_class, variant_context))
        except DesignToolsError as exc:
            return f"Error: {exc}"

    return mcp
