import typer

from designtools.cli.output import console, project_from

serve_app = typer.Typer(help="Start servers.")


@serve_app.command("api")
def api(
    ctx: typer.Context,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from designtools.api.app import create_app

    app = create_app(project_from(ctx))
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    ctx: typer.Context,
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from designtools.core.scan import ScanCache
    from designtools.mcp.server import create_mcp_server

    server = create_mcp_server(ScanCache(project_from(ctx)))
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
