"""Web server command."""

import click

from ..config import get_settings


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: from settings)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: from settings)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, reload: bool):
    """Start the HTTP server.

    Serves the message endpoint (POST /messages/{pattern}) and the REST
    routes for every entity. The schema is created on startup.

    Examples:

        # Start on the configured port
        fitness-catalog serve

        # Expose to network (all interfaces)
        fitness-catalog serve --host 0.0.0.0 --port 3002
    """
    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo(click.style("Starting fitness-catalog server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo("Press Ctrl+C to stop the server.")

    uvicorn.run(
        create_app() if not reload else "fitness_catalog.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_config=None,
    )
