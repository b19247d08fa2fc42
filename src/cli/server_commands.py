"""Server and database CLI commands."""

import typer
from rich.panel import Panel

from src.app.runtime.context import get_config

from .utils import console

serve_app = typer.Typer(help="🚀 Run the HTTP or gRPC server")
db_app = typer.Typer(help="🗄️  Database commands")


@serve_app.command("http")
def serve_http(
    host: str | None = typer.Option(None, help="Host to bind; defaults to app.host"),
    port: int | None = typer.Option(None, help="Port to bind; defaults to app.port"),
) -> None:
    """Start the REST API with uvicorn."""
    import uvicorn

    from src.app.api.http.app import app
    from src.app.api.utils.app_startup import configure_logging

    config = get_config()
    configure_logging(config)
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting HTTP server on {bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(app, host=bind_host, port=bind_port, access_log=False)


@serve_app.command("grpc")
def serve_grpc() -> None:
    """Start the gRPC server."""
    from src.app.api.rpc.server import serve

    config = get_config()
    console.print(
        Panel.fit(
            f"[bold green]Starting gRPC server on {config.grpc.address}[/bold green]",
            border_style="green",
        )
    )
    serve(config)


@db_app.command("init")
def init_database() -> None:
    """Create the books table if it does not exist."""
    from src.app.runtime.init_db import init_db

    init_db()
    console.print("[green]✅ Database initialized[/green]")
