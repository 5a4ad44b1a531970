"""CLI main entry point using Typer."""

from pathlib import Path

import typer
import uvicorn
from rich.console import Console

from servedir.config.models import VALID_LOG_LEVELS, ServedRoot, ServerConfig
from servedir.config.settings import (
    DEFAULT_COMPRESS,
    DEFAULT_COMPRESS_MIN_SIZE,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_ROOT,
)

app = typer.Typer(
    name="servedir",
    help="Serve a directory over HTTP without leaving it",
    add_completion=False,
)

console = Console()


@app.command()
def serve(
    root: Path = typer.Argument(
        DEFAULT_ROOT,
        help="Directory to serve",
    ),
    port: int = typer.Option(
        DEFAULT_PORT,
        "--port",
        "-p",
        help="Port to bind server (1024-65535)",
        min=1024,
        max=65535,
    ),
    host: str = typer.Option(
        DEFAULT_HOST,
        "--host",
        "-h",
        help="Host to bind server",
    ),
    compress: bool = typer.Option(
        DEFAULT_COMPRESS,
        "--compress/--no-compress",
        help="Gzip responses the client accepts compressed",
    ),
    compress_min_size: int = typer.Option(
        DEFAULT_COMPRESS_MIN_SIZE,
        "--compress-min-size",
        help="Smallest response body to compress, in bytes",
        min=0,
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "--log",
        "-l",
        help=f"Logging level ({'/'.join(VALID_LOG_LEVELS)})",
    ),
) -> None:
    """Start the file server."""
    try:
        # Validate path
        if not root.exists():
            console.print(f"[red]✗[/red] Path not found: {root}", style="bold")
            raise typer.Exit(code=3)

        # Create server config
        config = ServerConfig(
            host=host,
            port=port,
            served_root=root,
            compress=compress,
            compress_min_size=compress_min_size,
            log_level=log_level,
        )

        # Validate config
        try:
            config.validate()
        except ValueError as e:
            console.print(f"[red]✗[/red] Configuration error: {e}", style="bold")
            raise typer.Exit(code=2)

        from servedir.logging import configure_logging
        from servedir.server.app import create_app
        from servedir.server.banner import print_banner

        configure_logging(config.log_level)
        server_app = create_app(config)

        print_banner(
            host=host,
            port=port,
            served_root=server_app.state.served_root,
            compress=config.compress,
            console=console,
        )

        # Start server
        uvicorn.run(
            server_app,
            host=host,
            port=port,
            log_level=log_level.lower(),
        )

    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")
        raise typer.Exit(code=0)
    except OSError as e:
        if "address already in use" in str(e).lower():
            console.print(f"[red]✗[/red] Port {port} is already in use", style="bold")
            raise typer.Exit(code=5)
        console.print(f"[red]✗[/red] Error: {e}", style="bold")
        raise typer.Exit(code=1)


@app.command()
def resolve(
    request_path: str = typer.Argument(
        ...,
        help="Request path as a client would send it, e.g. /docs/",
    ),
    root: Path = typer.Option(
        DEFAULT_ROOT,
        "--root",
        "-r",
        help="Directory that would be served",
    ),
) -> None:
    """Show how a request path would be resolved, without serving it."""
    from servedir.security.path_validator import Resolved, resolve_request_path
    from servedir.server.responder import guess_content_type

    try:
        served_root = ServedRoot.from_path(root)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}", style="bold")
        raise typer.Exit(code=3)

    if not request_path.startswith("/"):
        request_path = f"/{request_path}"

    resolution = resolve_request_path(request_path, served_root)

    if isinstance(resolution, Resolved):
        content_type = guess_content_type(resolution.path) or "(none, client sniffs)"
        console.print(f"[green]✓[/green] {request_path} → {resolution.path}")
        console.print(f"  Content-Type: {content_type}")
        return

    outcome = type(resolution).__name__
    console.print(f"[red]✗[/red] {request_path} → {outcome}")
    raise typer.Exit(code=1)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
