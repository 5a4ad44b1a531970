"""Startup banner printed by the CLI."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from servedir import __version__
from servedir.config.models import ServedRoot


def print_banner(
    host: str,
    port: int,
    served_root: ServedRoot,
    compress: bool,
    console: Console | None = None,
) -> None:
    """Print server address and settings before uvicorn takes over."""
    console = console or Console()

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Listening", f"http://{host}:{port}")
    table.add_row("Root", str(served_root))
    table.add_row("Compression", "gzip" if compress else "off")

    console.print(
        Panel(table, title=f"[bold blue]servedir[/bold blue] {__version__}", expand=False)
    )
