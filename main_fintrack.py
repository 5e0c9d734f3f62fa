"""Mini README: Entry point CLI for launching the FinTrack dashboard.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host and port, and a one-shot export command. Settings come
from ``FINTRACK_`` environment variables when available.
"""

from __future__ import annotations

from pathlib import Path

import typer
import uvicorn

from fintrack.configuration import get_settings
from fintrack.export import LedgerExporter
from fintrack.interface import build_session
from fintrack.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and manage the FinTrack personal ledger.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel, so point at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting FinTrack on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "fintrack.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def export(
    output_directory: Path = typer.Option(None, help="Directory receiving the export file."),
) -> None:
    """Write the stored ledger to a timestamped JSON export."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    session = build_session(settings)
    destination = LedgerExporter().export(
        session.store.list(), output_directory or settings.export_directory
    )
    typer.echo(f"Exported {len(session.store)} transactions to {destination}")


if __name__ == "__main__":
    cli()
