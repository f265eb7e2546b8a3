"""CLI entrypoint for the redirect resolver service."""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from redirect_resolver.logging_utils import configure_logging

from .config import get_settings

app = typer.Typer(help="Redirect Resolver Service command line interface")


@app.command()
def show_config() -> None:
    """Print the active configuration."""

    settings = get_settings()
    typer.echo(settings.model_dump_json(indent=2))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address, defaults to RR_HOST"),
    port: Optional[int] = typer.Option(None, help="Port, defaults to RR_PORT"),
) -> None:
    """Run the HTTP service."""

    settings = get_settings()
    configure_logging(settings.log_file, settings.log_level)
    uvicorn.run(
        "resolver_service.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    app()
