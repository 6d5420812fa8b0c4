"""Typer CLI root application with serve command."""

import typer

from pindrop.core.config import get_settings
from pindrop.core.logging import setup_logging

app = typer.Typer(name="pindrop", help="DIGIPIN and WorldPIN encoding CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "pindrop.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommands."""
    from pindrop.cli.batch_cmd import batch_app
    from pindrop.cli.pin_cmd import bounds, decode, encode, validate

    app.command("encode")(encode)
    app.command("decode")(decode)
    app.command("validate")(validate)
    app.command("bounds")(bounds)
    app.add_typer(batch_app, name="batch", help="Batch CSV conversion commands")


_register_subcommands()
