"""Entry point for wlog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from wlog import __version__
from wlog.commands.cardio import cardio_command
from wlog.commands.parse import normalize_command, parse_command
from wlog.commands.summary import summary_command
from wlog.core.config import (
    ConfigError,
    default_config_path,
    load_config,
    resolve_fill_missing,
    resolve_group_by,
    resolve_log_level,
    resolve_output_format,
)
from wlog.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="Korean workout log parser",
    invoke_without_command=True,
)


def configure_logging(level: str) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
        log_level = resolve_log_level(cfg, verbose=verbose, quiet=quiet)
        output_format = resolve_output_format(cfg)
        group_by = resolve_group_by(cfg)
        fill_missing = resolve_fill_missing(cfg)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    configure_logging(log_level)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
        output_format=output_format,
        group_by=group_by,
        fill_missing=fill_missing,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command("normalize")(normalize_command)
app.command("parse")(parse_command)
app.command("cardio")(cardio_command)
app.command("summary")(summary_command)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
