"""Text normalize/parse commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from wlog.commands.common import get_state, print_json_payload, read_text_argument
from wlog.core.cardio import fill_missing_cardio_fields
from wlog.core.config import resolve_output_dir
from wlog.core.metrics import calculate_total_metrics
from wlog.core.normalize import normalize_text
from wlog.core.parser import build_log
from wlog.exporters.json_export import write_json, write_log
from wlog.exporters.markdown import log_to_markdown, write_markdown
from wlog.utils.date_ranges import today_str, validate_date
from wlog.utils.formatting import workout_row

_COLUMNS = ("Exercise", "Type", "Category", "Load", "Duration", "Cardio", "Note")


def normalize_command(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Raw workout text"),
    read_stdin: bool = typer.Option(False, "--stdin", help="Read text from stdin"),
) -> None:
    """Print the normalized form of raw workout text."""
    state = get_state(ctx)
    raw = read_text_argument(text, read_stdin)
    normalized = normalize_text(raw)

    if state.json_output:
        print_json_payload(state, {"rawText": raw, "normalizedText": normalized})
        return
    typer.echo(normalized)


def parse_command(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Raw workout text"),
    read_stdin: bool = typer.Option(False, "--stdin", help="Read text from stdin"),
    log_date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Log date (YYYY-MM-DD), defaults to today",
        callback=validate_date,
    ),
    memo: Optional[str] = typer.Option(None, help="Free-text memo stored with the log"),
    fill_missing: Optional[bool] = typer.Option(
        None,
        "--fill-missing/--no-fill-missing",
        help="Derive missing cardio distance/speed from the other two fields",
    ),
    output_file: Optional[Path] = typer.Option(None, help="Write the log to a .json or .md file"),
    save: bool = typer.Option(False, help="Save the log as <date>.json in the output directory"),
    output_dir: Optional[Path] = typer.Option(None, help="Output directory used by --save"),
) -> None:
    """Normalize and parse workout text into structured workouts."""
    state = get_state(ctx)
    raw = read_text_argument(text, read_stdin)

    log = build_log(raw, date=log_date or today_str(), memo=memo)
    if fill_missing is None:
        fill_missing = state.fill_missing
    if fill_missing:
        log.workouts = [fill_missing_cardio_fields(workout) for workout in log.workouts]

    written: Optional[Path] = None
    if output_file is not None:
        if output_file.suffix.lower() in {".md", ".markdown"}:
            written = write_markdown(output_file, log_to_markdown(log))
        else:
            written = write_json(output_file, log.to_dict())
    if save:
        out_dir = resolve_output_dir(state.config, explicit=output_dir)
        written = write_log(out_dir, log)

    if state.json_output or (state.output_format == "json" and not state.plain_output):
        payload = log.to_dict()
        payload["totals"] = calculate_total_metrics(log.workouts)
        if written is not None:
            payload["output_file"] = str(written)
        print_json_payload(state, payload)
        return

    if not log.workouts:
        typer.echo("No workouts found")
        return

    if state.plain_output:
        typer.echo("\t".join(column.lower() for column in _COLUMNS))
        for workout in log.workouts:
            typer.echo("\t".join(workout_row(workout)))
        typer.echo(f"total\t{len(log.workouts)}")
        if written is not None:
            typer.echo(f"output_file\t{written}")
        return

    table = Table(title=f"Workouts {log.date} ({len(log.workouts)} total)")
    for column in _COLUMNS:
        table.add_column(column)
    for workout in log.workouts:
        table.add_row(*workout_row(workout))

    state.console.print(table)
    state.console.print(f"Normalized: {log.normalized_text}")
    if written is not None:
        state.console.print(f"Saved to: {written}")
