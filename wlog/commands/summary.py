"""Period summary command over saved workout logs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.markdown import Markdown
from rich.table import Table

from wlog.commands.common import get_state, print_json_payload
from wlog.core.metrics import format_metric
from wlog.core.constants import GROUP_BY_CHOICES
from wlog.core.summary import build_summary, summary_to_markdown
from wlog.exporters.json_export import write_json
from wlog.exporters.markdown import write_markdown
from wlog.utils.date_ranges import in_range, validate_date
from wlog.utils.parsing import LogInputError, load_log_input


def summary_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, help="JSON/YAML file with workout logs"),
    read_stdin: bool = typer.Option(False, "--stdin", help="Read logs from stdin"),
    group_by: Optional[str] = typer.Option(None, help="Group by: week|month|day"),
    output_format: str = typer.Option("markdown", "--format", help="Output format: markdown|json"),
    start_date: Optional[str] = typer.Option(None, help="Start date (YYYY-MM-DD)", callback=validate_date),
    end_date: Optional[str] = typer.Option(None, help="End date (YYYY-MM-DD)", callback=validate_date),
    output_file: Optional[Path] = typer.Option(None, help="Write the report to a file"),
) -> None:
    """Summarize workout logs per week, month or day."""
    state = get_state(ctx)

    group = group_by or state.group_by
    if group not in GROUP_BY_CHOICES:
        raise typer.BadParameter(f"--group-by must be one of: {', '.join(GROUP_BY_CHOICES)}")
    if output_format not in {"markdown", "json"}:
        raise typer.BadParameter("--format must be one of: markdown, json")
    if file is None and not read_stdin:
        typer.echo("Provide FILE or --stdin.")
        raise typer.Exit(code=2)

    try:
        logs = load_log_input(
            file,
            read_stdin=read_stdin,
            stdin_text=sys.stdin.read() if read_stdin else "",
        )
    except LogInputError as exc:
        typer.echo(f"Log input error: {exc}")
        raise typer.Exit(code=1)

    logs = [log for log in logs if log.date and in_range(log.date, start_date, end_date)]
    report = build_summary(logs, group_by=group)

    written: Optional[Path] = None
    if output_file is not None:
        if output_format == "json":
            written = write_json(output_file, report)
        else:
            written = write_markdown(output_file, summary_to_markdown(report))

    if state.json_output or output_format == "json":
        if written is not None:
            report = {**report, "output_file": str(written)}
        print_json_payload(state, report)
        return

    if state.plain_output:
        typer.echo("period\tsessions\tworkouts\tdistance_km\tvolume_kg\truns")
        for row in report["periods"]:
            typer.echo(
                "\t".join(
                    [
                        row["period"],
                        str(row["sessions"]),
                        str(row["workouts"]),
                        f"{row['total_adjusted_distance']:.2f}",
                        f"{row['total_volume']:.1f}",
                        str(row["total_run_count"]),
                    ]
                )
            )
        typer.echo(f"total\t{report['summary']['sessions']}")
        if written is not None:
            typer.echo(f"output_file\t{written}")
        return

    if not report["periods"]:
        state.console.print("No workout logs in range")
        return

    table = Table(title=f"Workout summary by {group}")
    table.add_column("Period")
    table.add_column("Sessions")
    table.add_column("Workouts")
    table.add_column("Cardio")
    table.add_column("Volume")
    table.add_column("Runs")
    for row in report["periods"]:
        table.add_row(
            row["period"],
            str(row["sessions"]),
            str(row["workouts"]),
            format_metric(row["total_adjusted_distance"], "distance"),
            format_metric(row["total_volume"], "volume"),
            str(row["total_run_count"]),
        )
    state.console.print(table)
    if state.verbose:
        state.console.print(Markdown(summary_to_markdown(report)))
    if written is not None:
        state.console.print(f"Saved to: {written}")
