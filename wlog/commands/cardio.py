"""Cardio fairness lookup command."""

from __future__ import annotations

from typing import Any, Dict, List

import typer
from rich.table import Table

from wlog.commands.common import get_state, print_json_payload
from wlog.core.cardio import (
    get_cardio_category_name,
    get_cardio_icon,
    get_cardio_multiplier,
    get_multiplier_text,
    map_to_cardio_category,
)


def _describe(name: str) -> Dict[str, Any]:
    return {
        "name": name,
        "category": map_to_cardio_category(name).value,
        "label": get_cardio_category_name(name),
        "icon": get_cardio_icon(name),
        "multiplier": get_cardio_multiplier(name),
        "multiplier_text": get_multiplier_text(name),
    }


def cardio_command(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Exercise names to look up"),
) -> None:
    """Show the cardio category and distance multiplier for exercise names."""
    state = get_state(ctx)
    rows = [_describe(name) for name in names]

    if state.json_output:
        print_json_payload(state, rows)
        return

    if state.plain_output:
        typer.echo("name\tcategory\tlabel\tmultiplier")
        for row in rows:
            typer.echo(f"{row['name']}\t{row['category']}\t{row['label']}\t{row['multiplier']}")
        return

    table = Table(title="Cardio categories")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Label")
    table.add_column("Multiplier")
    for row in rows:
        table.add_row(
            row["name"],
            row["category"],
            f"{row['icon']} {row['label']}",
            row["multiplier_text"] or "×1.0",
        )
    state.console.print(table)
