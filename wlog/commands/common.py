"""Shared command helpers."""

from __future__ import annotations

import json
import sys
from typing import Any, Optional

import typer

from wlog.core.state import CLIState


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)


def read_text_argument(text: Optional[str], read_stdin: bool) -> str:
    """Return the TEXT argument or stdin contents; exit 2 when neither is given."""
    if read_stdin:
        return sys.stdin.read()
    if text is None:
        typer.echo("Provide TEXT or --stdin.")
        raise typer.Exit(code=2)
    return text
