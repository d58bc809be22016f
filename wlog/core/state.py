"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rich.console import Console


@dataclass
class CLIState:
    """Global CLI flags plus the config values commands fall back on.

    ``output_format``, ``group_by`` and ``fill_missing`` are validated once when
    the config is loaded, so commands never re-read the raw ``config`` dict
    for them.
    """

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    output_format: str = "table"
    group_by: str = "week"
    fill_missing: bool = False
