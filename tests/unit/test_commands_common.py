from __future__ import annotations

import io
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import pytest
import typer
from rich.console import Console

from wlog.commands.common import get_state, print_json_payload, read_text_argument
from wlog.core.state import CLIState


@dataclass
class FakeContext:
    obj: Any


def _state(plain_output: bool = True, config: Optional[Dict[str, Any]] = None) -> CLIState:
    return CLIState(
        json_output=not plain_output,
        plain_output=plain_output,
        verbose=False,
        quiet=False,
        config_path=Path("/tmp/config.toml"),
        config=config or {},
        console=Console(file=io.StringIO(), width=120),
    )


def test_get_state_returns_cli_state() -> None:
    state = _state()
    assert get_state(FakeContext(obj=state)) is state


def test_get_state_raises_on_invalid_obj() -> None:
    with pytest.raises(typer.Exit):
        get_state(FakeContext(obj={"not": "state"}))


def test_print_json_payload_plain_is_compact(capsys: pytest.CaptureFixture[str]) -> None:
    print_json_payload(_state(plain_output=True), {"name": "러닝", "distance_km": 5.0})
    out = capsys.readouterr().out
    assert out.strip() == '{"name":"러닝","distance_km":5.0}'


def test_print_json_payload_rich_console() -> None:
    state = _state(plain_output=False)
    print_json_payload(state, {"name": "러닝"})
    assert json.loads(state.console.file.getvalue()) == {"name": "러닝"}


def test_read_text_argument_prefers_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("푸쉬업 20개"))
    assert read_text_argument("ignored", read_stdin=True) == "푸쉬업 20개"
    assert read_text_argument("러닝 30분", read_stdin=False) == "러닝 30분"


def test_read_text_argument_missing_text_exits() -> None:
    with pytest.raises(typer.Exit):
        read_text_argument(None, read_stdin=False)
