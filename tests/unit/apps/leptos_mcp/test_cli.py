from __future__ import annotations

import io
import json
import logging
import sys
from pathlib import Path

import pytest

from apps.leptos_mcp import cli
from apps.leptos_mcp.cli import create_parser, main


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def test_cli_parser_defaults() -> None:
    namespace = create_parser().parse_args([])
    assert namespace.log_level is None
    assert namespace.docs_dir is None


def test_cli_parser_accepts_lowercase_levels(tmp_path: Path) -> None:
    namespace = create_parser().parse_args(["--log-level", "debug", "--docs-dir", str(tmp_path)])
    assert namespace.log_level == "DEBUG"
    assert namespace.docs_dir == str(tmp_path)


def test_cli_parser_rejects_unknown_level() -> None:
    with pytest.raises(SystemExit):
        create_parser().parse_args(["--log-level", "loud"])


def test_main_serves_until_end_of_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LEPTOS_MCP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LEPTOS_MCP_DOCS_DIR", raising=False)
    monkeypatch.setattr(
        sys,
        "stdin",
        io.StringIO(
            '{"jsonrpc":"2.0","id":1,"method":"initialize"}\n'
            '{"jsonrpc":"2.0","method":"notifications/initialized"}\n'
            '{"jsonrpc":"2.0","id":2,"method":"tools/list"}\n'
        ),
    )
    stdout = io.StringIO()
    stderr = io.StringIO()
    monkeypatch.setattr(sys, "stdout", stdout)
    monkeypatch.setattr(sys, "stderr", stderr)

    assert main(["--log-level", "INFO"]) == 0

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert [response["id"] for response in responses] == [1, 2]
    assert "Starting Leptos MCP Server..." in stderr.getvalue()


def test_main_fails_on_missing_docs(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("LEPTOS_MCP_LOG_LEVEL", raising=False)
    assert main(["--docs-dir", str(tmp_path / "nowhere")]) == 1
    assert "Documentation manifest not found" in capsys.readouterr().err


def test_main_fails_on_bad_environment_level(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LEPTOS_MCP_LOG_LEVEL", "loud")
    assert main([]) == 1
    assert "Unsupported log level" in capsys.readouterr().err


def test_main_returns_zero_on_interrupt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LEPTOS_MCP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LEPTOS_MCP_DOCS_DIR", raising=False)

    class _Session:
        def run(self) -> None:
            raise KeyboardInterrupt

    monkeypatch.setattr(cli, "create_session", lambda settings: _Session())
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    assert main([]) == 0
