"""Shared pytest fixtures and test helpers for recordctl tests."""

from __future__ import annotations

import io
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from recordctl.config.settings import RecordSettings
from recordctl.domain.prompting import StreamInput


class RecordingSink:
    """OutputSink that keeps prompts and lines apart for assertions."""

    def __init__(self) -> None:
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def write_prompt(self, text: str) -> None:
        self.prompts.append(text)

    def write_line(self, text: str) -> None:
        self.lines.append(text)


def scripted(*lines: str) -> StreamInput:
    """InputSource that replays *lines* and then reports exhaustion."""
    return StreamInput(io.StringIO("".join(f"{line}\n" for line in lines)))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RecordSettings:
    """Settings rooted at a temp directory with no config file."""
    monkeypatch.delenv("RECORDCTL_CONFIG", raising=False)
    return RecordSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI writes and reads there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.delenv("RECORDCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler swaps made by configure_logging during CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("recordctl")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
