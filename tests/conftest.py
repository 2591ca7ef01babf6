"""Shared pytest fixtures for calcline tests."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from calcline.core.expression_lang import parse, tokenize
from calcline.core.ir import Expr


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory so no calcline.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def console_buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def console(console_buffer: StringIO) -> Console:
    """Return a plain-text console writing into ``console_buffer``."""
    return Console(file=console_buffer, width=80, color_system=None, force_terminal=False)


@pytest.fixture
def parse_one():
    """Return a helper that parses a single-term line."""

    def _parse(source: str) -> Expr:
        exprs = parse(tokenize(source))
        assert len(exprs) == 1
        return exprs[0]

    return _parse
