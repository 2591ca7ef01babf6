"""Tests for calcline.toml loading."""

from pathlib import Path

import pytest

from calcline.core.errors import ConfigError
from calcline.core.manifest import (
    CONFIG_FILENAME,
    CalcConfig,
    find_config,
    load_config,
    validate_log_level,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / CONFIG_FILENAME
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = CalcConfig()
    assert config.repl.prompt == "> "
    assert config.repl.history is True
    assert config.output.precision is None
    assert config.output.show_tokens is False
    assert config.output.show_ast is False
    assert config.logging.level == "WARNING"
    assert config.path is None


def test_load_full_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[repl]
prompt = "calc> "
history = false

[output]
precision = 4
show_tokens = true
show_ast = true

[logging]
level = "debug"
""",
    )
    config = load_config(path)
    assert config.repl.prompt == "calc> "
    assert config.repl.history is False
    assert config.output.precision == 4
    assert config.output.show_tokens is True
    assert config.output.show_ast is True
    assert config.logging.level == "DEBUG"
    assert config.path == path


def test_partial_file_keeps_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, '[output]\nprecision = 2\n'))
    assert config.output.precision == 2
    assert config.repl.prompt == "> "


def test_find_config_without_file(tmp_path: Path) -> None:
    assert find_config(tmp_path) == CalcConfig()


def test_find_config_with_file(tmp_path: Path) -> None:
    _write(tmp_path, '[repl]\nprompt = "$ "\n')
    assert find_config(tmp_path).repl.prompt == "$ "


@pytest.mark.parametrize(
    "content",
    [
        "[output]\nprecision = -1\n",
        '[output]\nprecision = "three"\n',
        "[output]\nprecision = true\n",
        '[output]\nshow_ast = "yes"\n',
        "[repl]\nprompt = 5\n",
        '[logging]\nlevel = "LOUD"\n',
        "[repl\nprompt = ",
        "repl = 5\n",
        'output = "x"\n',
        "logging = [1, 2]\n",
    ],
)
def test_invalid_values(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, content))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read"):
        load_config(tmp_path / "nope.toml")


def test_section_must_be_table(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match=r"\[repl\] must be a table"):
        load_config(_write(tmp_path, "repl = 5\n"))


@pytest.mark.parametrize("level", ["debug", "Info", "WARNING", "critical"])
def test_validate_log_level(level: str) -> None:
    assert validate_log_level(level) == level.upper()


@pytest.mark.parametrize("level", ["LOUD", "", "warn"])
def test_validate_log_level_rejects_unknown(level: str) -> None:
    with pytest.raises(ConfigError, match="log level must be one of"):
        validate_log_level(level)
