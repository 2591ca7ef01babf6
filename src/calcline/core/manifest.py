import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from calcline.core.errors import ConfigError

CONFIG_FILENAME = "calcline.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReplConfig:
    """Interactive loop configuration."""

    prompt: str = "> "
    history: bool = True  # Record entered lines for the `history` command


@dataclass
class OutputConfig:
    """How results are rendered."""

    precision: int | None = None  # None = shortest round-trip repr
    show_tokens: bool = False
    show_ast: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class CalcConfig:
    """Complete calcline configuration.

    Examples in calcline.toml:

        [repl]
        prompt = "calc> "

        [output]
        precision = 4
        show_ast = true

        [logging]
        level = "DEBUG"
    """

    repl: ReplConfig = field(default_factory=ReplConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None  # File the settings were read from, if any


def _expect(section: str, key: str, value: Any, kind: type) -> Any:
    # bool is an int subclass; reject it where a number is wanted
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"[{section}] {key} has invalid value {value!r}")
    return value


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def validate_log_level(level: str) -> str:
    """Normalize a logging level name, rejecting unknown ones."""
    name = level.upper()
    if name not in _LOG_LEVELS:
        raise ConfigError(f"log level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return name


def load_config(path: Path) -> CalcConfig:
    """Read settings from a calcline.toml file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e.strerror}") from e

    repl_data = _section(data, "repl")
    output_data = _section(data, "output")
    logging_data = _section(data, "logging")

    repl_config = ReplConfig(
        prompt=_expect("repl", "prompt", repl_data.get("prompt", "> "), str),
        history=_expect("repl", "history", repl_data.get("history", True), bool),
    )

    precision = output_data.get("precision")
    if precision is not None:
        _expect("output", "precision", precision, int)
        if precision < 0:
            raise ConfigError(f"[output] precision must not be negative, got {precision}")

    output_config = OutputConfig(
        precision=precision,
        show_tokens=_expect("output", "show_tokens", output_data.get("show_tokens", False), bool),
        show_ast=_expect("output", "show_ast", output_data.get("show_ast", False), bool),
    )

    level = _expect("logging", "level", logging_data.get("level", "WARNING"), str)
    level = validate_log_level(level)

    return CalcConfig(
        repl=repl_config,
        output=output_config,
        logging=LoggingConfig(level=level),
        path=path,
    )


def find_config(start: Path | None = None) -> CalcConfig:
    """Load calcline.toml from the given directory, or defaults if absent."""
    directory = start or Path.cwd()
    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate)
    return CalcConfig()


def configure_logging(level: str) -> None:
    """Configure root logging for the CLI process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
