"""
calcline CLI - Entry point.

Commands:
- repl: interactive calculator (also the default with no command)
- eval: evaluate one line and exit
- tokens: show the token stream for a line
- ast: show the parsed expression tree for a line
"""

from __future__ import annotations

import logging
import platform
from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from calcline._version import get_version
from calcline.core.errors import CalcError, ConfigError, LexError, ParseError
from calcline.core.expression_lang import parse, tokenize
from calcline.core.manifest import (
    CalcConfig,
    configure_logging,
    find_config,
    load_config,
    validate_log_level,
)
from calcline.core.pipeline import run_line
from calcline.repl import Repl, render_line

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="""calcline – interactive arithmetic calculator

Run without a command to start the interactive loop.
Settings are read from ./calcline.toml when present.
""",
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"calcline {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def _print_error(error: CalcError) -> None:
    console.print(error.format(), style="red", markup=False, highlight=False)


def _config(ctx: typer.Context) -> CalcConfig:
    config = ctx.obj
    if not isinstance(config, CalcConfig):
        return CalcConfig()
    return config


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to calcline.toml (default: ./calcline.toml)"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """calcline CLI main callback for global options."""
    try:
        config = load_config(config_path) if config_path else find_config()
        if log_level:
            level = validate_log_level(log_level)
            config = replace(config, logging=replace(config.logging, level=level))
    except ConfigError as e:
        _print_error(e)
        raise typer.Exit(code=2) from e

    configure_logging(config.logging.level)
    if config.path:
        logger.debug("Loaded settings from %s", config.path)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        Repl(config, console=console).run()


@app.command()
def repl(
    ctx: typer.Context,
    prompt: str | None = typer.Option(None, "--prompt", help="Prompt shown before each line"),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=0, help="Decimal places in results"
    ),
    show_tokens: bool | None = typer.Option(
        None, "--show-tokens/--hide-tokens", help="Print the token stream of each line"
    ),
    show_ast: bool | None = typer.Option(
        None, "--show-ast/--hide-ast", help="Print the expression tree of each term"
    ),
) -> None:
    """Start the interactive calculator."""
    config = _config(ctx)
    repl_config = config.repl
    output = config.output
    if prompt is not None:
        repl_config = replace(repl_config, prompt=prompt)
    if precision is not None:
        output = replace(output, precision=precision)
    if show_tokens is not None:
        output = replace(output, show_tokens=show_tokens)
    if show_ast is not None:
        output = replace(output, show_ast=show_ast)

    Repl(replace(config, repl=repl_config, output=output), console=console).run()


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Arithmetic to evaluate, e.g. '2 + 3 * 4'"),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=0, help="Decimal places in results"
    ),
) -> None:
    """Evaluate one line and print a result per expression."""
    output = _config(ctx).output
    if precision is not None:
        output = replace(output, precision=precision)

    result = run_line(expression)
    render_line(console, result, output)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def tokens(
    expression: str = typer.Argument(..., help="Text to tokenize"),
) -> None:
    """Show the token stream for a line."""
    try:
        token_list = tokenize(expression)
    except LexError as e:
        _print_error(e.attach_source(expression))
        raise typer.Exit(code=1) from e

    table = Table(title=None, show_header=True)
    table.add_column("Pos", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for tok in token_list:
        table.add_row(str(tok.pos), tok.kind.value, tok.text)
    console.print(table)


@app.command()
def ast(
    expression: str = typer.Argument(..., help="Text to parse"),
) -> None:
    """Show the parsed expression tree of each term in a line."""
    try:
        exprs = parse(tokenize(expression))
    except (LexError, ParseError) as e:
        _print_error(e.attach_source(expression))
        raise typer.Exit(code=1) from e

    for expr in exprs:
        console.print(str(expr), markup=False, highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
