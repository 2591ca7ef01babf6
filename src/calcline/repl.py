"""
Interactive read-evaluate-print loop.

Reads one line at a time, hands it to the line pipeline, and prints one
result or error per top-level term. Nothing that happens on one line
carries over to the next apart from the session history.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from calcline.core.formatting import format_number
from calcline.core.manifest import CalcConfig, OutputConfig
from calcline.core.pipeline import LineResult, run_line

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit"})

HELP_TEXT = """\
Enter arithmetic using numbers and + - * /, e.g. 2 + 3 * 4
  * and / bind tighter than + and -; both groups are left-associative
  a leading - negates the number right after it: -2 * 3
  several expressions on one line are evaluated separately: 1 + 2 3 * 4
Commands: help, history, quit (or exit, or Ctrl-D)"""


def render_line(console: Console, result: LineResult, output: OutputConfig) -> None:
    """Print the outcome of one processed line."""
    if output.show_tokens and result.tokens:
        console.print(
            "tokens: " + " ".join(str(t) for t in result.tokens),
            style="dim",
            markup=False,
            highlight=False,
        )

    for term in result.terms:
        if output.show_ast and term.expr is not None:
            console.print(f"ast: {term.expr}", style="dim", markup=False, highlight=False)
        if term.error is not None:
            console.print(term.error.format(), style="red", markup=False, highlight=False)
        elif term.value is not None:
            console.print(
                format_number(term.value, output.precision),
                markup=False,
                highlight=False,
            )


class Repl:
    """Line-oriented calculator session."""

    def __init__(
        self,
        config: CalcConfig | None = None,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.config = config or CalcConfig()
        self.console = console or Console()
        self.stdin = stdin
        self.history: list[str] = []

    def read_line(self) -> str | None:
        """Show the prompt and read one line; None at end of input."""
        self.console.print(self.config.repl.prompt, end="", markup=False, highlight=False)
        stream = self.stdin or sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def handle(self, line: str) -> bool:
        """Process one line. Returns False when the session should end."""
        text = line.strip()
        if not text:
            return True
        if text in QUIT_COMMANDS:
            return False
        if text == "help":
            self.console.print(HELP_TEXT, markup=False, highlight=False)
            return True
        if text == "history":
            for i, entry in enumerate(self.history, start=1):
                self.console.print(f"{i:4d}  {entry}", markup=False, highlight=False)
            return True

        if self.config.repl.history:
            self.history.append(text)

        result = run_line(line)
        if not result.ok:
            logger.info("Line %r produced %d error(s)", text, len(result.errors))
        render_line(self.console, result, self.config.output)
        return True

    def run(self) -> None:
        """Loop until end of input, a quit command, or Ctrl-C."""
        logger.debug("REPL started")
        try:
            while True:
                line = self.read_line()
                if line is None or not self.handle(line):
                    break
        except KeyboardInterrupt:
            pass
        # Leave the terminal on a fresh line after the last prompt
        self.console.print()
        logger.debug("REPL finished after %d line(s)", len(self.history))
