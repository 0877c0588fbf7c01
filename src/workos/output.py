"""Output formatting for the ``workos`` command-line tool.

Keeps a strict stdout/stderr split:

* **stdout** -- primary data only (pages of results, key sets).  This is
  what downstream tools pipe and parse.
* **stderr** -- diagnostics (next-page cursor, warnings, errors, debug).
* **TTY detection** -- Rich tables when stdout is an interactive terminal,
  plain text when piped, JSON when asked for with ``--json``.
* **Colour control** -- respects ``NO_COLOR``, ``TERM=dumb`` and
  ``--no-color``.

The CLI callback builds one :class:`OutputManager` and installs it with
:func:`set_output`; commands fetch it with :func:`get_output`.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from workos.models import PaginatedList


class OutputFormat(str, Enum):
    """Supported output formats.

    ``AUTO`` resolves to ``RICH`` when stdout is an interactive TTY and
    colour is not disabled, or to ``PLAIN`` otherwise.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes CLI output to stdout (data) and stderr (diagnostics).

    Args:
        format: Desired output format.  ``AUTO`` resolves from TTY detection.
        no_color: Disable colour and Rich markup.
        quiet: Suppress informational messages on stderr.
        verbose: Show debug messages on stderr.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            self._format = (
                OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
            )
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    # ------------------------------------------------------------------ #
    # Data output (stdout)
    # ------------------------------------------------------------------ #

    def print_model(self, model: BaseModel) -> None:
        """Print a single model as JSON (Rich-highlighted in RICH mode)."""
        data = model.model_dump(mode="json", by_alias=True)
        if self._format == OutputFormat.RICH:
            text = json.dumps(data, indent=2, ensure_ascii=False)
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))
        else:
            print(json.dumps(data, indent=2, ensure_ascii=False), file=sys.stdout, flush=True)

    def print_page(self, page: PaginatedList[Any], columns: list[str]) -> None:
        """Print one page of results.

        * **JSON mode** -- the full page body, including ``list_metadata``.
        * **Plain mode** -- tab-separated *columns*, one item per line.
        * **Rich mode** -- a table of *columns*.

        The next-page cursor is reported on stderr in plain and Rich modes.
        """
        if self._format == OutputFormat.JSON:
            body = page.model_dump(mode="json", by_alias=True)
            print(json.dumps(body, indent=2, ensure_ascii=False), file=sys.stdout, flush=True)
            return

        rows = [
            [_cell(item.model_dump(mode="json").get(column)) for column in columns]
            for item in page.data
        ]
        if self._format == OutputFormat.PLAIN:
            for row in rows:
                print("\t".join(row), file=sys.stdout, flush=True)
        else:
            table = Table(show_header=True, header_style="bold cyan")
            for column in columns:
                table.add_column(column)
            for row in rows:
                table.add_row(*row)
            self._stdout.print(table)

        if page.next_cursor is not None:
            self.info(f"Next page: --after {page.next_cursor}")

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        """Print an informational message to stderr.  Suppressed by ``--quiet``."""
        if not self._quiet:
            if self._no_color:
                print(message, file=sys.stderr, flush=True)
            else:
                self._stderr.print(message)

    def warning(self, message: str) -> None:
        """Print a warning to stderr.  Not suppressed by ``--quiet``."""
        if self._no_color:
            print(f"Warning: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error to stderr.  Never suppressed."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {message}")

    def debug(self, message: str) -> None:
        """Print a debug message to stderr.  Only shown with ``--verbose``."""
        if self._verbose:
            if self._no_color:
                print(f"[debug] {message}", file=sys.stderr, flush=True)
            else:
                self._stderr.print(f"[dim]\\[debug] {message}[/dim]")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """Return True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    return os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Global output instance (set by the CLI callback)
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager`.  Used by the test suite."""
    global _output
    _output = None
