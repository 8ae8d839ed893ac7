"""
Output formatting module for extsearch.

Renders a :class:`ResultWindow` for display or transport. Embedding layers
(HTTP handlers, command line tools) use these helpers instead of walking the
window themselves.

Key Functions:
    format_result: Main entry point for formatting results in any supported format
    to_json_bytes: Fast JSON serialization using orjson
    format_text: One line per extension
    render_table_console: Rich table output on a console

Supported Output Formats:
    - TEXT: ``id/version - name`` lines preceded by a page summary
    - JSON: Structured JSON for programmatic processing
    - TABLE: Rich console table

Example:
    >>> from extsearch.utils.formatter import format_result
    >>> from extsearch.core.types import OutputFormat
    >>>
    >>> print(format_result(window, OutputFormat.TEXT))
    >>> payload = format_result(window, OutputFormat.JSON)
"""

from __future__ import annotations

import orjson
from rich.console import Console
from rich.table import Table

from ..core.types import OutputFormat, ResultWindow


def to_json_bytes(window: ResultWindow) -> bytes:
    """Convert a result window to indented JSON bytes."""
    return orjson.dumps(window.to_dict(), option=orjson.OPT_INDENT_2)


def _summary_line(window: ResultWindow) -> str:
    if not window.items:
        return f"No results (total {window.total_size}, offset {window.offset})"
    first = max(window.offset, 0) + 1
    last = first + len(window) - 1
    return f"Results {first}-{last} of {window.total_size}"


def format_text(window: ResultWindow) -> str:
    lines = [_summary_line(window)]
    for extension in window:
        label = str(extension.id)
        if extension.name:
            label += f" - {extension.name}"
        lines.append(label)
    return "\n".join(lines)


def build_table(window: ResultWindow) -> Table:
    table = Table(title=_summary_line(window))
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Version", style="magenta")
    table.add_column("Name", style="bold")
    table.add_column("Summary")
    for extension in window:
        table.add_row(
            extension.id.id,
            extension.id.version or "",
            extension.name or "",
            extension.summary or "",
        )
    return table


def render_table_console(window: ResultWindow, console: Console | None = None) -> None:
    console = console or Console()
    console.print(build_table(window))


def format_result(window: ResultWindow, fmt: OutputFormat) -> str | bytes:
    """
    Format a result window in the requested output format.

    Returns:
        ``bytes`` for JSON, ``str`` otherwise
    """
    if fmt == OutputFormat.JSON:
        return to_json_bytes(window)
    if fmt == OutputFormat.TABLE:
        console = Console(record=True, width=120, color_system=None)
        with console.capture() as capture:
            render_table_console(window, console)
        return capture.get()
    return format_text(window)
