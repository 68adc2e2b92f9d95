# src/keyline/cli/formatter.py
from collections import Counter
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from keyline.core.errors import ParseError
from keyline.core.models import ClassifiedLine, LineKind

console = Console()

KIND_STYLES = {
    LineKind.BLANK: "dim",
    LineKind.COMMENT: "green",
    LineKind.SECTION: "bold magenta",
    LineKind.KEY: "cyan",
    LineKind.OTHER: "yellow",
}


class ReportFormatter:
    """
    ReportFormatter: renders outlines, demo output and parse failures.
    """

    def __init__(self, out: Console = console):
        self.console = out

    def print_outline(self, lines: List[ClassifiedLine], file_name: str, show_blank: bool = False):
        """
        Builds the per-line table shown by 'scan'.
        """
        table = Table(title=f"Line Outline: {file_name}", show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Section / Key", style="white")
        table.add_column("Argument / Text")

        for c in lines:
            if c.kind is LineKind.BLANK and not show_blank:
                continue
            style = KIND_STYLES[c.kind]
            if c.kind is LineKind.SECTION:
                name, text = escape(c.section_id), ""
            elif c.kind is LineKind.KEY:
                name, text = escape(c.key), escape(c.argument) if c.argument is not None else "[dim]-[/dim]"
            else:
                name, text = "", escape(c.raw_line)
            table.add_row(str(c.line_no), f"[{style}]{c.kind.value}[/{style}]", name, text)

        self.console.print(table)

    def print_summary(self, lines: List[ClassifiedLine]):
        counts = Counter(c.kind for c in lines)
        body = "\n".join(f"{kind.value.capitalize():<10} {counts.get(kind, 0)}" for kind in LineKind)
        self.console.print(Panel(
            f"[bold white]Summary[/bold white]\n"
            f"════════════════════\n"
            f"Total      {len(lines)}\n{body}",
            border_style="dim",
            expand=False,
        ))

    def show_events(self, events: List[str]):
        for event in events:
            self.console.print(f"[cyan]•[/cyan] {escape(event)}")

    def show_error(self, error: ParseError, source: str, file_name: str, context: int = 3):
        """
        Prints the rendered message with an excerpt of the failing region.
        """
        excerpt = None
        if error.line:
            start = max(1, error.line - context)
            end = error.line + context
            excerpt = Syntax(source, "text", line_numbers=True, line_range=(start, end),
                             highlight_lines={error.line}, theme="ansi_dark")

        self.console.print(Panel(
            f"[bold red]{escape(str(error))}[/bold red]",
            title=f"[bold white]Parse failed: {file_name}[/bold white]",
            border_style="red",
            expand=False,
        ))
        if excerpt is not None:
            self.console.print(excerpt)
