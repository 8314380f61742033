"""
Rich console output for IPCheck
"""

from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..models import ClassificationResult
from .report import build_lines
from .. import __version__


class ConsoleOutput:
    """
    Rich console output for classification reports.

    Renders the same lines as the plain report, colour-coded,
    inside a bordered panel.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_report(self, result: ClassificationResult):
        """Print the report panel for a result"""
        content = Text()
        lines = build_lines(result)

        for i, line in enumerate(lines):
            content.append(line.text, style=line.style or None)
            if i < len(lines) - 1:
                content.append("\n")

        if result.is_valid:
            border = "green"
        elif result.address:
            border = "red"
        else:
            border = "yellow"

        title = Text()
        title.append("🔍 IPCheck", style="bold cyan")
        title.append(f" v{__version__}", style="dim")

        panel = Panel(
            content,
            title=title,
            subtitle=Text("IP Address Information", style="dim"),
            border_style=border,
            padding=(0, 1)
        )
        self.console.print(panel)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {message}")

    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(f"[yellow]Warning:[/] {message}")
