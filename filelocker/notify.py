"""User-facing notifications."""

import logging
from typing import Protocol

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Where status lines and modal alerts go."""

    def status(self, message: str) -> None: ...

    def alert(self, title: str, message: str) -> None: ...


class ConsoleNotifier:
    """Render notifications on a terminal.

    Alerts block until the user acknowledges them unless ``interactive`` is off.
    """

    def __init__(self, plugin_name: str, console: Console = None, interactive: bool = True):
        self.plugin_name = plugin_name
        self.console = console or Console()
        self.interactive = interactive

    def status(self, message: str) -> None:
        self.console.print(f"{self.plugin_name}: {message}", markup=False, highlight=False)

    def alert(self, title: str, message: str) -> None:
        panel = Panel(
            Text(message),
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        self.console.print(panel)
        if self.interactive:
            try:
                Prompt.ask("Press Enter to continue", console=self.console, default="", show_default=False)
            except EOFError:
                logger.debug("No terminal input, not waiting on alert")
