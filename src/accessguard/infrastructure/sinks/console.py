"""
Console status sink.

Prints status lines to the terminal with rich.
"""

from rich.console import Console

from accessguard.domain.interfaces import StatusSinkInterface


class ConsoleStatusSink(StatusSinkInterface):
    """
    Prints each status line to a rich Console.

    Lines are printed verbatim: markup and highlighting are disabled so
    identities containing brackets are not interpreted as styles.
    """

    def __init__(self, console: Console | None = None, style: str | None = None):
        """
        Args:
            console: Console to print to (default: a new stdout Console)
            style: Optional rich style applied to every line
        """
        self.console = console or Console()
        self.style = style

    def emit(self, line: str) -> None:
        self.console.print(line, style=self.style, markup=False, highlight=False)
