"""Rich terminal output layer for Graphcool commands.

Provides a spinner for long-running API calls and plain writers for
results (stdout) and errors (stderr).
"""

from __future__ import annotations

from rich.console import Console
from rich.status import Status


class Output:
    """Terminal output used by commands.

    The spinner is skipped when the error console is not a terminal
    (CI/pipe mode), so piped output stays free of control sequences.

    Args:
        console: Console for results. Defaults to stdout.
        err_console: Console for spinner and errors. Defaults to stderr.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self._status: Status | None = None

    @property
    def spinner_active(self) -> bool:
        return self._status is not None

    def start_spinner(self, message: str) -> None:
        """Show a spinner with the given message until stop_spinner()."""
        self.stop_spinner()
        if not self.err_console.is_terminal:
            self.err_console.print(message, markup=False, highlight=False, soft_wrap=True)
            return
        self._status = self.err_console.status(message, spinner="dots")
        self._status.start()

    def stop_spinner(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def write(self, text: str) -> None:
        """Write a result message to stdout, verbatim."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def write_error(self, text: str) -> None:
        """Write an error message to stderr, verbatim, in red."""
        self.err_console.print(text, style="red", markup=False, highlight=False, soft_wrap=True)
