"""Styled console output plus the append-only maintenance log.

Every progress line of a run goes through MaintenanceLogger.record(),
which prints it in color and appends a timestamped copy to the audit
log. Writing the audit log never fails the run.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from labmaint.utils.formatting import make_console

logger = logging.getLogger(__name__)

# Same layout as date(1) without arguments, e.g. "Fri Oct 16 09:30:00 UTC 2026"
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

RULE = "-" * 32


class LogStyle(Enum):
    """Visual style of a progress line.

    Values are Rich theme style names; INFO prints without color.
    """

    HEADER = "header"
    INFO = ""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


def _local_now() -> datetime:
    """Current local time with timezone information."""
    return datetime.now().astimezone()


class MaintenanceLogger:
    """Writes progress lines to the console and the audit log.

    Attributes:
        log_path: Audit log file; created on first write.

    Example:
        >>> log = MaintenanceLogger(Path("/var/log/school_maintenance.log"))
        >>> log.record("Step 2: Clearing Student Folders...", LogStyle.HEADER)
    """

    def __init__(
        self,
        log_path: Path,
        console: Console | None = None,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        """Initialize the logger.

        Args:
            log_path: Audit log file to append to.
            console: Console for styled output. Defaults to a themed stdout console.
            clock: Returns the timestamp for each log line.
        """
        self.log_path = log_path
        self._console = console or make_console()
        self._clock = clock

    def record(self, message: str, style: LogStyle = LogStyle.INFO) -> None:
        """Print a styled message and append it to the audit log.

        Args:
            message: Progress text.
            style: Console style for the message.
        """
        text = escape(message)
        if style.value:
            self._console.print(f"[{style.value}]{text}[/]", highlight=False)
        else:
            self._console.print(text, highlight=False)

        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        self._append(f"{timestamp}: {message}\n")

    def rule(self) -> None:
        """Record a separator line."""
        self.record(RULE, LogStyle.HEADER)

    def append_output(self, output: str) -> None:
        """Append raw command output to the audit log only.

        Args:
            output: Combined stdout/stderr of an external command.
        """
        if not output:
            return
        self._append(output if output.endswith("\n") else output + "\n")

    def _append(self, text: str) -> None:
        """Append text to the audit log, reporting but never raising errors."""
        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            logger.warning("Failed to write maintenance log %s: %s", self.log_path, e)
