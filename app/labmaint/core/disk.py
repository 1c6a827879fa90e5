"""Root filesystem usage snapshots."""

import logging

from labmaint.models.report import DiskUsage
from labmaint.utils.shell import CommandRunner

logger = logging.getLogger(__name__)


class DiskUsageReporter:
    """Reads root filesystem usage from ``df -h``.

    The numbers are the human-readable strings df prints; they are only
    ever displayed, never compared.
    """

    # df columns: Filesystem Size Used Avail Use% Mounted-on
    _AVAIL_COLUMN = 3
    _USE_PERCENT_COLUMN = 4

    def __init__(self, runner: CommandRunner, mount_point: str = "/") -> None:
        """Initialize the reporter.

        Args:
            runner: Command runner used to invoke df.
            mount_point: Filesystem to report on.
        """
        self._runner = runner
        self._mount_point = mount_point

    def snapshot(self) -> DiskUsage:
        """Capture the current usage of the filesystem.

        Returns:
            DiskUsage with Use% and Avail, or DiskUsage.unknown() if df
            fails or prints something unexpected.
        """
        result = self._runner.run(["df", "-h", self._mount_point])
        if not result.success:
            logger.debug("df failed: %s", result.stderr.strip())
            return DiskUsage.unknown()

        return self._parse_df_output(result.stdout)

    def _parse_df_output(self, output: str) -> DiskUsage:
        """Parse the data row of ``df -h`` output.

        Args:
            output: df stdout, header line first.

        Returns:
            Parsed DiskUsage, or DiskUsage.unknown() if parsing fails.
        """
        lines = [line for line in output.splitlines() if line.strip()]
        if len(lines) < 2:
            logger.debug("Unexpected df output: %r", output[:200])
            return DiskUsage.unknown()

        # Long device names make df wrap the row onto a second line
        fields = " ".join(lines[1:]).split()
        if len(fields) <= self._USE_PERCENT_COLUMN:
            logger.debug("Malformed df row: %r", lines[1])
            return DiskUsage.unknown()

        return DiskUsage(
            percent_used=fields[self._USE_PERCENT_COLUMN],
            available=fields[self._AVAIL_COLUMN],
        )
