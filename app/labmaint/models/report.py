"""Run report models.

Collected while the pipeline runs so callers and tests can inspect what
happened without parsing the log.
"""

from dataclasses import dataclass, field

# Placeholder shown when df output is unavailable
UNKNOWN = "?"


@dataclass(frozen=True, slots=True)
class DiskUsage:
    """Root filesystem usage as reported by ``df -h /``.

    Attributes:
        percent_used: Use% column, e.g. "42%".
        available: Avail column in human-readable units, e.g. "120G".
    """

    percent_used: str
    available: str

    @classmethod
    def unknown(cls) -> "DiskUsage":
        """Snapshot used when the usage query fails."""
        return cls(percent_used=UNKNOWN, available=UNKNOWN)

    def __str__(self) -> str:
        return f"{self.percent_used} ({self.available})"


@dataclass(slots=True)
class StageReport:
    """Outcome counters for one pipeline stage.

    Attributes:
        name: Stage name.
        succeeded: Items or commands that completed.
        skipped: Items that were absent and left alone.
        failed: Items or commands that failed.
    """

    name: str
    succeeded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when nothing in the stage failed."""
        return not self.failed


@dataclass(slots=True)
class PipelineReport:
    """Everything a maintenance run produced.

    Attributes:
        start_usage: Disk usage before the first stage.
        end_usage: Disk usage after the last stage.
        stages: Per-stage reports in execution order.
    """

    start_usage: DiskUsage = field(default_factory=DiskUsage.unknown)
    end_usage: DiskUsage = field(default_factory=DiskUsage.unknown)
    stages: list[StageReport] = field(default_factory=list)

    def stage(self, name: str) -> StageReport:
        """Look up a stage report by name.

        Raises:
            KeyError: If no stage with that name ran.
        """
        for report in self.stages:
            if report.name == name:
                return report
        raise KeyError(name)

    @property
    def failures(self) -> list[str]:
        """All failed items across stages, prefixed with the stage name."""
        return [f"{s.name}: {item}" for s in self.stages for item in s.failed]
