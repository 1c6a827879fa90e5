"""Data models for labmaint.

This module exports the core data structures used throughout the application.
"""

from labmaint.models.action import Action, ActionResult, ActionType
from labmaint.models.package import PackageSource
from labmaint.models.report import DiskUsage, PipelineReport, StageReport

__all__ = [
    "Action",
    "ActionResult",
    "ActionType",
    "DiskUsage",
    "PackageSource",
    "PipelineReport",
    "StageReport",
]
