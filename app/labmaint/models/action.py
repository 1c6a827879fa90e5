"""Action models for package operations.

This module defines data structures for representing package management
actions (install, remove, purge, update, clean) and their execution results.
"""

from dataclasses import dataclass
from enum import Enum

from labmaint.models.package import PackageSource


class ActionType(Enum):
    """Type of package management action.

    Attributes:
        INSTALL: Install a package that is not currently installed.
        REMOVE: Remove a package but keep configuration files.
        PURGE: Remove a package including all configuration files (APT only).
        UPDATE: Refresh package metadata or upgrade installed packages.
        CLEAN: Drop caches or packages no longer needed.
    """

    INSTALL = "install"
    REMOVE = "remove"
    PURGE = "purge"
    UPDATE = "update"
    CLEAN = "clean"


@dataclass(frozen=True, slots=True)
class Action:
    """Represents a single package management action to be executed.

    Attributes:
        action_type: The type of action.
        package: Name of the package to operate on, or a label such as
            "*" for operations that target every package.
        source: Package manager that handles this package.
    """

    action_type: ActionType
    package: str
    source: PackageSource

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.package:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_destructive(self) -> bool:
        """Check if this action removes a package (remove or purge)."""
        return self.action_type in (ActionType.REMOVE, ActionType.PURGE)


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of executing a package management action.

    Attributes:
        action: The action that was executed.
        success: Whether the external command exited with status 0.
        returncode: Exit status of the external command.
        output: Combined stdout and stderr of the command, for the audit log.
        error: Short error message if the action failed.
    """

    action: Action
    success: bool
    returncode: int = 0
    output: str = ""
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success
