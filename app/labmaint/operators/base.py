"""Abstract base class for package operators.

This module defines the Operator interface that all package management
operators implement, plus the shared command-to-result conversion.
"""

import logging
from abc import ABC, abstractmethod

from labmaint.models.action import Action, ActionResult, ActionType
from labmaint.models.package import PackageSource
from labmaint.utils.shell import CommandResult, CommandRunner

logger = logging.getLogger(__name__)

# Package label for operations that act on every installed package
ALL_PACKAGES = "*"


class Operator(ABC):
    """Abstract base class for all package operators.

    Operators execute package management actions for a specific package
    manager. Each call runs exactly one external command and reports its
    exit status; operators never retry.

    Example:
        >>> operator = AptOperator(CommandRunner())
        >>> if operator.is_available():
        ...     result = operator.purge("hexchat")
        ...     print(f"{result.action.package}: {result.success}")
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize the operator.

        Args:
            runner: Command runner used to execute package manager commands.
        """
        self._runner = runner

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this operator handles.

        Returns:
            PackageSource enum value (APT, FLATPAK, or SNAP).
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system.

        Returns:
            True if the package manager can be used, False otherwise.
        """

    def _execute(self, action_type: ActionType, package: str, args: list[str]) -> ActionResult:
        """Run one package manager command and wrap its outcome.

        Args:
            action_type: Type of action performed.
            package: Package the action targets.
            args: Full command line.

        Returns:
            ActionResult reflecting the command's exit status.
        """
        action = Action(action_type=action_type, package=package, source=self.source)
        logger.info("Executing %s %s: %s", self.source.value, action_type.value, package)
        result = self._runner.run(args)
        return self._create_result(action, result)

    def _create_result(self, action: Action, result: CommandResult) -> ActionResult:
        """Create an ActionResult from a CommandResult.

        Args:
            action: The action that was executed.
            result: The command execution result.

        Returns:
            ActionResult with appropriate success/error info.
        """
        output = "".join(part for part in (result.stdout, result.stderr) if part)

        if result.success:
            return ActionResult(action=action, success=True, returncode=0, output=output)

        error_msg = (
            result.stderr.strip() or result.stdout.strip() or f"{self.source.value} command failed"
        )
        logger.debug(
            "%s %s failed (%d): %s",
            self.source.value,
            action.package,
            result.returncode,
            error_msg,
        )
        return ActionResult(
            action=action,
            success=False,
            returncode=result.returncode,
            output=output,
            error=error_msg,
        )
