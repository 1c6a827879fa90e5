"""Shell execution utilities.

Provides subprocess execution with proper error handling, plus the
CommandRunner capability that every maintenance stage receives.
"""

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Exit code reported when a command cannot be started at all (mirrors the shell)
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = None,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command. None waits forever.
        cwd: Working directory for the command. If None, uses current directory.
        env: Additional environment variables (merged with current env).

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    full_env = {**os.environ, **env} if env else None
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        # Output may name files in any encoding
        encoding="utf-8",
        errors="replace",
        check=check,
        timeout=timeout,
        cwd=cwd,
        env=full_env,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


class CommandRunner:
    """Runs external commands on behalf of the maintenance stages.

    Stages never call subprocess directly; they receive a runner so tests
    can substitute a scripted fake. A command that cannot be started is
    reported as a failed CommandResult instead of raising, so one missing
    tool never aborts the whole run.

    Example:
        >>> runner = CommandRunner()
        >>> runner.set_env("DEBIAN_FRONTEND", "noninteractive")
        >>> runner.run(["apt-get", "update"]).success
        True
    """

    def __init__(self, env: dict[str, str] | None = None) -> None:
        """Initialize the runner.

        Args:
            env: Extra environment variables passed to every command.
        """
        self._env: dict[str, str] = dict(env or {})

    @property
    def env(self) -> dict[str, str]:
        """Extra environment variables applied to every command."""
        return dict(self._env)

    def set_env(self, name: str, value: str) -> None:
        """Set an environment variable for all subsequent commands."""
        self._env[name] = value

    def run(self, args: list[str]) -> CommandResult:
        """Run a command to completion and capture its output.

        Args:
            args: Command and arguments to execute.

        Returns:
            CommandResult; returncode 127 if the command could not be started.
        """
        logger.debug("Running: %s", " ".join(args))
        try:
            return run_command(args, timeout=None, env=self._env or None)
        except FileNotFoundError as e:
            logger.debug("Command not found: %s", args[0])
            return CommandResult(stdout="", stderr=str(e), returncode=COMMAND_NOT_FOUND)
        except OSError as e:
            logger.warning("Failed to start %s: %s", args[0], e)
            return CommandResult(stdout="", stderr=str(e), returncode=COMMAND_NOT_FOUND)

    def exists(self, name: str) -> bool:
        """Check if a command is resolvable on PATH."""
        return command_exists(name)
