"""Test doubles shared across test modules."""

from collections.abc import Callable

from labmaint.utils.shell import CommandResult, CommandRunner

Handler = Callable[[list[str]], CommandResult]


class FakeRunner(CommandRunner):
    """Scripted CommandRunner that records calls instead of running them.

    Responses are matched by the longest registered argument prefix;
    unmatched commands succeed with empty output.
    """

    def __init__(self, commands: set[str] | None = None) -> None:
        super().__init__()
        self.commands: set[str] = set(commands or ())
        self.calls: list[list[str]] = []
        self.envs: list[dict[str, str]] = []
        self._handlers: dict[tuple[str, ...], Handler] = {}

    def on(
        self,
        prefix: list[str],
        *,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        """Register a fixed result for commands starting with prefix."""
        result = CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)
        self._handlers[tuple(prefix)] = lambda _args: result

    def handle(self, prefix: list[str], handler: Handler) -> None:
        """Register a callable computing the result from the full command."""
        self._handlers[tuple(prefix)] = handler

    def run(self, args: list[str]) -> CommandResult:
        self.calls.append(list(args))
        self.envs.append(self.env)
        best: tuple[str, ...] | None = None
        for prefix in self._handlers:
            if tuple(args[: len(prefix)]) == prefix and (best is None or len(prefix) > len(best)):
                best = prefix
        if best is None:
            return CommandResult(stdout="", stderr="", returncode=0)
        return self._handlers[best](list(args))

    def exists(self, name: str) -> bool:
        return name in self.commands

    def called(self, prefix: list[str]) -> list[list[str]]:
        """Return the recorded calls starting with prefix."""
        return [call for call in self.calls if call[: len(prefix)] == prefix]
