"""Exception hierarchy raised when running a command."""

from __future__ import annotations

import enum
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .command import Command
    from .output import ExitStatus, Output


class ErrorKind(enum.Enum):
    """The phase of execution that failed."""

    LAUNCH = "launch"
    WAIT = "wait"
    EXIT = "exit"


class CommandError(Exception):
    """Base class for failures raised by :meth:`Command.run`.

    ``command`` is a snapshot of the configuration that was run, so later
    changes to the caller's :class:`Command` do not alter the error.
    """

    kind: t.ClassVar[ErrorKind]

    def __init__(self, command: Command, message: str) -> None:
        super().__init__(message)
        self.command = command

    def is_launch_error(self) -> bool:
        """Return ``True`` if the process could not be started."""
        return self.kind is ErrorKind.LAUNCH

    def is_wait_error(self) -> bool:
        """Return ``True`` if waiting for the process failed."""
        return self.kind is ErrorKind.WAIT

    def is_exit_error(self) -> bool:
        """Return ``True`` if the process ran but did not succeed."""
        return self.kind is ErrorKind.EXIT


class LaunchError(CommandError):
    """The program could not be started (for example, it does not exist)."""

    kind = ErrorKind.LAUNCH

    def __init__(self, command: Command, os_error: OSError) -> None:
        msg = f"failed to launch '{command.command_line_lossy()}': {os_error}"
        super().__init__(command, msg)
        self.os_error = os_error


class WaitError(CommandError):
    """The OS reported an error while collecting the process."""

    kind = ErrorKind.WAIT

    def __init__(self, command: Command, os_error: OSError) -> None:
        msg = f"failed to wait for '{command.command_line_lossy()}': {os_error}"
        super().__init__(command, msg)
        self.os_error = os_error


class ExitError(CommandError):
    """The process exited non-zero or was killed by a signal.

    Only raised when ``check`` is enabled. ``output`` holds whatever was
    captured so callers can inspect it.
    """

    kind = ErrorKind.EXIT

    def __init__(self, command: Command, output: Output) -> None:
        msg = f"command '{command.command_line_lossy()}' failed: {output.status}"
        super().__init__(command, msg)
        self.output = output

    @property
    def status(self) -> ExitStatus:
        """Return the exit status of the failed process."""
        return self.output.status


__all__ = [
    "CommandError",
    "ErrorKind",
    "ExitError",
    "LaunchError",
    "WaitError",
]
