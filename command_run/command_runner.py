"""Spawn a configured command, collect its output and apply the check policy."""

from __future__ import annotations

import enum
import errno
import logging
import subprocess
import sys
import typing as t

from .environment import prepare_environment
from .errors import ExitError, LaunchError, WaitError
from .output import ExitStatus, Output

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .command import Command

logger = logging.getLogger(__name__)


class LogTo(enum.Enum):
    """Destination for command lines and failure output."""

    LOG = "log"
    STDOUT = "stdout"


class _StdioWiring(t.NamedTuple):
    stdin: int | None
    stdout: int | None
    stderr: int | None


_INHERIT: t.Final[_StdioWiring] = _StdioWiring(None, None, None)
_SEPARATE: t.Final[_StdioWiring] = _StdioWiring(
    subprocess.DEVNULL, subprocess.PIPE, subprocess.PIPE
)
_COMBINED: t.Final[_StdioWiring] = _StdioWiring(
    subprocess.DEVNULL, subprocess.PIPE, subprocess.STDOUT
)


def stdio_wiring(command: Command) -> _StdioWiring:
    """Choose how the child's standard streams are connected."""
    if not command.capture:
        if command.combine_output:
            logger.debug(
                "combine_output has no effect without capture: %s",
                command.command_line_lossy(),
            )
        return _INHERIT
    return _COMBINED if command.combine_output else _SEPARATE


def format_failure_output(error: ExitError, *, combined: bool) -> str:
    """Describe *error* together with the output the process produced."""
    output = error.output
    if combined:
        return f"{error}\noutput:\n{output.stdout_string_lossy()}"
    return (
        f"{error}\nstdout:\n{output.stdout_string_lossy()}\n"
        f"stderr:\n{output.stderr_string_lossy()}"
    )


class CommandRunner:
    """Run commands, reporting them to a logger and an output stream.

    ``logger`` receives command lines (``INFO``) and failure output
    (``ERROR``). It defaults to the ``command_run`` package logger, which is
    silent until the application configures logging. ``stream`` receives
    printed command lines and defaults to whatever :data:`sys.stdout` is at
    the time of the call.
    """

    def __init__(
        self,
        *,
        logger: logging.Logger | None = None,
        stream: t.TextIO | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("command_run")
        self._stream = stream

    @property
    def logger(self) -> logging.Logger:
        """Return the logger used for command lines and failure output."""
        return self._logger

    @property
    def stream(self) -> t.TextIO:
        """Return the stream used for printed command lines."""
        return self._stream or sys.stdout

    def run(self, command: Command) -> Output:
        """Execute *command* and return its :class:`Output`.

        The command is copied first, so changes made to it while the child
        runs do not affect this call or the resulting error.
        """
        snapshot = command.copy()
        self._announce(snapshot)
        output = execute_command(snapshot)
        if snapshot.check and not output.success:
            error = ExitError(snapshot, output)
            if snapshot.log_output_on_error:
                self._emit(
                    snapshot.log_to,
                    logging.ERROR,
                    format_failure_output(
                        error, combined=snapshot.capture and snapshot.combine_output
                    ),
                )
            raise error
        return output

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _announce(self, command: Command) -> None:
        """Log and/or print the command line before it runs."""
        if not (command.log_command or command.print_command):
            return
        line = command.command_line_lossy()
        if command.log_command:
            self._emit(command.log_to, logging.INFO, line)
        if command.print_command:
            self._print(line)

    def _emit(self, log_to: LogTo, level: int, message: str) -> None:
        if log_to is LogTo.STDOUT:
            self._print(message)
        else:
            self._logger.log(level, "%s", message)

    def _print(self, message: str) -> None:
        stream = self.stream
        stream.write(f"{message}\n")
        stream.flush()


def spawn(command: Command) -> subprocess.Popen[bytes]:
    """Start the child process for *command*."""
    wiring = stdio_wiring(command)
    env = prepare_environment(command.env, clear=command.clear_env)
    try:
        return subprocess.Popen(  # noqa: S603 - shell=False prevents injection
            command.argv(),
            stdin=wiring.stdin,
            stdout=wiring.stdout,
            stderr=wiring.stderr,
            cwd=command.cwd,
            env=env,
            shell=False,
        )
    except OSError as exc:
        raise LaunchError(command, exc) from exc
    except ValueError as exc:
        # Popen rejects embedded NUL bytes before reaching the OS.
        os_error = OSError(errno.EINVAL, str(exc))
        raise LaunchError(command, os_error) from exc


def execute_command(command: Command) -> Output:
    """Spawn *command*, drain its pipes and wait for it to exit.

    :meth:`subprocess.Popen.communicate` reads stdout and stderr concurrently,
    so a child that fills one pipe while the other is being read cannot
    deadlock. Pipes are closed and the child reaped on every path.
    """
    proc = spawn(command)
    with proc:
        try:
            stdout, stderr = proc.communicate()
        except OSError as exc:
            proc.kill()
            raise WaitError(command, exc) from exc

    status = ExitStatus.from_returncode(proc.returncode)
    logger.debug("%s exited with %s", command.command_line_lossy(), status)
    return Output(status=status, stdout=stdout or b"", stderr=stderr or b"")


default_runner = CommandRunner()

__all__ = [
    "CommandRunner",
    "LogTo",
    "default_runner",
    "execute_command",
    "format_failure_output",
    "spawn",
    "stdio_wiring",
]
