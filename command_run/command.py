"""Command configuration and its builder API."""

from __future__ import annotations

import dataclasses as dc
import os
import typing as t

from ._validators import validate_arg, validate_env_name, validate_env_value
from .command_runner import LogTo, default_runner
from .formatting import command_line_lossy

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

    from .command_runner import CommandRunner
    from .formatting import Word
    from .output import Output


@dc.dataclass(slots=True)
class Command:
    """A command to run in a subprocess and options for how it is run.

    Fields are public and may be set directly or through the chaining
    builder methods. A :class:`Command` can be run any number of times; each
    call to :meth:`run` starts a fresh process from a snapshot of the fields.
    Use :meth:`copy` to derive variants without touching the original.
    """

    program: str | os.PathLike[str]
    args: list[Word] = dc.field(default_factory=list)
    cwd: str | os.PathLike[str] | None = None
    env: dict[str, str | None] = dc.field(default_factory=dict)
    clear_env: bool = False
    capture: bool = False
    combine_output: bool = False
    check: bool = True
    log_command: bool = False
    print_command: bool = True
    log_output_on_error: bool = False
    log_to: LogTo = LogTo.LOG

    def __post_init__(self) -> None:
        """Validate and take ownership of the supplied containers."""
        validate_arg(self.program)
        self.args = list(self.args)
        for arg in self.args:
            validate_arg(arg)
        self.env = dict(self.env)
        for name, value in self.env.items():
            validate_env_name(name)
            validate_env_value(value)

    @classmethod
    def with_args(
        cls, program: str | os.PathLike[str], args: cabc.Iterable[Word]
    ) -> Command:
        """Create a command for *program* with an initial argument list."""
        return cls(program, list(args))

    # ------------------------------------------------------------------
    # Builder methods
    # ------------------------------------------------------------------
    def add_arg(self, arg: Word) -> Command:
        """Append a single argument."""
        validate_arg(arg)
        self.args.append(arg)
        return self

    def add_arg_pair(self, arg1: Word, arg2: Word) -> Command:
        """Append two arguments, e.g. an option and its value."""
        return self.add_arg(arg1).add_arg(arg2)

    def add_args(self, args: cabc.Iterable[Word]) -> Command:
        """Append every argument in *args*."""
        for arg in args:
            self.add_arg(arg)
        return self

    def set_cwd(self, path: str | os.PathLike[str] | None) -> Command:
        """Run the program from *path* (``None`` restores the default)."""
        self.cwd = path
        return self

    def set_env(self, name: str, value: str | None) -> Command:
        """Add or update an environment variable for the child."""
        validate_env_name(name)
        validate_env_value(value)
        self.env[name] = value
        return self

    def remove_env(self, name: str) -> Command:
        """Unset *name* in the child even if the parent defines it."""
        return self.set_env(name, None)

    def enable_capture(self) -> Command:
        """Capture stdout and stderr instead of inheriting them."""
        self.capture = True
        return self

    def enable_combine_output(self) -> Command:
        """Capture output with stderr merged into stdout."""
        self.capture = True
        self.combine_output = True
        return self

    def disable_check(self) -> Command:
        """Return the output even when the process fails."""
        self.check = False
        return self

    def enable_log_command(self) -> Command:
        """Log the command line before running it."""
        self.log_command = True
        return self

    def disable_print_command(self) -> Command:
        """Do not print the command line before running it."""
        self.print_command = False
        return self

    def enable_log_output_on_error(self) -> Command:
        """Log captured output when a checked command fails."""
        self.log_output_on_error = True
        return self

    # ------------------------------------------------------------------
    # Copying and display
    # ------------------------------------------------------------------
    def copy(self) -> Command:
        """Return an independent copy of this command."""
        return dc.replace(self, args=list(self.args), env=dict(self.env))

    def __copy__(self) -> Command:
        """Support :func:`copy.copy` with the same semantics as :meth:`copy`."""
        return self.copy()

    def argv(self) -> list[Word]:
        """Return the argument vector passed to the OS."""
        return [self.program, *self.args]

    def command_line_lossy(self) -> str:
        """Format the program and arguments as a shell-quoted line."""
        return command_line_lossy(self.program, self.args)

    def __str__(self) -> str:
        """Return :meth:`command_line_lossy`."""
        return self.command_line_lossy()

    def run(self, runner: CommandRunner | None = None) -> Output:
        """Run the command and wait for it to finish.

        If ``capture`` is set the returned :class:`Output` holds the bytes
        written by the process; otherwise its buffers are empty.

        Raises :class:`~command_run.errors.LaunchError` if the process cannot
        be started and :class:`~command_run.errors.WaitError` if waiting for
        it fails. With ``check`` set, a non-zero or signal exit raises
        :class:`~command_run.errors.ExitError` carrying the output.
        """
        return (runner or default_runner).run(self)


__all__ = ["Command"]
