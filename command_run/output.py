"""Result types produced by a finished child process."""

from __future__ import annotations

import dataclasses as dc
import os
import signal as _signal
import typing as t

IS_POSIX = os.name == "posix"
_ENCODING: t.Final[str] = "utf-8"


def _signal_name(signum: int) -> str | None:
    try:
        return _signal.Signals(signum).name
    except ValueError:
        return None


@dc.dataclass(frozen=True, slots=True)
class ExitStatus:
    """How a child process terminated.

    Exactly one of ``code`` and ``signal`` is set. ``signal`` is only ever set
    on POSIX, where :mod:`subprocess` reports death-by-signal as a negative
    return code. Elsewhere a negative return code is an ordinary exit code
    (for example an NTSTATUS value on Windows).
    """

    code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int) -> ExitStatus:
        """Translate a :attr:`subprocess.Popen.returncode` into a status."""
        if IS_POSIX and returncode < 0:
            return cls(signal=-returncode)
        return cls(code=returncode)

    @property
    def success(self) -> bool:
        """Return ``True`` when the process exited with code zero."""
        return self.code == 0

    def __str__(self) -> str:
        """Describe the status the way a shell user would expect."""
        if self.signal is not None:
            name = _signal_name(self.signal)
            if name is None:
                return f"signal: {self.signal}"
            return f"signal: {self.signal} ({name})"
        return f"exit status: {self.code}"


@dc.dataclass(frozen=True, slots=True)
class Output:
    """The status and captured output of a finished process.

    ``stdout`` and ``stderr`` are empty when output was not captured. When
    output was combined, everything the child wrote lands in ``stdout`` and
    ``stderr`` stays empty.
    """

    status: ExitStatus
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        """Return ``True`` when the process exited with code zero."""
        return self.status.success

    def stdout_string_lossy(self) -> str:
        """Return stdout decoded as UTF-8, replacing invalid sequences."""
        return self.stdout.decode(_ENCODING, errors="replace")

    def stderr_string_lossy(self) -> str:
        """Return stderr decoded as UTF-8, replacing invalid sequences."""
        return self.stderr.decode(_ENCODING, errors="replace")


__all__ = ["ExitStatus", "Output"]
