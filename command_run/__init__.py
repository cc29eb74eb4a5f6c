"""Run a command in a subprocess with logging, printing and exit checks.

A :class:`Command` wraps :class:`subprocess.Popen` with a few conveniences:

* print and/or log the command line before running it
* raise an error when the command does not exit successfully
* format the command as a shell-quoted line for display
* copy a command to derive variants from a template
"""

from __future__ import annotations

import logging

from .command import Command
from .command_runner import CommandRunner, LogTo, default_runner
from .environment import prepare_environment
from .errors import CommandError, ErrorKind, ExitError, LaunchError, WaitError
from .formatting import command_line_lossy
from .output import ExitStatus, Output

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Command",
    "CommandError",
    "CommandRunner",
    "ErrorKind",
    "ExitError",
    "ExitStatus",
    "LaunchError",
    "LogTo",
    "Output",
    "WaitError",
    "command_line_lossy",
    "default_runner",
    "prepare_environment",
]
