"""pytest-bdd assertion steps for command outcomes."""

from __future__ import annotations

import logging
import typing as t

from pytest_bdd import parsers, then

from command_run import ExitError, LaunchError

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    import pytest

    from command_run import Command
    from tests.helpers.execution import RunOutcome


@then("the command succeeds")
def command_succeeds(outcome: RunOutcome) -> None:
    """The command ran and exited with status zero."""
    assert outcome.require_output().success


@then(parsers.cfparse('stdout is "{text}"'))
def stdout_is(outcome: RunOutcome, text: str) -> None:
    """Captured stdout matches *text* exactly."""
    assert outcome.require_output().stdout_string_lossy() == text


@then("stderr is empty")
def stderr_is_empty(outcome: RunOutcome) -> None:
    """Nothing was captured on stderr."""
    assert outcome.require_output().stderr == b""


@then(parsers.cfparse("the command returns exit status {code:d}"))
def returns_status(outcome: RunOutcome, code: int) -> None:
    """The unchecked run returned the child's exit code."""
    output = outcome.require_output()
    assert not output.success
    assert output.status.code == code


@then("an exit error is raised")
def exit_error_raised(outcome: RunOutcome) -> None:
    """The run failed because the process did not succeed."""
    assert isinstance(outcome.error, ExitError)
    assert not outcome.error.output.success


@then("a launch error is raised")
def launch_error_raised(outcome: RunOutcome) -> None:
    """The run failed before the process started."""
    assert isinstance(outcome.error, LaunchError)
    assert outcome.output is None


@then(parsers.cfparse("the error output has exit status {code:d}"))
def error_status(outcome: RunOutcome, code: int) -> None:
    """The embedded output records the exit code."""
    assert isinstance(outcome.error, ExitError)
    assert outcome.error.output.status.code == code


@then(parsers.cfparse('the error output stderr is "{text}"'))
def error_stderr(outcome: RunOutcome, text: str) -> None:
    """The embedded output holds what the child wrote to stderr."""
    assert isinstance(outcome.error, ExitError)
    assert outcome.error.output.stderr_string_lossy() == text


@then("the printed text starts with the command line")
def printed_command_line(outcome: RunOutcome, command: Command) -> None:
    """The command line was printed before the command ran."""
    assert outcome.printed.startswith(f"{command.command_line_lossy()}\n")


@then(parsers.cfparse('the error log mentions "{text}"'))
def error_logged(caplog: pytest.LogCaptureFixture, text: str) -> None:
    """An ERROR record includes *text*."""
    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert any(text in message for message in errors), errors


@then(parsers.cfparse('the original command has no argument "{arg}"'))
def original_unchanged(command: Command, arg: str) -> None:
    """The template kept its own arguments."""
    assert arg not in command.args


@then(parsers.cfparse('the copied command has the argument "{arg}"'))
def copy_extended(copied: Command, arg: str) -> None:
    """The copy received the new argument."""
    assert copied.args[-1] == arg
