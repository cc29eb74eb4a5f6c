"""Global test configuration and shared fixtures."""

from __future__ import annotations

import os
import sys
import typing as t

import pytest

import command_run

_POSIX: t.Final[bool] = os.name == "posix"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_posix: mark test as relying on POSIX commands or signals",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip POSIX-only tests on other platforms."""
    if _POSIX:
        return
    skip = pytest.mark.skip(reason="requires a POSIX platform")
    for item in items:
        if "requires_posix" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def python_command() -> t.Callable[[str], command_run.Command]:
    """Return a factory building a quiet :class:`Command` running Python code."""

    def factory(code: str) -> command_run.Command:
        return command_run.Command.with_args(
            sys.executable, ["-c", code]
        ).disable_print_command()

    return factory
