"""Shared validation helpers."""

from __future__ import annotations

import os


def validate_arg(arg: object) -> None:
    """Ensure *arg* is something :mod:`subprocess` accepts as an argument."""
    if not isinstance(arg, str | bytes | os.PathLike):
        kind = type(arg).__name__
        msg = f"command arguments must be str, bytes or path-like, not {kind}"
        raise TypeError(msg)


def validate_env_name(name: object) -> None:
    """Ensure *name* is usable as an environment variable name."""
    if not isinstance(name, str):
        msg = f"environment variable names must be str, not {type(name).__name__}"
        raise TypeError(msg)

    if not name or "=" in name or "\0" in name:
        msg = f"invalid environment variable name: {name!r}"
        raise ValueError(msg)


def validate_env_value(value: object) -> None:
    """Ensure *value* is a string or ``None`` (meaning unset)."""
    if value is not None and not isinstance(value, str):
        kind = type(value).__name__
        msg = f"environment variable values must be str or None, not {kind}"
        raise TypeError(msg)
