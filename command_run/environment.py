"""Environment helpers for child processes."""

from __future__ import annotations

import logging
import os
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

logger = logging.getLogger(__name__)


def prepare_environment(
    overrides: cabc.Mapping[str, str | None],
    *,
    clear: bool = False,
    base: cabc.Mapping[str, str] | None = None,
) -> dict[str, str] | None:
    """Merge *overrides* over *base* for use as a child environment.

    ``None`` is returned when there is nothing to change, which lets the child
    inherit the parent's environment as-is. A ``None`` value in *overrides*
    removes the variable. When *clear* is set the child starts from an empty
    environment and only *overrides* apply.
    """
    if not overrides and not clear:
        return None

    env: dict[str, str] = {} if clear else dict(os.environ if base is None else base)
    for name, value in overrides.items():
        if value is None:
            env.pop(name, None)
        else:
            env[name] = value
    logger.debug(
        "Prepared child environment with %d override(s) (clear=%s)",
        len(overrides),
        clear,
    )
    return env


__all__ = ["prepare_environment"]
