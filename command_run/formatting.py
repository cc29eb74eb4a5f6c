"""Render a command invocation as a single shell-readable line.

The rendered line is only ever used for display (logging and printing). The
engine passes arguments to the OS as a discrete list, so nothing here is ever
interpreted by a shell.
"""

from __future__ import annotations

import os
import shlex
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

Word: t.TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]

_ENCODING: t.Final[str] = "utf-8"


def word_to_text(word: Word) -> str:
    """Return *word* as text, replacing undecodable bytes."""
    raw = os.fspath(word)
    if isinstance(raw, bytes):
        return raw.decode(_ENCODING, errors="replace")
    return raw


def quote_word(word: Word) -> str:
    """Return *word* quoted so a POSIX shell reads it back unchanged.

    Words made only of ASCII alphanumerics and ``_@%+=:,./-`` are left as they
    are. Anything else is wrapped in single quotes, with embedded single
    quotes written as ``'"'"'``. The empty word renders as ``''``.
    """
    return shlex.quote(word_to_text(word))


def command_line_lossy(program: Word, args: cabc.Iterable[Word] = ()) -> str:
    """Format *program* and *args* as a space-separated command line."""
    return " ".join(quote_word(word) for word in (program, *args))


__all__ = ["Word", "command_line_lossy", "quote_word", "word_to_text"]
