"""Command lookup along a search path and here-document reading."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional, TextIO

from pipeweld.strings import split

__all__ = ["check_paths", "get_cmd_path", "read_here_doc"]


def check_paths(paths: Iterable[str], cmd: str) -> Optional[str]:
    """Return ``dir/cmd`` for the first directory where it is executable."""
    for directory in paths:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def get_cmd_path(cmd: str, env: Mapping[str, str]) -> Optional[str]:
    """Find ``cmd`` in the directories of ``env["PATH"]``.

    Returns None when the environment has no PATH or no directory holds an
    executable of that name. Empty PATH entries are ignored.
    """
    search = env.get("PATH")
    if search is None:
        return None
    return check_paths(split(search, ":"), cmd)


def read_here_doc(limiter: str, stream: TextIO) -> str:
    """Read lines from ``stream`` until one equals ``limiter``.

    Returns the lines read before the limiter, each ending in a newline.
    The limiter line itself is consumed but not included. Reading also
    stops at the end of the stream.
    """
    collected = []
    while True:
        line = stream.readline()
        if not line:
            break
        content = line[:-1] if line.endswith("\n") else line
        if content == limiter:
            break
        collected.append(content + "\n")
    return "".join(collected)