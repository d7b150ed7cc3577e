"""Opening the input and output ends of a pipeline."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from pipeweld.paths import read_here_doc

__all__ = ["Redirections", "open_here_doc", "open_normal", "open_files"]

HERE_DOC = "here_doc"
_FILE_MODE = 0o644


@dataclass
class Redirections:
    """Descriptors a pipeline reads from and writes to.

    ``error`` is set when the output file could not be opened; output then
    goes to the null device.
    """

    infile: int
    outfile: int
    nb_cmd: int
    here_doc: bool = False
    error: bool = False
    _closed: bool = field(default=False, init=False, repr=False, compare=False)

    def close(self) -> None:
        """Close both descriptors. Further calls do nothing."""
        if self._closed:
            return
        self._closed = True
        for fd in (self.infile, self.outfile):
            try:
                os.close(fd)
            except OSError:
                pass

    def __enter__(self) -> "Redirections":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _perror(message: str, exc: OSError) -> None:
    sys.stderr.write(f"{message}: {exc.strerror}\n")
    sys.stderr.flush()


def _require(argv: Sequence[str], minimum: int) -> None:
    if len(argv) < minimum:
        raise ValueError(f"expected at least {minimum} arguments, got {len(argv)}")


def _open_outfile(path: str, append: bool) -> "tuple[int, bool]":
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        return os.open(path, flags, _FILE_MODE), False
    except OSError as exc:
        _perror("open outfile", exc)
        return os.open(os.devnull, os.O_WRONLY), True


def open_here_doc(argv: Sequence[str], stdin: Optional[TextIO] = None) -> Redirections:
    """Set up ``here_doc LIMITER cmd... outfile``.

    The here-document is read from ``stdin`` (standard input by default)
    and served through a pipe; the output file is opened for appending.
    """
    _require(argv, 3)
    source = sys.stdin if stdin is None else stdin
    read_fd, write_fd = os.pipe()
    with os.fdopen(write_fd, "w", encoding="utf-8") as writer:
        writer.write(read_here_doc(argv[1], source))
    outfile, error = _open_outfile(argv[-1], append=True)
    return Redirections(
        infile=read_fd,
        outfile=outfile,
        nb_cmd=len(argv) - 3,
        here_doc=True,
        error=error,
    )


def open_normal(argv: Sequence[str]) -> Redirections:
    """Set up ``infile cmd... outfile``.

    An unreadable input file is replaced by the null device; the output
    file is created or truncated.
    """
    _require(argv, 2)
    try:
        infile = os.open(argv[0], os.O_RDONLY)
    except OSError as exc:
        _perror("open infile", exc)
        infile = os.open(os.devnull, os.O_RDONLY)
    outfile, error = _open_outfile(argv[-1], append=False)
    return Redirections(
        infile=infile,
        outfile=outfile,
        nb_cmd=len(argv) - 2,
        here_doc=False,
        error=error,
    )


def open_files(argv: Sequence[str], stdin: Optional[TextIO] = None) -> Redirections:
    """Choose here-document or file input from the first argument."""
    _require(argv, 1)
    if argv[0].startswith(HERE_DOC):
        return open_here_doc(argv, stdin)
    return open_normal(argv)