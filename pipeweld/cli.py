"""Command-line entry point: ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from pipeweld.files import open_files
from pipeweld.process import run_pipeline

__all__ = ["main"]

USAGE = (
    "Usage:\n"
    "Normal: pipeweld file1 cmd1 ... cmdn file2\n"
    "Here_doc: pipeweld here_doc LIMITER cmd1 ... cmdn file\n"
)

_MIN_ARGS = 4


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline described by ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < _MIN_ARGS:
        sys.stderr.write(USAGE)
        sys.stderr.flush()
        return 1
    redirections = open_files(args, sys.stdin)
    status = run_pipeline(redirections, args, os.environ)
    if redirections.error:
        return 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())