"""Starting the commands of a pipeline and collecting their status."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from pipeweld.files import Redirections
from pipeweld.paths import get_cmd_path
from pipeweld.strings import split

__all__ = ["CommandError", "command_for", "resolve_command", "run_pipeline"]

_EXEC_FAILURE = 127


class CommandError(Exception):
    """A command is empty or cannot be found on the search path."""

    status = _EXEC_FAILURE

    def __init__(self, message: str, command: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.command = command


def command_for(argv: Sequence[str], here_doc: bool, pos: int) -> Optional[str]:
    """The command text at position ``pos`` of the pipeline, or None."""
    index = (2 if here_doc else 1) + pos
    if pos < 0 or index >= len(argv):
        return None
    return argv[index]


def resolve_command(cmd: Optional[str], env: Mapping[str, str]) -> List[str]:
    """Split ``cmd`` on spaces and replace the program name by its full path."""
    if not cmd:
        raise CommandError("Error: empty command")
    args = split(cmd, " ")
    if not args:
        raise CommandError("Error: empty command")
    path = get_cmd_path(args[0], env)
    if path is None:
        raise CommandError(f"Command not found: {args[0]}", args[0])
    return [path, *args[1:]]


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _launch(
    argv: Sequence[str],
    here_doc: bool,
    pos: int,
    env: Mapping[str, str],
    stdin: int,
    stdout: int,
) -> Union["subprocess.Popen[bytes]", int]:
    try:
        args = resolve_command(command_for(argv, here_doc, pos), env)
    except CommandError as exc:
        _report(exc.message)
        return exc.status
    try:
        return subprocess.Popen(args, stdin=stdin, stdout=stdout, env=dict(env))
    except OSError as exc:
        _report(f"execve: {exc.strerror}")
        return _EXEC_FAILURE


def _endpoints(
    pos: int, redirections: Redirections, pipes: Sequence[Tuple[int, int]]
) -> Tuple[int, int]:
    last = redirections.nb_cmd - 1
    stdin = redirections.infile if pos == 0 else pipes[pos - 1][0]
    stdout = redirections.outfile if pos == last else pipes[pos][1]
    return stdin, stdout


def run_pipeline(
    redirections: Redirections, argv: Sequence[str], env: Mapping[str, str]
) -> int:
    """Run every command, each feeding the next, and wait for all of them.

    ``argv`` holds the arguments after the program name. The descriptors in
    ``redirections`` are closed once the commands have started. Returns the
    exit status of the last command: 127 when it could not be started and
    1 when it was killed by a signal.
    """
    count = redirections.nb_cmd
    pipes: List[Tuple[int, int]] = []
    children: List[Union["subprocess.Popen[bytes]", int]] = []
    try:
        pipes.extend(os.pipe() for _ in range(max(count - 1, 0)))
        for pos in range(count):
            stdin, stdout = _endpoints(pos, redirections, pipes)
            children.append(_launch(argv, redirections.here_doc, pos, env, stdin, stdout))
    finally:
        for read_fd, write_fd in pipes:
            os.close(read_fd)
            os.close(write_fd)
        redirections.close()

    statuses = [
        child if isinstance(child, int) else child.wait() for child in children
    ]
    if not statuses:
        return 1
    last = statuses[-1]
    return last if last >= 0 else 1