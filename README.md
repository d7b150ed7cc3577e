# pipeweld

`pipeweld` runs a chain of commands the way a shell pipeline does. Input comes
from a file or from a here-document, and output goes to a file.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

At least four arguments are needed. With fewer, a usage message goes to
standard error and the exit status is 1.

Normal mode reads `file1`, passes it through each command in turn, and writes
the result to `file2`. `file2` is created if needed and truncated:

```
pipeweld file1 cmd1 cmd2 ... cmdn file2
```

This does the same as `< file1 cmd1 | cmd2 | ... | cmdn > file2`.

Here-document mode is chosen when the first argument starts with `here_doc`.
Lines are read from standard input until one equals `LIMITER` or input ends.
Those lines feed the first command, and the output is appended to `file`:

```
pipeweld here_doc LIMITER cmd1 cmd2 ... cmdn file
```

This does the same as `cmd1 << LIMITER | cmd2 | ... | cmdn >> file`.

Each command is split on spaces, with empty fields dropped. Its program is
looked up in the directories listed in `PATH`. The first directory that holds
an executable of that name is used.

- If the input file cannot be opened, `open infile: <reason>` is written to
  standard error and the first command reads empty input.
- If the output file cannot be opened, `open outfile: <reason>` is written to
  standard error, output is discarded, and the exit status is 1.
- An empty command prints `Error: empty command`. A command not found on
  `PATH` prints `Command not found: <name>`. In both cases that stage is given
  status 127 and gets no process. The other commands still run.
- Otherwise the exit status is that of the last command. If the last command
  was killed by a signal, the status is 1.

## What it does not do

Commands are not parsed the way a shell parses them. Quoting, escapes,
variables, globbing and redirections inside a command are not supported.
A command is split on single spaces only. A program name containing a `/` is
not run directly; it is still looked up under each `PATH` directory.

## Library

The pieces can also be called from Python:

- `pipeweld.paths.get_cmd_path(cmd, env)` resolves a command name against
  `env["PATH"]`. It returns `None` if the name is not found.
  `check_paths(paths, cmd)` does the same for a given list of directories.
  `read_here_doc(limiter, stream)` returns the lines before the limiter.
- `pipeweld.files.open_files(argv, stdin)` takes the arguments without the
  program name and returns a `Redirections`. `open_here_doc` and `open_normal`
  handle the two modes directly. `Redirections` holds `infile`, `outfile`,
  `nb_cmd`, `here_doc` and `error`. `close()` releases its descriptors, and it
  can also be used as a context manager.
- `pipeweld.process.run_pipeline(redirections, argv, env)` starts the
  commands, connects them with pipes, waits for all of them, and returns the
  last one's status. `resolve_command(cmd, env)` splits a command and
  resolves its program. It raises `CommandError` for empty or unknown
  commands. `command_for(argv, here_doc, pos)` picks the command text for a
  stage.
- `pipeweld.cli.main(argv=None)` is the command-line entry point. It returns
  the exit status.

The package also has small helpers:

- `pipeweld.strings`: `split`, `strchr`, `strrchr`, `strnstr`, `substr`,
  `strtrim`, `strjoin`, `strlcpy`, `strlcat`, `strncat`, `strmapi`,
  `striteri`, `strncmp`.
- `pipeweld.numbers`: `atoi`, `itoa`.
- `pipeweld.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, working on byte buffers.
- `pipeweld.chars`: ASCII classification and case conversion.
- `pipeweld.output`: a small `printf`/`sprintf` supporting `%s %c %p %d %i %u
  %x %X %%`, number formatters, and `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd` for writing to file descriptors.