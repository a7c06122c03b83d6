# minishell

A small interactive shell. It reads command lines at a `minishell>$ ` prompt,
splits each line into words on spaces, looks the first word up on `PATH` and
runs it with the remaining words as arguments. From Python, the executor can
also run pipelines and commands with input/output redirections.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the shell

```
minishell
```

Type a command such as `ls -la` and press Enter. Each non-empty line is added
to the shell's history (`Shell.history`) and run, and its exit status is kept
in `Shell.last_status`. The shell prints `exit` and leaves when it reaches end
of input (Ctrl-D). Ctrl-C while waiting for input drops the line and shows a
fresh prompt.

Commands resolve the way `minishell.resolve.resolve_command` does it:

* names that start with `/`, `./` or `../`, or end in `/`, are used as paths.
  A directory gives `is a directory` and exit status 126; a file that is
  missing or not executable gives `No such file or directory` and exit
  status 127;
* other names that start with `.` are reported as `command not found`
  (status 127);
* any other name is searched for in each directory of `PATH`. If none
  matches, the shell reports `command not found` and the status is 127. When
  `PATH` is not set at all, the name is run as it is.

A command killed by a signal gives status 128 plus the signal number.

### What the shell does not do

The command line is only split on spaces. The interactive shell does not
recognise `|`, `<`, `>`, `>>` or here-documents, quotes, variables or
globbing, and it has no built-in commands such as `cd` or `exit`: every word
is passed to the program as it stands. Pipelines and redirections are
available only by building a `Job` in Python, as shown below.

## Using it from Python

```python
from minishell.shell import Shell, parse_line

job = parse_line("ls -la")
print(job.commands[0].argv)          # ['ls', '-la']

Shell(env={"PATH": "/usr/bin:/bin"}).run_line("echo hello")
```

A pipeline with redirections:

```python
from minishell.executor import execute
from minishell.models import Command, Job, Redirect, Token

job = Job(commands=[
    Command(argv=["cat"], redirects=[Redirect(Token.REDIRECT_INPUT, "in.txt")]),
    Command(argv=["sort"], redirects=[Redirect(Token.APPEND, "out.txt")]),
])
status = execute(job, {"PATH": "/usr/bin:/bin"})
```

The pieces:

* `minishell.models` holds the `Token` enum and the `Redirect`, `Command` and
  `Job` dataclasses. A `Redirect` must be one of `REDIRECT_INPUT`,
  `HERE_DOC_REDIRECT`, `REDIRECT_OUTPUT` or `APPEND`; `Job.is_pipeline()` is
  true when the job has more than one command.
* `minishell.executor` runs commands. `execute(job, env)` runs a job;
  `run_command(command, env)` and `run_pipeline(commands, env)` run one
  command or a pipeline and return the exit status (for a pipeline, that of
  the last command). `open_redirections(redirects)` is a context manager that
  opens the redirections in order and yields the final `(input, output)`
  files. Output files are created with mode 0644 (truncated for
  `REDIRECT_OUTPUT`, appended to for `APPEND`), a here-document file is
  deleted once it is opened, and a failure to open or a directory as output
  gives status 1. When `env` is `None`, the current environment is used.
* `minishell.resolve` provides `resolve_command(name, search_path)`,
  `find_in_path(name, search_path)` and `check_explicit_path(name)`. Failures
  raise `CommandError`, which carries `status` and `message`.
* `minishell.splitting.split_charset(text, charset)` splits on any character
  of `charset`; `split_on(text, separator)` splits on a single character. Both
  drop empty words.
* `minishell.linereader.LineReader(stream, buffer_size=10)` reads a file-like
  object or a file descriptor one line at a time, `buffer_size` characters or
  bytes per read. Lines keep their newline; `read_line()` returns `None` at
  the end, and the reader is also an iterator.
* `minishell.textutils` holds small string helpers: `atoi` (overflow gives -1
  for positive and 0 for negative input), `itoa`, `strtrim`, `strnstr` (an
  index or `None`), `strncmp` (-1, 0 or 1) and `substr`.

## Extra tools

Two small command-line tools are installed with the shell:

```
minishell-bits
```

prints the bit pattern `01010101` and, on the next line, the same byte with
its bits reversed (`10101010`). The functions behind it, `swap_bits`,
`reverse_bits` and `format_bits`, are in `minishell.bitops`.

```
minishell-factor 60
```

prints the prime factorisation of a number, for example `2*2*3*5`. A prime
number is printed as it is. Given no argument, or more than one, it prints an
empty line. The functions behind it, `is_prime`, `prime_factors` and
`format_factors`, are in `minishell.primes`.