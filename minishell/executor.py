"""Running commands and pipelines as child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterator, Mapping, Sequence
from contextlib import ExitStack, contextmanager
from typing import BinaryIO, Union

from minishell.models import Command, Job, Token
from minishell.resolve import CommandError, resolve_command

_OUTPUT_FLAGS = {
    Token.REDIRECT_OUTPUT: os.O_CREAT | os.O_RDWR | os.O_TRUNC,
    Token.APPEND: os.O_CREAT | os.O_RDWR | os.O_APPEND,
}

_Started = Union[subprocess.Popen, int]


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _open_input(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as error:
        raise CommandError(1, f"minishell: {path}: {error.strerror}") from error


def _open_output(path: str, kind: Token) -> BinaryIO:
    if os.path.isdir(path):
        raise CommandError(1, f"minishell: {path}: Is a directory")
    try:
        descriptor = os.open(path, _OUTPUT_FLAGS[kind], 0o644)
    except OSError as error:
        raise CommandError(1, f"minishell: {path}: {error.strerror}") from error
    return os.fdopen(descriptor, "wb")


@contextmanager
def open_redirections(
    redirects,
) -> Iterator[tuple[BinaryIO | None, BinaryIO | None]]:
    """Open redirections in order; yield the final (input, output) files.

    Every output file is created or truncated even when a later one
    replaces it.  Here-document files are removed once opened.  Failures
    raise CommandError with status 1.
    """
    with ExitStack() as stack:
        stdin: BinaryIO | None = None
        stdout: BinaryIO | None = None
        for redirect in redirects:
            if redirect.is_input:
                if stdin is not None:
                    stdin.close()
                stdin = stack.enter_context(_open_input(redirect.path))
                if redirect.kind is Token.HERE_DOC_REDIRECT:
                    try:
                        os.unlink(redirect.path)
                    except OSError as error:
                        raise CommandError(
                            1, f"minishell: {redirect.path}: {error.strerror}"
                        ) from error
            else:
                if stdout is not None:
                    stdout.close()
                stdout = stack.enter_context(_open_output(redirect.path, redirect.kind))
        yield stdin, stdout


def _search_path(env: Mapping[str, str] | None) -> str | None:
    return (os.environ if env is None else env).get("PATH")


def _start(command: Command, env: Mapping[str, str] | None, stdin, stdout) -> _Started:
    """Spawn command, or return the exit status it fails with."""
    try:
        with open_redirections(command.redirects) as (redirect_in, redirect_out):
            if not command.argv:
                return 127
            path = resolve_command(command.argv[0], _search_path(env))
            try:
                return subprocess.Popen(
                    command.argv,
                    executable=path,
                    env=None if env is None else dict(env),
                    stdin=redirect_in if redirect_in is not None else stdin,
                    stdout=redirect_out if redirect_out is not None else stdout,
                )
            except OSError as error:
                _report(f"minishell: {path}: {error.strerror}")
                return 127
    except CommandError as error:
        _report(error.message)
        return error.status


def _wait(started: _Started) -> int:
    if isinstance(started, int):
        return started
    code = started.wait()
    return 128 - code if code < 0 else code


def run_command(command: Command, env: Mapping[str, str] | None = None) -> int:
    """Run one command to completion and return its exit status."""
    return _wait(_start(command, env, None, None))


def run_pipeline(commands: Sequence[Command], env: Mapping[str, str] | None = None) -> int:
    """Run commands joined by pipes; return the last command's status."""
    if not commands:
        return 0
    started: list[_Started] = []
    read_end: int | None = None
    last = len(commands) - 1
    for position, command in enumerate(commands):
        if position == last:
            next_read, write_end = None, None
        else:
            next_read, write_end = os.pipe()
        try:
            started.append(_start(command, env, read_end, write_end))
        except BaseException:
            if next_read is not None:
                os.close(next_read)
            raise
        finally:
            for descriptor in (read_end, write_end):
                if descriptor is not None:
                    os.close(descriptor)
        read_end = next_read
    statuses = [_wait(item) for item in started]
    return statuses[-1]


def execute(job: Job, env: Mapping[str, str] | None = None) -> int:
    """Run a job, piped or single, and return its exit status."""
    if job.is_pipeline():
        return run_pipeline(job.commands, env)
    if job.commands:
        return run_command(job.commands[0], env)
    return 0