"""Interactive read-eval loop of the shell."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from minishell.executor import execute
from minishell.models import Command, Job
from minishell.splitting import split_on

PROMPT = "minishell>$ "


def parse_line(line: str) -> Job:
    """Turn a command line into a job of one command split on spaces."""
    words = split_on(line.rstrip("\n"), " ")
    if not words:
        return Job()
    return Job(commands=[Command(argv=words)])


class Shell:
    """Reads command lines, keeps their history and runs them."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.env = env
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.history: list[str] = []
        self.last_status = 0

    def run_line(self, line: str) -> int:
        """Record and run one line; return its exit status."""
        line = line.rstrip("\n")
        if not line:
            return self.last_status
        self.history.append(line)
        self.last_status = execute(parse_line(line), self.env)
        return self.last_status

    def _interactive(self) -> bool:
        return (
            self.stdin is sys.stdin
            and self.stdout is sys.stdout
            and self.stdin.isatty()
        )

    def _read(self) -> str | None:
        if self._interactive():
            try:
                return input(PROMPT)
            except EOFError:
                return None
        self.stdout.write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        return line if line else None

    def loop(self) -> int:
        """Read and run lines until end of input; return the last status."""
        while True:
            try:
                line = self._read()
            except KeyboardInterrupt:
                self.stdout.write("\n")
                self.stdout.flush()
                continue
            if line is None:
                self.stdout.write("exit\n")
                self.stdout.flush()
                break
            self.run_line(line)
        return self.last_status


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the standard streams."""
    Shell(env=dict(os.environ)).loop()
    return 0