"""Data types shared by the parser and the executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Token(Enum):
    """Kinds of token a command line is broken into."""

    FILE_T = auto()
    COMMAND = auto()
    ARG = auto()
    PIPE = auto()
    REDIRECT_INPUT = auto()
    REDIRECT_OUTPUT = auto()
    HERE_DOC_REDIRECT = auto()
    HERE_DOC = auto()
    APPEND = auto()
    LIMITER = auto()
    STRING = auto()
    ERROR_TOKEN = auto()
    FIRST = auto()
    NO = auto()


_REDIRECT_KINDS = frozenset(
    {
        Token.REDIRECT_INPUT,
        Token.REDIRECT_OUTPUT,
        Token.HERE_DOC_REDIRECT,
        Token.APPEND,
    }
)


@dataclass(frozen=True)
class Redirect:
    """A single redirection of a command's input or output to a file."""

    kind: Token
    path: str

    def __post_init__(self) -> None:
        if self.kind not in _REDIRECT_KINDS:
            raise ValueError(f"{self.kind.name} is not a redirection")

    @property
    def is_input(self) -> bool:
        return self.kind in (Token.REDIRECT_INPUT, Token.HERE_DOC_REDIRECT)

    @property
    def is_output(self) -> bool:
        return self.kind in (Token.REDIRECT_OUTPUT, Token.APPEND)


@dataclass
class Command:
    """One simple command: its arguments and its redirections."""

    argv: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)
    is_builtin: bool = False

    @property
    def name(self) -> str | None:
        return self.argv[0] if self.argv else None


@dataclass
class Job:
    """A command line: one command, or several joined by pipes."""

    commands: list[Command] = field(default_factory=list)

    def is_pipeline(self) -> bool:
        """True when the job has more than one command."""
        return len(self.commands) > 1