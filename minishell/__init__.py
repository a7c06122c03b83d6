"""A small shell that runs commands from PATH, with pipelines and redirections in its executor."""

__version__ = "0.1.0"
__all__ = [
    "bitops",
    "executor",
    "linereader",
    "models",
    "primes",
    "resolve",
    "shell",
    "splitting",
    "textutils",
]