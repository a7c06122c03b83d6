"""Splitting of command-line text into words."""

from __future__ import annotations


def split_charset(text: str, charset: str | None) -> list[str]:
    """Split text on any character of charset, dropping empty words."""
    separators = set(charset or "")
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def split_on(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]