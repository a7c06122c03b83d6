"""Small string helpers with C-library semantics."""

from __future__ import annotations

_LONG_MAX = 2**63 - 1
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading integer; overflow gives -1 (positive) or 0 (negative)."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for char in text[pos:]:
        if not ("0" <= char <= "9"):
            break
        digit = ord(char) - ord("0")
        if result > (_LONG_MAX - digit) // 10:
            return -1 if sign == 1 else 0
        result = result * 10 + digit
    return _wrap32(_wrap32(result) * sign)


def itoa(number: int) -> str:
    """Decimal text of an integer."""
    return str(number)


def strtrim(text: str, charset: str) -> str:
    """Remove characters of charset from both ends of text."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle within the first length characters of haystack."""
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters; return -1, 0 or 1."""
    left = first[: max(count, 0)]
    right = second[: max(count, 0)]
    return (left > right) - (left < right)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text starting at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]