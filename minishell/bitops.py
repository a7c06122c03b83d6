"""Bit manipulation of single octets."""

from __future__ import annotations

import sys


def _check(octet: int) -> int:
    if not 0 <= octet <= 0xFF:
        raise ValueError(f"octet out of range: {octet}")
    return octet


def swap_bits(octet: int) -> int:
    """Exchange the high and low nibbles of an octet."""
    _check(octet)
    return ((octet << 4) | (octet >> 4)) & 0xFF


def reverse_bits(octet: int) -> int:
    """Reverse the order of the eight bits of an octet."""
    _check(octet)
    result = 0
    for _ in range(8):
        result = (result << 1) | (octet & 1)
        octet >>= 1
    return result


def format_bits(octet: int) -> str:
    """Eight binary digits, most significant first."""
    return format(_check(octet), "08b")


def main(argv: list[str] | None = None) -> int:
    """Show a sample octet and its bit-reversal."""
    octet = 0b01010101
    sys.stdout.write(format_bits(octet) + "\n" + format_bits(reverse_bits(octet)))
    return 0