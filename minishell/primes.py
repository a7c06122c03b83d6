"""Primality test and prime factorisation."""

from __future__ import annotations

import math
import sys

from minishell.textutils import atoi


def is_prime(number: int) -> bool:
    """True when no integer between 2 and number - 1 divides number."""
    if number < 4:
        return True
    if number % 2 == 0:
        return False
    return all(number % d for d in range(3, math.isqrt(number) + 1, 2))


def prime_factors(number: int) -> list[int]:
    """Prime factors in ascending order; a prime gives itself alone."""
    if is_prime(number):
        return [number]
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= number:
        while number % divisor == 0:
            factors.append(divisor)
            number //= divisor
        divisor += 1
    if number > 1:
        factors.append(number)
    return factors


def format_factors(number: int) -> str:
    """Factors of number joined with '*'."""
    return "*".join(str(factor) for factor in prime_factors(number))


def main(argv: list[str] | None = None) -> int:
    """Print the factorisation of the single argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) == 1:
        print(format_factors(atoi(args[0])))
    else:
        print()
    return 0