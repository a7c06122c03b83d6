import math

import pytest

from minishell.primes import format_factors, is_prime, main, prime_factors


@pytest.mark.parametrize("number", [2, 3, 5, 7, 97, 7919])
def test_primes(number):
    assert is_prime(number) is True


@pytest.mark.parametrize("number", [4, 9, 12, 25, 91, 7917])
def test_composites(number):
    assert is_prime(number) is False


@pytest.mark.parametrize("number", [0, 1, -6])
def test_small_numbers_count_as_prime(number):
    assert is_prime(number) is True
    assert prime_factors(number) == [number]


@pytest.mark.parametrize("number", range(2, 300))
def test_factors_multiply_back(number):
    factors = prime_factors(number)
    assert math.prod(factors) == number
    assert all(is_prime(f) and f >= 2 for f in factors)
    assert factors == sorted(factors)


def test_format_factors_composite():
    assert format_factors(12) == "2*2*3"


def test_format_factors_prime():
    assert format_factors(13) == "13"


def test_main_prints_factorisation(capsys):
    assert main(["12"]) == 0
    assert capsys.readouterr().out == "2*2*3\n"


def test_main_prime_argument(capsys):
    main(["7"])
    assert capsys.readouterr().out == "7\n"


def test_main_without_argument_prints_newline(capsys):
    main([])
    assert capsys.readouterr().out == "\n"


def test_main_non_numeric_argument(capsys):
    main(["abc"])
    assert capsys.readouterr().out == "0\n"