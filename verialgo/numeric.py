"""Small number-theoretic and polynomial routines."""

from __future__ import annotations

from collections.abc import Sequence


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers.

    Follows Euclid's rule: ``gcd(a, 0) == a`` and ``gcd(a, b) == gcd(b, a % b)``.
    Raises ValueError if either argument is negative.
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd needs non-negative integers, got {a} and {b}")
    while b:
        a, b = b, a % b
    return a


def horner(coefficients: Sequence[int], x: int) -> int:
    """Evaluate a polynomial at ``x`` by Horner's rule.

    ``coefficients[i]`` is the coefficient of ``x**i``.
    Raises ValueError if no coefficients are given.
    """
    if not coefficients:
        raise ValueError("horner needs at least one coefficient")
    result = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        result = coefficient + x * result
    return result