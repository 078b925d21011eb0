"""Small number-theory and digit routines."""

from __future__ import annotations

_EVEN_MASK = 0xAAAAAAAA
_ODD_MASK = 0x55555555
_UINT32_LIMIT = 1 << 32


def largest_number(digits: int, total: int) -> str:
    """Return the largest ``digits``-digit number whose digits add up to ``total``.

    A total of zero yields ``"0"``. Raises ValueError when no such number exists.
    """
    if digits < 0 or total < 0:
        raise ValueError("digits and total must be non-negative")
    if total == 0:
        return "0"
    if total > 9 * digits:
        raise ValueError(f"no {digits}-digit number has digit sum {total}")
    parts = []
    for _ in range(digits):
        digit = min(total, 9)
        parts.append(str(digit))
        total -= digit
    return "".join(parts)


def swap_bits(n: int) -> int:
    """Swap each even-positioned bit of a 32-bit unsigned integer with its neighbour."""
    if not 0 <= n < _UINT32_LIMIT:
        raise ValueError("n must be a 32-bit unsigned integer")
    return ((n & _EVEN_MASK) >> 1) | ((n & _ODD_MASK) << 1)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its digits raised to its digit count."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = [int(d) for d in str(n)] if n else []
    order = len(digits)
    return sum(d**order for d in digits) == n


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current