"""Recursive classics: factorial, Fibonacci and string reversal."""

from __future__ import annotations

from functools import lru_cache

__all__ = ["factorial", "fibonacci", "fibonacci_series", "reverse_recursive"]


def factorial(n: int) -> int:
    """Return ``n!``; raise ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n <= 1:
        return 1
    return n * factorial(n - 1)


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n < 2:
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")
    return _fib(n)


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, built iteratively."""
    if count < 0:
        raise ValueError("count must not be negative")
    series: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        series.append(a)
        a, b = b, a + b
    return series


def reverse_recursive(text: str) -> str:
    """Reverse ``text`` by recursively swapping characters from both ends."""
    chars = list(text)
    n = len(chars)

    def swap_from(i: int) -> None:
        if i >= n // 2:
            return
        chars[i], chars[n - 1 - i] = chars[n - 1 - i], chars[i]
        swap_from(i + 1)

    swap_from(0)
    return "".join(chars)