"""Scalar product of two vectors, generic over the number type."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

N = TypeVar("N")


def vector_multiply_function(number_type: Callable[..., N] = int) -> Callable[[Sequence[N], Sequence[N]], N]:
    """Return ``f(a, b) = a1*b1 + a2*b2 + ... + aN*bN`` for *number_type*.

    The accumulator starts at ``number_type(0)``, so the result has that type
    for int, float, Decimal, Fraction, complex and any other type with ``+``
    and ``*``.

    Example::

        dot = vector_multiply_function(float)
        dot([1.0, 2.0], [3.0, 4.0])   # → 11.0
    """
    zero = number_type(0)

    def multiply(first: Sequence[N], second: Sequence[N]) -> N:
        if len(first) != len(second):
            raise ValueError(f"vector lengths differ: {len(first)} != {len(second)}")
        result = zero
        for a, b in zip(first, second):
            result += a * b
        return result

    multiply.__name__ = f"multiply_{getattr(number_type, '__name__', 'vectors')}"
    return multiply


def multiply_vectors(first: Sequence[int], second: Sequence[int]) -> int:
    """Plain int scalar product."""
    result = 0
    for i in range(len(first)):
        result += first[i] * second[i]
    return result
