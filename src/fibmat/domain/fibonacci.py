"""Fibonacci numbers for any integer index via powers of the transfer matrix.

Extended definition:

- ``F(0) = 0``, ``F(1) = 1``, ``F(k) = F(k-1) + F(k-2)``.
- ``F(-k) = (-1)^(k+1) * F(k)`` (negafibonacci), which is the same
  recurrence run backwards.

With ``T = [[0, 1], [1, 1]]`` and the seed column ``[F(1), F(2)]``, the
first entry of ``T^(n-1) . seed`` is ``F(n)``. Negative indices use the
exact integer inverse of ``T`` with exponent ``|n| + 1``.
"""

from __future__ import annotations

from typing import Final

from fibmat.domain.matrix import Matrix, multiply, power

TRANSFER: Final[Matrix] = Matrix([[0, 1], [1, 1]])
TRANSFER_INVERSE: Final[Matrix] = Matrix([[-1, 1], [1, 0]])
SEED: Final[Matrix] = Matrix([[1], [1]])


def extract(m: Matrix) -> int:
    """Read ``F(n)`` out of a power of the transfer matrix (or its inverse)."""
    return multiply(m, SEED)[0][0]


def fib(n: int) -> int:
    """Return the *n*-th Fibonacci number for any integer *n*.

    Runs in Theta(log |n|) matrix multiplications; the cost is dominated
    by the size of the big-integer operands, so ``|n|`` up to ~10^7 is
    practical.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"Fibonacci index must be int, got {type(n).__name__}"
        raise TypeError(msg)
    if n == 1:
        return 1
    if n >= 2:
        return extract(power(TRANSFER, n - 1))
    return extract(power(TRANSFER_INVERSE, abs(n) + 1))


def negafibonacci_sign(n: int) -> int:
    """Sign relating ``F(n)`` to ``F(|n|)``: ``(-1)^(|n|+1)`` for negative *n*."""
    if n >= 0:
        return 1
    return 1 if n % 2 else -1
