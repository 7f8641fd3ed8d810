"""Immutable integer matrices with multiplication and fast exponentiation.

Cells are Python ``int`` so every product is exact. The Fibonacci engine
only ever multiplies 2x2 by 2x2 and 2x2 by 2x1, but ``multiply`` accepts
any conforming pair.

INVARIANT: no operation mutates its operands; every result is a new Matrix.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class ShapeMismatchError(ValueError):
    """Matrix operands whose shapes do not compose."""


@dataclass(frozen=True, slots=True, init=False)
class Matrix:
    """Rectangular matrix of ints, addressed ``m[row][col]``."""

    cells: tuple[tuple[int, ...], ...]

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        cells = tuple(tuple(row) for row in rows)
        if not cells or not cells[0]:
            msg = "Matrix must have at least one row and one column"
            raise ShapeMismatchError(msg)
        width = len(cells[0])
        for i, row in enumerate(cells):
            if len(row) != width:
                msg = f"Row {i} has {len(row)} columns, expected {width}"
                raise ShapeMismatchError(msg)
            for value in row:
                if isinstance(value, bool) or not isinstance(value, int):
                    msg = f"Matrix cells must be int, got {type(value).__name__}"
                    raise TypeError(msg)
        object.__setattr__(self, "cells", cells)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, row: int) -> tuple[int, ...]:
        return self.cells[row]

    def __matmul__(self, other: Matrix) -> Matrix:
        return multiply(self, other)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.cells]!r})"


def identity(size: int) -> Matrix:
    """Return the ``size x size`` identity matrix."""
    return Matrix([[1 if i == j else 0 for j in range(size)] for i in range(size)])


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the product ``a . b``.

    ``C[i][j] = sum over k of a[i][k] * b[k][j]`` for a ``p x q`` matrix
    *a* and a ``q x r`` matrix *b*.

    Raises:
        ShapeMismatchError: ``a.cols != b.rows``.
    """
    if a.cols != b.rows:
        msg = f"Cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols}"
        raise ShapeMismatchError(msg)
    columns = list(zip(*b.cells))
    return Matrix(
        [sum(x * y for x, y in zip(row, column)) for column in columns] for row in a.cells
    )


def power(a: Matrix, n: int) -> Matrix:
    """Raise the square matrix *a* to the non-negative integer power *n*.

    Exponentiation by squaring: odd exponents peel off one factor of *a*,
    even exponents square a single half-power. ``power(a, 1)`` returns *a*
    itself and ``power(a, 0)`` the identity.

    Raises:
        ShapeMismatchError: *a* is not square.
        ValueError: *n* is negative.
    """
    if not a.is_square:
        msg = f"Cannot raise non-square {a.rows}x{a.cols} matrix to a power"
        raise ShapeMismatchError(msg)
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"Exponent must be int, got {type(n).__name__}"
        raise TypeError(msg)
    if n < 0:
        msg = f"Exponent must be non-negative, got {n}"
        raise ValueError(msg)
    if n == 0:
        return identity(a.rows)
    return _power(a, n)


def _power(a: Matrix, n: int) -> Matrix:
    if n == 1:
        return a
    if n % 2 == 1:
        return multiply(a, _power(a, n - 1))
    half = _power(a, n // 2)
    return multiply(half, half)
