"""fibmat: exact Fibonacci numbers by 2x2 matrix exponentiation."""

from fibmat.domain.fibonacci import fib

__version__ = "0.1.0"

__all__ = ["__version__", "fib"]
