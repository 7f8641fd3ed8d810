"""Shared pytest fixtures and test helpers for fibmat tests."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from fibmat.services.telemetry import _active, disable_telemetry

REFERENCE_LIMIT = 10_002


@pytest.fixture(scope="session")
def reference_sequence() -> list[int]:
    """``F(0) .. F(REFERENCE_LIMIT)`` built by plain addition."""
    seq = [0, 1]
    while len(seq) <= REFERENCE_LIMIT:
        seq.append(seq[-1] + seq[-2])
    return seq


@pytest.fixture(scope="session")
def reference_fib(reference_sequence: list[int]) -> Callable[[int], int]:
    """Look up F(n) for |n| <= REFERENCE_LIMIT, applying the negafibonacci sign."""

    def lookup(n: int) -> int:
        value = reference_sequence[abs(n)]
        if n < 0 and n % 2 == 0:
            return -value
        return value

    return lookup


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray fibmat.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FIBMAT_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """``--verbose`` enables telemetry process-wide; undo it after each test."""
    yield
    disable_telemetry()
    _active.set(None)


@pytest.fixture(autouse=True)
def _restore_int_str_limit() -> Generator[None]:
    """CLI runs call sys.set_int_max_str_digits; put the original limit back."""
    previous = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(previous)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Each CLI invocation reconfigures logging; restore the previous state."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fib_logger = logging.getLogger("fibmat")
    fib_level = fib_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fib_logger.setLevel(fib_level)
    structlog.reset_defaults()
