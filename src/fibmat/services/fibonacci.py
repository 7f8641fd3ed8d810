"""FibonacciService: parse an index, run the engine, package the result.

Results carry the value as a decimal string so that JSON output stays
exact for numbers of any size.
"""

from __future__ import annotations

from contextlib import nullcontext

import structlog

from fibmat.config.models import EngineConfig
from fibmat.domain.fibonacci import fib
from fibmat.domain.parsing import ParseError, parse_index
from fibmat.services.result import ServiceError, ServiceResult
from fibmat.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)

OP_FIB = "fib"


def _error(code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP_FIB,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class FibonacciService:
    """Computes single Fibonacci numbers for the CLI and the shell."""

    def __init__(self, engine: EngineConfig | None = None) -> None:
        self._engine = engine or EngineConfig()

    @traced
    def compute(self, raw: str) -> ServiceResult:
        """Parse *raw* as an index and compute its Fibonacci number."""
        with trace_span("parse"):
            try:
                n = parse_index(raw)
            except ParseError:
                log.debug("fib.rejected", input=raw)
                return _error("PARSE_ERROR", "Not an integer!", input=raw)
            except ValueError:
                log.debug("fib.digit_limit", input_digits=len(raw))
                return _error(
                    "DIGIT_LIMIT",
                    "Index exceeds the interpreter's integer string limit",
                    input=raw,
                )
        return self._compute(n, raw)

    @traced
    def compute_index(self, n: int) -> ServiceResult:
        """Compute the Fibonacci number for an already-parsed index."""
        return self._compute(n, str(n))

    def _compute(self, n: int, raw: str) -> ServiceResult:
        limit = self._engine.max_abs_index
        if limit is not None and abs(n) > limit:
            log.debug("fib.index_too_large", index=raw, limit=limit)
            return _error(
                "INDEX_TOO_LARGE",
                f"|n| exceeds the configured limit of {limit}",
                input=raw,
                limit=limit,
            )

        # fib(1) returns without calling power
        with trace_span("power") if n != 1 else nullcontext() as span:
            value = fib(n)
            if span is not None:
                span.annotate("exponent", n - 1 if n >= 1 else abs(n) + 1)
                span.annotate("bits", value.bit_length())

        try:
            text = str(value)
        except ValueError:
            log.debug("fib.digit_limit", index=raw, bits=value.bit_length())
            return _error(
                "DIGIT_LIMIT",
                "Result exceeds the interpreter's integer string limit",
                input=raw,
                bits=value.bit_length(),
            )

        digits = len(text.lstrip("-"))
        log.debug("fib.computed", index=raw, digits=digits)
        return ServiceResult(
            ok=True,
            op=OP_FIB,
            data={
                "input": raw,
                "index": str(n),
                "value": text,
                "digits": digits,
                "sign": (value > 0) - (value < 0),
            },
        )
