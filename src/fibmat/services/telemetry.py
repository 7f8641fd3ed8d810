"""Opt-in timing spans for service calls.

``--verbose`` switches collection on. Each ``@traced`` call then records a
tree of :class:`Span` nodes, logs ``span.complete`` and stores the tree
under ``ServiceResult.meta["telemetry"]``. Switched off, a call costs one
ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec

import structlog

from fibmat.services.result import ServiceResult

log = structlog.get_logger(__name__)

_enabled: ContextVar[bool] = ContextVar("fibmat_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("fibmat_active_span", default=None)


@dataclass
class Span:
    name: str
    started: float = field(default_factory=time.perf_counter)
    stopped: float | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.stopped is None:
            return 0.0
        return (self.stopped - self.started) * 1000

    def end(self) -> None:
        self.stopped = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            node["annotations"] = dict(self.annotations)
        if self.children:
            node["children"] = [child.to_dict() for child in self.children]
        return node


@contextmanager
def _activate(span: Span) -> Generator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Record a child of the active span, or yield None when nothing is traced."""
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")


def traced(func: Callable[_P, ServiceResult]) -> Callable[_P, ServiceResult]:
    """Time a service method and attach its span tree to the result's ``meta``."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(func.__qualname__)
        with _activate(span):
            result = func(*args, **kwargs)
        log.debug(
            "span.complete",
            span_name=span.name,
            duration_ms=round(span.duration_ms, 2),
            ok=result.ok,
            children=len(span.children),
        )
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
