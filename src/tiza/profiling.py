"""Tiza ParseAccumulator: opt-in profiling for formula parsing.

This module provides accumulated metrics during parsing:
- Number of parse calls and time spent parsing
- Source length and token count
- Node count in resulting trees

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from tiza import parse
    from tiza.profiling import profiled_parse

    # Normal parse (no overhead)
    root = parse("x^2")

    # Profiled parse (opt-in)
    with profiled_parse() as metrics:
        root = parse("\\sum_{i=1}^{n} i")

    print(metrics.summary())
    # {"total_ms": 0.4, "parse_ms": 0.2, "source_length": 16, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics during formula parsing.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of parses recorded (cache hits are not).
        source_length: Total characters parsed.
        token_count: Total tokens produced by the lexer.
        node_count: Total nodes in the resulting trees.
        parse_ms: Time spent inside parse calls, in milliseconds.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    node_count: int = 0
    parse_ms: float = 0.0

    def record_parse(
        self,
        source_length: int,
        token_count: int,
        node_count: int,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a parse call."""
        self.parse_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.node_count += node_count
        self.parse_ms += duration_ms

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of parse metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_ms": round(self.parse_ms, 2),
            "parse_calls": self.parse_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "node_count": self.node_count,
        }


# Module-level ContextVar
_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Creates a ParseAccumulator and makes it available via
    get_parse_accumulator() for the duration of the with block.

    Example:
        with profiled_parse() as metrics:
            root = parse(source)
        print(metrics.summary())

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
