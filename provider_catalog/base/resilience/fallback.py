"""Ordered fallback chains.

Purpose
-------
Several lookups in this package are "try A, else B, else C": display names
(cache, then generation, then the raw identifier) and catalog pricing
(confirmed cost, then advertised cost). Each link is a named
:class:`Strategy` returning a value or ``None``; :func:`first_result` walks
the chain in order and the first non-``None`` value wins.

Keeping the precedence as data makes it testable in isolation and lets
callers log which strategy produced a value.

Failure semantics
-----------------
Strategies signal "no result" by returning ``None``. Exceptions are not
caught here; a strategy that can fail recoverably must handle its own
failure and return ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Strategy(Generic[T]):
    """A named, zero-argument step of a fallback chain."""

    name: str
    run: Callable[[], Optional[T]]


def first_result(strategies: Iterable[Strategy[T]]) -> Optional[Tuple[str, T]]:
    """Return ``(strategy_name, value)`` for the first strategy with a value.

    Later strategies are not invoked once one produces a value. Returns
    ``None`` when every strategy yields ``None``.
    """
    for strategy in strategies:
        value = strategy.run()
        if value is not None:
            return strategy.name, value
    return None


def first_value(strategies: Iterable[Strategy[T]], default: T) -> T:
    """Like :func:`first_result` but return only the value, or ``default``."""
    hit = first_result(strategies)
    return default if hit is None else hit[1]


__all__ = ["Strategy", "first_result", "first_value"]
