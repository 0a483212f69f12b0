"""
Order relations used by the selection engine.

The engine only ever asks one question, "is a strictly less than b?", so
an order is represented as a binary predicate. Natural order uses the
elements' own ``<``; a caller-supplied ``cmp(a, b)`` returning a negative,
zero or positive number (the ``functools.cmp_to_key`` convention) is
adapted to the same shape.

The engine assumes, but never checks, that the relation is a strict weak
order. Violations give unspecified rankings, never corrupted sequences.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from orderstat.core.exceptions import ValidationError

Less = Callable[[Any, Any], bool]
Comparator = Callable[[Any, Any], int]

natural_less: Less = operator.lt


def less_from_cmp(cmp: Comparator) -> Less:
    """Adapt a three-way comparator to a strict less-than predicate."""
    def less(a: Any, b: Any) -> bool:
        return cmp(a, b) < 0
    return less


def order_from(cmp: Comparator | None) -> tuple[Less, str]:
    """Return (less, label) for an optional comparator."""
    if cmp is None:
        return natural_less, 'natural'
    if not callable(cmp):
        raise ValidationError(
            f"cmp: expected a callable comparator, got {type(cmp).__name__}"
        )
    return less_from_cmp(cmp), 'custom'


class CountingLess:
    """Less-than predicate that counts how often it is called."""

    def __init__(self, less: Less):
        self._less = less
        self.calls = 0

    def __call__(self, a: Any, b: Any) -> bool:
        self.calls += 1
        return self._less(a, b)
