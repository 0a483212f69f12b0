"""
Probability to rank mapping for element-valued sample quantiles.

Uses the inverse of the empirical distribution function (Hyndman & Fan
type 1, R's quantile(type=1)), so every quantile is an actual element and
can be found by selection alone.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# R fuzz factor: 4 * machine epsilon
_FUZZ = 4.0 * np.finfo(np.float64).eps


def type1_ranks(n: int, probs: NDArray) -> tuple[int, ...]:
    """
    Zero-based ranks of the type-1 quantiles of an n-element sample.

    R: j = floor(n*p + fuzz), h = (n*p > j + fuzz), x[j + h] (1-indexed,
    clamped to [1, n]).
    """
    ranks = []
    for p in probs:
        nppm = n * float(p)
        j = int(math.floor(nppm + _FUZZ))
        h = 1 if nppm > j + _FUZZ else 0
        ranks.append(max(0, min(j + h - 1, n - 1)))
    return tuple(ranks)
