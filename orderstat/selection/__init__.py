"""
Selection module.

In-place order statistics: Floyd-Rivest selection, median-of-medians
estimation and multi-rank selection.

Public API:
    kth(x, k)                     - k-th smallest element (zero-based)
    kth_by(x, k, cmp)             - same, under a custom comparator
    median_of_medians(x)          - approximate median (30th..70th percentile)
    median_of_medians_by(x, cmp)  - same, under a custom comparator
    locate_median_of_medians(x)   - (index, value) of that estimate
    select(x, ranks)              - one or many ranks, with diagnostics
    quantile(x, probs)            - element-valued (type 1) quantiles
"""

from orderstat.selection.design import SelectionDesign
from orderstat.selection.solution import SelectionParams, SelectionSolution
from orderstat.selection.solvers import (
    kth,
    kth_by,
    median_of_medians,
    median_of_medians_by,
    locate_median_of_medians,
    select,
    quantile,
)

__all__ = [
    "kth",
    "kth_by",
    "median_of_medians",
    "median_of_medians_by",
    "locate_median_of_medians",
    "select",
    "quantile",
    "SelectionDesign",
    "SelectionParams",
    "SelectionSolution",
]
