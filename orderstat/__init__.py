"""
orderstat: order statistics without sorting.

Selects the k-th smallest element of a mutable sequence in place, in
expected linear time, and estimates medians in worst-case linear time.

Submodules:
    selection: Selection engine (Floyd-Rivest, median-of-medians) and the
               public entry points
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from orderstat import selection
from orderstat.selection import (
    kth,
    kth_by,
    median_of_medians,
    median_of_medians_by,
    locate_median_of_medians,
    select,
    quantile,
)

__all__ = [
    "__version__",
    "selection",
    "kth",
    "kth_by",
    "median_of_medians",
    "median_of_medians_by",
    "locate_median_of_medians",
    "select",
    "quantile",
]
