"""
CPU backend for selection.

Runs the in-place selection engine over a SelectionDesign, counting
comparator calls and timing each phase.
"""

from __future__ import annotations

import warnings

from orderstat.core.result import Result
from orderstat.core.compute.timing import Timer
from orderstat.core.validation import check_positive_int, has_nan
from orderstat.selection._floyd_rivest import FLOYD_RIVEST_CUTOFF
from orderstat.selection._order import CountingLess
from orderstat.selection._selector import Method, Selector, check_method
from orderstat.selection.design import SelectionDesign
from orderstat.selection.solution import SelectionParams


class CPUSelectionBackend:
    """Pure-Python selection backend."""

    def __init__(
        self,
        method: Method = 'floyd_rivest',
        cutoff: int = FLOYD_RIVEST_CUTOFF,
    ):
        self._cutoff = check_positive_int(cutoff, 'cutoff')
        self._method = check_method(method)

    @property
    def name(self) -> str:
        return f'cpu_{self._method}'

    def solve(self, design: SelectionDesign) -> Result[SelectionParams]:
        """
        Select every rank of the design in place.

        Parameters
        ----------
        design : SelectionDesign
        """
        timer = Timer()
        timer.start()

        seq = design.sequence
        warnings_list: list[str] = []

        with timer.section('validation'):
            if design.order == 'natural' and has_nan(seq):
                msg = (
                    "sequence contains NaN; natural order is not total and "
                    "the selected values are unspecified"
                )
                warnings_list.append(msg)
                warnings.warn(msg, RuntimeWarning, stacklevel=3)

        less = CountingLess(design.less)
        selector = Selector(less, method=self._method, cutoff=self._cutoff)

        with timer.section('selection'):
            selector.select_many(seq, design.ranks)

        values = tuple(seq[k] for k in design.ranks)
        timer.stop()

        params = SelectionParams(
            values=values,
            ranks=design.ranks,
            probs=design.probs,
        )

        return Result(
            params=params,
            info={
                'method': self._method,
                'cutoff': self._cutoff,
                'n': design.n,
                'partitions': selector.partitions,
                'narrowings': selector.narrowings,
                'comparisons': less.calls,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
            provenance={'algorithm': self._method, 'order': design.order},
        )
