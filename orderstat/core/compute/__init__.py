"""
Shared compute infrastructure for orderstat.

Submodules:
    timing: Execution timing utilities
"""

from orderstat.core.compute.timing import Timer

__all__ = [
    "Timer",
]
