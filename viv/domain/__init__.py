"""Domain layer: lattice indices, the sparse grid, and termination detectors."""

from viv.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from viv.domain.grid import Grid
from viv.domain.index import Index

__all__ = [
    "ExtinctionDetector",
    "Grid",
    "HaltDetector",
    "Index",
    "ShortPeriodDetector",
    "TerminationReason",
]
