"""Conway's Game of Life on an unbounded, sparse grid."""

from viv.domain.grid import Grid
from viv.domain.index import Index

__version__ = "0.1.0"

__all__ = ["Grid", "Index", "__version__"]
