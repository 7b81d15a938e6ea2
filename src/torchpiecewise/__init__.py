"""torchpiecewise: polynomial and piecewise polynomial evaluation for PyTorch."""

from . import piecewise_polynomial, polynomial

__all__ = [
    "piecewise_polynomial",
    "polynomial",
]

__version__ = "0.1.0"
