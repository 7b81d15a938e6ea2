"""Hypothesis strategies for polynomial and piecewise polynomial testing."""

from ._breakpoints import breakpoints
from ._piecewise_polynomials import piecewise_polynomials
from ._polynomials import polynomials
from ._query_points import query_points
from ._real_numbers import real_numbers

__all__ = [
    # Numeric strategies
    "real_numbers",
    # Tensor strategies
    "breakpoints",
    "query_points",
    # Polynomial strategies
    "polynomials",
    "piecewise_polynomials",
]
