"""Piecewise polynomials with batched, order-preserving evaluation.

Convenience Functions
---------------------
piecewise_polynomial
    Create a piecewise polynomial from segments and breakpoints.

Operations
----------
piecewise_polynomial_evaluate
    Evaluate at query points, batching consecutive same-segment points.
piecewise_polynomial_interval
    Find the segment that governs a single point.
piecewise_polynomial_derivative
    Differentiate every segment.
breakpoint_search
    Binary search over a window of breakpoints.

Data Types
----------
PiecewisePolynomial
    Polynomial segments joined at strictly increasing breakpoints.
Outside
    Result of a breakpoint search that falls outside the window.

Exceptions
----------
PiecewisePolynomialError
    Base exception for piecewise polynomial operations.
BreakpointOrderError
    Breakpoints not strictly increasing.
"""

from ._breakpoint_order_error import BreakpointOrderError
from ._breakpoint_search import Outside, breakpoint_search, locate_interval
from ._piecewise_polynomial import PiecewisePolynomial, piecewise_polynomial
from ._piecewise_polynomial_derivative import piecewise_polynomial_derivative
from ._piecewise_polynomial_error import PiecewisePolynomialError
from ._piecewise_polynomial_evaluate import piecewise_polynomial_evaluate
from ._piecewise_polynomial_interval import piecewise_polynomial_interval

__all__ = [
    "BreakpointOrderError",
    "Outside",
    "PiecewisePolynomial",
    "PiecewisePolynomialError",
    "breakpoint_search",
    "locate_interval",
    "piecewise_polynomial",
    "piecewise_polynomial_derivative",
    "piecewise_polynomial_evaluate",
    "piecewise_polynomial_interval",
]
