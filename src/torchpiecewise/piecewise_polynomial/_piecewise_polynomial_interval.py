from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple, Union

from torch import Tensor

from ._breakpoint_search import locate_interval

if TYPE_CHECKING:
    from ._piecewise_polynomial import PiecewisePolynomial


def piecewise_polynomial_interval(
    pp: PiecewisePolynomial,
    x: Union[Tensor, float],
) -> Optional[Tuple[int, int]]:
    """Find the segment that governs a single point.

    Parameters
    ----------
    pp : PiecewisePolynomial
        Piecewise polynomial to search.
    x : Tensor or float
        Query point, a scalar or single-element tensor.

    Returns
    -------
    tuple of int or None
        Breakpoint indices ``(left, right)`` with ``right == left + 1``
        bounding the segment of ``x``. None if ``x`` lies outside
        ``[breakpoints[0], breakpoints[-1]]``, is NaN, or ``pp`` is empty.

    Notes
    -----
    A point on an interior breakpoint belongs to the segment on its right.
    A point on the last breakpoint belongs to the last segment.

    Examples
    --------
    >>> pp = piecewise_polynomial([[0.0], [1.0]], [0.0, 1.0, 2.0])
    >>> piecewise_polynomial_interval(pp, 1.0)
    (1, 2)
    >>> piecewise_polynomial_interval(pp, 2.0)
    (1, 2)
    >>> piecewise_polynomial_interval(pp, 2.5) is None
    True
    """
    if isinstance(x, Tensor):
        x = x.item()

    return locate_interval(pp._knots, float(x))
