from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._piecewise_polynomial import PiecewisePolynomial


def piecewise_polynomial_derivative(
    pp: PiecewisePolynomial,
    order: int = 1,
) -> PiecewisePolynomial:
    """Compute the derivative of a piecewise polynomial.

    Parameters
    ----------
    pp : PiecewisePolynomial
        Input piecewise polynomial.
    order : int
        Derivative order (default 1).

    Returns
    -------
    PiecewisePolynomial
        Every segment differentiated ``order`` times; breakpoints unchanged.
        The empty piecewise polynomial stays empty.

    Raises
    ------
    ValueError
        If order is negative.
    """
    from ._piecewise_polynomial import PiecewisePolynomial

    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    return PiecewisePolynomial(
        polynomials=tuple(p.derivative(order) for p in pp.polynomials),
        breakpoints=pp.breakpoints,
    )
