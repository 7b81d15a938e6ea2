"""Piecewise polynomial over strictly increasing breakpoints."""

import warnings
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from torchpiecewise.polynomial import Polynomial, polynomial

from ._breakpoint_order_error import BreakpointOrderError


@dataclass(frozen=True, eq=False)
class PiecewisePolynomial:
    """Polynomial segments joined at breakpoints.

    Segment ``i`` is defined on ``[breakpoints[i], breakpoints[i + 1])``;
    the last segment also holds its right end,
    ``[breakpoints[-2], breakpoints[-1]]``. Points outside
    ``[breakpoints[0], breakpoints[-1]]`` evaluate to NaN.

    Parameters
    ----------
    polynomials : sequence of Polynomial
        One polynomial per segment. Raw coefficient sequences are accepted
        and become polynomials centered at 0.
    breakpoints : Tensor or sequence of float
        Strictly increasing, shape (len(polynomials) + 1,). Ignored when
        ``polynomials`` is empty.

    Raises
    ------
    BreakpointOrderError
        If breakpoints are not strictly increasing.
    ValueError
        If breakpoints are not one-dimensional or their count is not
        ``len(polynomials) + 1``.

    Examples
    --------
    >>> pp = PiecewisePolynomial(
    ...     polynomials=[polynomial([0.0]), polynomial([1.0])],
    ...     breakpoints=[0.0, 1.0, 2.0],
    ... )
    >>> pp(torch.tensor([-1.0, 0.0, 1.0, 2.0, 3.0]))
    tensor([nan, 0., 1., 1., nan])

    The empty piecewise polynomial is nowhere defined:

    >>> PiecewisePolynomial(polynomials=[], breakpoints=[])(42.0)
    tensor(nan)
    """

    polynomials: Tuple[Polynomial, ...]
    breakpoints: Tensor
    _knots: List[float] = field(init=False, repr=False)
    _dtype: torch.dtype = field(init=False, repr=False)

    def __post_init__(self):
        polynomials = tuple(
            p if isinstance(p, Polynomial) else polynomial(p)
            for p in self.polynomials
        )

        breakpoints = torch.as_tensor(self.breakpoints)
        if not breakpoints.is_floating_point():
            breakpoints = breakpoints.to(torch.get_default_dtype())

        if len(polynomials) == 0:
            if breakpoints.numel() > 0:
                # __post_init__ is called from the generated __init__
                _warn_ignored_breakpoints(breakpoints.numel(), stacklevel=4)

            breakpoints = breakpoints.new_empty((0,))
        else:
            if breakpoints.dim() != 1:
                raise ValueError(
                    f"breakpoints must be one-dimensional, got shape "
                    f"{tuple(breakpoints.shape)}"
                )

            if breakpoints.shape[0] != len(polynomials) + 1:
                raise ValueError(
                    f"Expected {len(polynomials) + 1} breakpoints for "
                    f"{len(polynomials)} polynomials, got "
                    f"{breakpoints.shape[0]}"
                )

            if not torch.all(breakpoints[1:] > breakpoints[:-1]):
                raise BreakpointOrderError(breakpoints)

        # Result dtype of every segment, before promotion with the query
        dtype = breakpoints.dtype
        for p in polynomials:
            dtype = torch.promote_types(dtype, p.coeffs.dtype)

        object.__setattr__(self, "polynomials", polynomials)
        object.__setattr__(self, "breakpoints", breakpoints)
        object.__setattr__(self, "_knots", breakpoints.tolist())
        object.__setattr__(self, "_dtype", dtype)

    @property
    def n_segments(self) -> int:
        """Number of polynomial segments."""
        return len(self.polynomials)

    @property
    def domain(self) -> Optional[Tuple[float, float]]:
        """Closed interval covered by the segments, or None when empty."""
        if self.n_segments == 0:
            return None

        return self.breakpoints[0].item(), self.breakpoints[-1].item()

    def interval_of(
        self, x: Union[Tensor, float]
    ) -> Optional[Tuple[int, int]]:
        from ._piecewise_polynomial_interval import (
            piecewise_polynomial_interval,
        )

        return piecewise_polynomial_interval(self, x)

    def evaluate(self, x: Union[Tensor, Sequence[float], float]) -> Tensor:
        from ._piecewise_polynomial_evaluate import (
            piecewise_polynomial_evaluate,
        )

        return piecewise_polynomial_evaluate(self, x)

    def derivative(self, order: int = 1) -> "PiecewisePolynomial":
        from ._piecewise_polynomial_derivative import (
            piecewise_polynomial_derivative,
        )

        return piecewise_polynomial_derivative(self, order)

    def __call__(self, x: Union[Tensor, Sequence[float], float]) -> Tensor:
        from ._piecewise_polynomial_evaluate import (
            piecewise_polynomial_evaluate,
        )

        return piecewise_polynomial_evaluate(self, x)


def piecewise_polynomial(
    polynomials: Sequence[Union[Polynomial, Tensor, Sequence[float]]],
    breakpoints: Union[Tensor, Sequence[float]],
) -> PiecewisePolynomial:
    """Create a piecewise polynomial from segments and breakpoints.

    Parameters
    ----------
    polynomials : sequence
        One entry per segment: a Polynomial, or ascending coefficients for a
        polynomial centered at 0.
    breakpoints : Tensor or sequence of float
        Strictly increasing, one more than the number of segments.

    Returns
    -------
    PiecewisePolynomial
        Piecewise polynomial instance.

    Raises
    ------
    BreakpointOrderError
        If breakpoints are not strictly increasing.
    ValueError
        If the number of breakpoints does not match the segments.

    Examples
    --------
    >>> pp = piecewise_polynomial([[0.0], [1.0], [2.0]], [0.0, 1.0, 3.0, 7.0])
    >>> pp(torch.arange(6) * 0.7)
    tensor([0., 0., 1., 1., 1., 2.])
    """
    polynomials = tuple(polynomials)

    if len(polynomials) == 0:
        breakpoints = torch.as_tensor(breakpoints)
        if breakpoints.numel() > 0:
            _warn_ignored_breakpoints(breakpoints.numel(), stacklevel=3)

        breakpoints = breakpoints.reshape(-1)[:0]

    return PiecewisePolynomial(
        polynomials=polynomials,
        breakpoints=breakpoints,
    )


def _warn_ignored_breakpoints(count: int, stacklevel: int) -> None:
    warnings.warn(
        f"PiecewisePolynomial has no polynomials; ignoring {count} "
        f"breakpoints.",
        stacklevel=stacklevel,
    )
