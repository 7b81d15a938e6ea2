from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from ._breakpoint_search import locate_interval

if TYPE_CHECKING:
    from ._piecewise_polynomial import PiecewisePolynomial


def piecewise_polynomial_evaluate(
    pp: PiecewisePolynomial,
    x: Union[Tensor, Sequence[float], float],
) -> Tensor:
    """
    Evaluate a piecewise polynomial at query points.

    Query points are scanned in order and grouped into runs of consecutive
    points that fall in the same segment; each run is evaluated with one
    call to that segment's polynomial. Sorted or clustered queries therefore
    need one segment search per segment crossed rather than one per point.

    Parameters
    ----------
    pp : PiecewisePolynomial
        Piecewise polynomial to evaluate.
    x : Tensor, sequence of float or float
        Query points, any shape and any order. A 0-dim input gives a 0-dim
        result.

    Returns
    -------
    y : Tensor
        Values, same shape as ``x``. NaN where a point lies outside
        ``[breakpoints[0], breakpoints[-1]]``, is NaN, or ``pp`` is empty.

    Notes
    -----
    After a run ends, the next point is located with a full search unless
    the input is locally ascending, in which case only the breakpoints from
    the previous segment's right end onward are searched.

    Examples
    --------
    >>> pp = piecewise_polynomial([[0.0], [1.0]], [0.0, 1.0, 2.0])
    >>> piecewise_polynomial_evaluate(pp, torch.tensor([-1.0, 0.0, 1.0, 2.0, 3.0]))
    tensor([nan, 0., 1., 1., nan])
    """
    x = torch.as_tensor(x, device=pp.breakpoints.device)

    # Promote to common dtype (integer queries evaluate in floating point)
    x = x.to(torch.promote_types(x.dtype, pp._dtype))

    query_shape = x.shape
    x_flat = x.reshape(-1)

    if x_flat.shape[0] == 0:
        return x_flat.reshape(query_shape)

    if pp.n_segments == 0:
        return torch.full_like(x, float("nan"))

    knots = pp._knots
    points = x_flat.tolist()
    last = len(knots) - 1

    interval = locate_interval(knots, points[0])
    run_start = 0
    values: List[Tensor] = []

    for i in range(1, len(points)):
        xi = points[i]

        # Same segment: extend the run without searching
        if interval is not None:
            left, right = interval
            if knots[left] <= xi < knots[right] or (
                right == last and xi == knots[last]
            ):
                continue

        values.append(_evaluate_run(pp, interval, x_flat[run_start:i]))

        if interval is not None and xi > points[i - 1] and xi < knots[last]:
            # Ascending past the run, so xi >= knots[right]
            interval = locate_interval(knots, xi, start=interval[1])
        else:
            interval = locate_interval(knots, xi)

        run_start = i

    values.append(_evaluate_run(pp, interval, x_flat[run_start:]))

    return torch.cat(values).reshape(query_shape)


def _evaluate_run(
    pp: PiecewisePolynomial,
    interval: Optional[Tuple[int, int]],
    x: Tensor,
) -> Tensor:
    if interval is None:
        return torch.full_like(x, float("nan"))

    return pp.polynomials[interval[0]].evaluate(x).to(x.dtype)
