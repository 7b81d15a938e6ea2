from typing import Sequence, Union

import torch
from torch import Tensor

from ._evaluate_horner import evaluate_horner
from ._polynomial import Polynomial


def polynomial_evaluate(
    p: Polynomial,
    x: Union[Tensor, Sequence[float], float],
) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,) and center ``x0``.
    x : Tensor, sequence of float or float
        Evaluation points, any shape. A 0-dim input gives a 0-dim result.

    Returns
    -------
    Tensor
        Values p(x), same shape as ``x``. All NaN when ``p`` has no
        coefficients.

    Examples
    --------
    >>> p = polynomial([2.0, 3.0], x0=3.0)  # 2 + 3(x - 3)
    >>> polynomial_evaluate(p, torch.tensor([1.0, 2.0]))
    tensor([-4., -1.])
    """
    x = torch.as_tensor(x, device=p.coeffs.device)

    # Promote to common dtype (integer queries evaluate in floating point)
    dtype = torch.promote_types(p.coeffs.dtype, x.dtype)

    return evaluate_horner(p.coeffs.to(dtype), x.to(dtype) - p.x0.to(dtype))
