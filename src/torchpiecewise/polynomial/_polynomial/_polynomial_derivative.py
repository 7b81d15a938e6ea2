import torch

from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_trim import polynomial_trim
from ._polynomial_trimmed_degree import polynomial_trimmed_degree


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n about the same center. ``order == 0`` and
        polynomials without coefficients are returned unchanged. An order
        at or above the number of coefficients returns [0.0].

    Raises
    ------
    ValueError
        If order is negative.

    Notes
    -----
    Trailing zero coefficients are trimmed before differentiating, so
    ``[1, 2, 0]`` differentiates to ``[2]`` rather than ``[2, 0]``.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_derivative(p).coeffs  # 2 + 6x
    tensor([2., 6.])
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    coeffs = p.coeffs
    n = coeffs.shape[-1]

    if order == 0 or n == 0:
        return p

    if polynomial_trimmed_degree(p) < polynomial_degree(p):
        return polynomial_derivative(polynomial_trim(p), order)

    if order >= n:
        return Polynomial(
            coeffs=torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device),
            x0=p.x0,
        )

    for _ in range(order):
        n = coeffs.shape[-1]

        # new_coeffs[i] = (i+1) * old_coeffs[i+1]
        indices = torch.arange(1, n, device=coeffs.device, dtype=coeffs.dtype)
        coeffs = coeffs[1:] * indices

    return Polynomial(coeffs=coeffs, x0=p.x0)
