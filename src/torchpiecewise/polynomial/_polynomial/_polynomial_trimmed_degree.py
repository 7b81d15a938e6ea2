import torch

from ._polynomial import Polynomial


def polynomial_trimmed_degree(p: Polynomial, tol: float = 0.0) -> int:
    """Return degree ignoring trailing near-zero coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float
        Coefficients with absolute value ``<= tol`` count as zero.

    Returns
    -------
    int
        Index of the highest coefficient with absolute value ``> tol``.
        0 if every coefficient is within tolerance, -1 if ``p`` has no
        coefficients at all.

    Raises
    ------
    ValueError
        If tol is negative.

    Examples
    --------
    >>> polynomial_trimmed_degree(polynomial([1.0, 1.0, 1e-15]), tol=1e-15)
    1
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    coeffs = p.coeffs
    n = coeffs.shape[-1]

    if n == 0:
        return -1

    mask = coeffs.abs() > tol
    if not mask.any():
        # All zeros is the zero polynomial of degree 0
        return 0

    indices = torch.arange(n, device=coeffs.device)
    return int(indices[mask].max().item())
