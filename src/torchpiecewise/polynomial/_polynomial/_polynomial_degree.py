from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1, so -1 for a polynomial without
        coefficients.

    Notes
    -----
    This returns the formal degree (len(coeffs) - 1), not the actual degree
    which would require checking for trailing zeros. Use
    polynomial_trimmed_degree if you need the actual degree.
    """
    return p.coeffs.shape[-1] - 1
