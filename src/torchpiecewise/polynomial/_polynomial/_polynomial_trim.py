from ._polynomial import Polynomial
from ._polynomial_trimmed_degree import polynomial_trimmed_degree


def polynomial_trim(p: Polynomial, tol: float = 0.0) -> Polynomial:
    """Remove trailing near-zero coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float
        Tolerance for considering coefficient as zero.

    Returns
    -------
    Polynomial
        Polynomial with coefficients ``0..polynomial_trimmed_degree(p, tol)``
        and the same center. An all-zero polynomial keeps a single zero
        coefficient; a polynomial without coefficients stays empty.
    """
    degree = polynomial_trimmed_degree(p, tol)

    return Polynomial(coeffs=p.coeffs[: degree + 1], x0=p.x0)
