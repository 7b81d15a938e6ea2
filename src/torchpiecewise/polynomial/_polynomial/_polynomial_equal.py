import torch

from ._polynomial import Polynomial


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 0.0,
) -> bool:
    """Check polynomial equality within tolerance.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison.

    Returns
    -------
    bool
        True if both centers match and every coefficient, after padding the
        shorter polynomial with zeros, differs by at most ``tol``. Two
        polynomials without coefficients are equal; an empty polynomial
        never equals a non-empty one.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    if (n_p == 0) != (n_q == 0):
        return False

    if not bool(p.x0 == q.x0):
        return False

    # Pad to same length
    dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(dtype)
    q_coeffs = q_coeffs.to(dtype)

    if n_p < n_q:
        p_coeffs = torch.nn.functional.pad(p_coeffs, [0, n_q - n_p])
    elif n_q < n_p:
        q_coeffs = torch.nn.functional.pad(q_coeffs, [0, n_p - n_q])

    return bool(((p_coeffs - q_coeffs).abs() <= tol).all())
