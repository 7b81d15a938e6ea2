"""Power-basis polynomials with an evaluation center.

Data Types
----------
Polynomial
    Coefficients in ascending order about a center ``x0``.

Functions
---------
polynomial
    Create a polynomial from coefficients.
polynomial_degree
    Formal degree, ``len(coeffs) - 1``.
polynomial_trimmed_degree
    Degree ignoring trailing coefficients with magnitude ``<= tol``.
polynomial_trim
    Drop trailing coefficients with magnitude ``<= tol``.
polynomial_derivative
    Derivative of any order.
polynomial_evaluate
    Evaluate at query points.
polynomial_equal
    Compare two polynomials.
evaluate_horner
    Horner evaluation of a coefficient tensor.

Exceptions
----------
PolynomialError
    Base exception for polynomial operations.
"""

from ._polynomial import (
    Polynomial,
    evaluate_horner,
    polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_trim,
    polynomial_trimmed_degree,
)
from ._polynomial_error import PolynomialError

__all__ = [
    "Polynomial",
    "PolynomialError",
    "evaluate_horner",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_trim",
    "polynomial_trimmed_degree",
]
