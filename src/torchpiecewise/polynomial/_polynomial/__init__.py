from ._evaluate_horner import evaluate_horner
from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_trim import polynomial_trim
from ._polynomial_trimmed_degree import polynomial_trimmed_degree

__all__ = [
    "Polynomial",
    "evaluate_horner",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_trim",
    "polynomial_trimmed_degree",
]
