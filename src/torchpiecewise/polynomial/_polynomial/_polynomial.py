from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchpiecewise.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients about a center.

    Represents p(x) = coeffs[0] + coeffs[1]*(x - x0) + coeffs[2]*(x - x0)^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of (x - x0)^i. N may be zero, which
        describes a polynomial that is nowhere defined and evaluates to NaN.
    x0 : Tensor
        Evaluation center, a 0-dim tensor with the dtype of ``coeffs``.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        polynomial([1.0, 2.0, 3.0])

    Polynomial 2 + 3(x - 3):
        polynomial([2.0, 3.0], x0=3.0)

    Methods:
        p.degree           # polynomial_degree(p)
        p.trimmed(tol)     # polynomial_trim(p, tol)
        p.derivative(n)    # polynomial_derivative(p, n)
        p(x)               # polynomial_evaluate(p, x)
    """

    coeffs: Tensor
    x0: Tensor

    @property
    def degree(self) -> int:
        from ._polynomial_degree import polynomial_degree

        return polynomial_degree(self)

    def trimmed_degree(self, tol: float = 0.0) -> int:
        from ._polynomial_trimmed_degree import polynomial_trimmed_degree

        return polynomial_trimmed_degree(self, tol)

    def trimmed(self, tol: float = 0.0) -> "Polynomial":
        from ._polynomial_trim import polynomial_trim

        return polynomial_trim(self, tol)

    def derivative(self, order: int = 1) -> "Polynomial":
        from ._polynomial_derivative import polynomial_derivative

        return polynomial_derivative(self, order)

    def evaluate(self, x: Union[Tensor, Sequence[float], float]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __call__(self, x: Union[Tensor, Sequence[float], float]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(
    coeffs: Union[Tensor, Sequence[float]],
    x0: Union[Tensor, float] = 0.0,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in ascending order, shape (N,). May be empty.
        Non-floating input is cast to ``torch.get_default_dtype()``.
    x0 : Tensor or float
        Evaluation center (default 0).

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs has more than one dimension.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    coeffs = torch.as_tensor(coeffs)

    if coeffs.dim() > 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, got shape "
            f"{tuple(coeffs.shape)}"
        )

    if not coeffs.is_floating_point():
        coeffs = coeffs.to(torch.get_default_dtype())

    # A scalar is the constant polynomial
    coeffs = coeffs.reshape(-1)

    x0 = torch.as_tensor(x0, dtype=coeffs.dtype, device=coeffs.device)

    return Polynomial(coeffs=coeffs, x0=x0.reshape(()))
