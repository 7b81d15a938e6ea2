import torch
from torch import Tensor


def evaluate_horner(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate ascending coefficients at points using Horner's method.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,).
    x : Tensor
        Evaluation points, any shape. Points are used as given; callers
        apply any shift beforehand.

    Returns
    -------
    Tensor
        Values, same shape as ``x``. All NaN when ``coeffs`` is empty.

    Examples
    --------
    >>> evaluate_horner(torch.tensor([1.0, 2.0, 3.0]), torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(dtype)
    x = x.to(dtype)

    n = coeffs.shape[-1]

    if n == 0:
        return torch.full_like(x, float("nan"))

    # b_{n-1} = c_{n-1}, b_k = c_k + x * b_{k+1}
    result = torch.zeros_like(x) + coeffs[n - 1]
    for k in range(n - 2, -1, -1):
        result = result * x + coeffs[k]

    return result
