from torch import Tensor

from ._piecewise_polynomial_error import PiecewisePolynomialError


class BreakpointOrderError(PiecewisePolynomialError):
    """Raised when breakpoints are not strictly increasing.

    Attributes
    ----------
    breakpoints : Tensor
        The rejected breakpoints.
    """

    def __init__(self, breakpoints: Tensor):
        self.breakpoints = breakpoints

        super().__init__(
            f"Breakpoints must be strictly increasing, got "
            f"{breakpoints.tolist()}"
        )
