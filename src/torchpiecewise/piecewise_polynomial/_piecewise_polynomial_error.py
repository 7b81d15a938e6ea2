class PiecewisePolynomialError(Exception):
    """Base exception for piecewise polynomial operations."""

    pass
