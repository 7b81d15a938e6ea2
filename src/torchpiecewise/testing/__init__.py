"""Testing helpers for torchpiecewise.

Example usage:

    import hypothesis

    from torchpiecewise.testing.strategies import (
        piecewise_polynomials,
        query_points,
    )

    @hypothesis.given(piecewise_polynomials(), query_points())
    def test_length(pp, x):
        assert pp(x).shape == x.shape
"""

from . import strategies

__all__ = [
    "strategies",
]
