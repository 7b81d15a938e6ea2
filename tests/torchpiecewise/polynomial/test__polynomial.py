"""Tests for core polynomial operations."""

import math

import numpy as np
import pytest
import torch
from numpy.polynomial import polynomial as np_polynomial

from torchpiecewise.polynomial import (
    Polynomial,
    PolynomialError,
    evaluate_horner,
    polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_trim,
    polynomial_trimmed_degree,
)


def _coeffs(values):
    return polynomial(torch.tensor(values, dtype=torch.float64))


class TestPolynomialConstructor:
    """Tests for polynomial() constructor."""

    def test_from_list(self):
        """Coefficients from a Python list."""
        p = polynomial([1.0, 2.0, 3.0])
        assert isinstance(p, Polynomial)
        torch.testing.assert_close(p.coeffs, torch.tensor([1.0, 2.0, 3.0]))

    def test_empty_allowed(self):
        """Empty coefficients describe an undefined polynomial."""
        p = polynomial([])
        assert p.coeffs.shape == (0,)

    def test_default_center(self):
        """x0 defaults to zero."""
        p = polynomial([1.0])
        assert p.x0.item() == 0.0

    def test_center_matches_dtype(self):
        """x0 is stored with the coefficient dtype."""
        p = polynomial(torch.tensor([1.0], dtype=torch.float64), x0=3.0)
        assert p.x0.dtype == torch.float64
        assert p.x0.dim() == 0
        assert p.x0.item() == 3.0

    def test_integer_coefficients_cast(self):
        """Integer coefficients are cast to the default float dtype."""
        p = polynomial([1, 2, 3])
        assert p.coeffs.dtype == torch.get_default_dtype()

    def test_preserves_dtype(self):
        """Dtype is preserved."""
        p = polynomial(torch.tensor([1.0, 2.0], dtype=torch.float64))
        assert p.coeffs.dtype == torch.float64

    def test_scalar_is_constant(self):
        """A 0-dim tensor is the constant polynomial."""
        p = polynomial(torch.tensor(2.0))
        assert p.coeffs.shape == (1,)

    def test_batched_raises(self):
        """Two-dimensional coefficients raise error."""
        with pytest.raises(PolynomialError):
            polynomial(torch.zeros(2, 3))


class TestPolynomialDegree:
    """Tests for polynomial_degree and polynomial_trimmed_degree."""

    def test_degree(self):
        assert polynomial_degree(_coeffs([1.0, 2.0, 3.0])) == 2
        assert _coeffs([1.0]).degree == 0

    def test_degree_empty(self):
        """Empty polynomial has degree -1."""
        assert polynomial([]).degree == -1

    def test_trimmed_degree(self):
        assert polynomial_trimmed_degree(_coeffs([])) == -1
        assert polynomial_trimmed_degree(_coeffs([1.0])) == 0
        assert polynomial_trimmed_degree(_coeffs([1.0, 0.0])) == 0
        assert polynomial_trimmed_degree(_coeffs([1.0, 1.0])) == 1

    def test_trimmed_degree_tolerance(self):
        """Coefficients equal to tol are trimmed."""
        p = _coeffs([1.0, 1.0, 1e-15])
        assert p.trimmed_degree(tol=1e-15) == 1
        assert p.trimmed_degree(tol=2e-15) == 1
        assert p.trimmed_degree() == 2

    def test_trimmed_degree_all_zero(self):
        """All-zero polynomial trims to degree 0, not -1."""
        assert _coeffs([0.0, 0.0, 0.0]).trimmed_degree() == 0

    def test_trimmed_degree_negative_tol_raises(self):
        with pytest.raises(ValueError):
            _coeffs([1.0]).trimmed_degree(tol=-1.0)


class TestPolynomialTrim:
    """Tests for polynomial_trim."""

    def test_trim(self):
        torch.testing.assert_close(
            polynomial_trim(_coeffs([1.0, 0.0])).coeffs,
            torch.tensor([1.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            polynomial_trim(_coeffs([1.0, 1.0])).coeffs,
            torch.tensor([1.0, 1.0], dtype=torch.float64),
        )

    def test_trim_empty(self):
        """Empty polynomial stays empty."""
        assert polynomial_trim(_coeffs([])).coeffs.shape == (0,)

    def test_trim_tolerance(self):
        p = _coeffs([1.0, 1.0, 2e-15])
        assert p.trimmed(tol=1e-15).coeffs.tolist() == [1.0, 1.0, 2e-15]

        q = _coeffs([1.0, 1.0, 1e-15])
        assert q.trimmed(tol=1e-15).coeffs.tolist() == [1.0, 1.0]

    def test_trim_all_zero(self):
        """All-zero polynomial keeps one zero coefficient."""
        assert _coeffs([0.0, 0.0]).trimmed().coeffs.tolist() == [0.0]

    def test_trim_preserves_center(self):
        p = polynomial([1.0, 0.0], x0=2.5)
        assert p.trimmed().x0.item() == 2.5
        assert polynomial([], x0=2.5).trimmed().x0.item() == 2.5


class TestPolynomialDerivative:
    """Tests for polynomial_derivative."""

    @pytest.mark.parametrize(
        "coeffs, order, expected",
        [
            ([], 1, []),
            ([1.0], 1, [0.0]),
            ([1.0, 0.0], 1, [0.0]),
            ([1.0, 1.0], 1, [1.0]),
            ([1.0, 2.0, 3.0], 1, [2.0, 6.0]),
            ([1.0, 2.0, 3.0], 2, [6.0]),
            ([1.0, 2.0, 3.0], 3, [0.0]),
            ([1.0, 2.0, 3.0], 4, [0.0]),
            ([1.0, 2.0, 0.0], 1, [2.0]),
            ([0.0, 0.0, 0.0], 1, [0.0]),
        ],
    )
    def test_derivative(self, coeffs, order, expected):
        result = polynomial_derivative(_coeffs(coeffs), order)
        assert result.coeffs.tolist() == expected

    def test_order_zero_is_identity(self):
        p = _coeffs([1.0, 2.0, 3.0])
        assert polynomial_derivative(p, 0) is p

    def test_matches_numpy(self):
        """Compare with numpy.polynomial.polynomial.polyder."""
        c = [0.5, -1.0, 2.0, 3.5, -0.25]
        for order in range(1, 4):
            result = _coeffs(c).derivative(order)
            expected = np_polynomial.polyder(np.array(c), m=order)
            np.testing.assert_allclose(result.coeffs.numpy(), expected)

    def test_preserves_center(self):
        """d/dx p(x - x0) is p'(x - x0)."""
        p = polynomial(
            torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64), x0=1.0
        )
        dp = p.derivative()
        assert dp.x0.item() == 1.0
        assert dp.evaluate(2.0).item() == 8.0

    def test_negative_order_raises(self):
        with pytest.raises(ValueError):
            _coeffs([1.0]).derivative(-1)


class TestPolynomialEvaluate:
    """Tests for polynomial_evaluate and evaluate_horner."""

    def test_evaluate(self):
        p = _coeffs([1.0, 2.0, 3.0])
        result = polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
        assert result.tolist() == [1.0, 6.0, 17.0]

    def test_evaluate_cubic(self):
        assert _coeffs([1.0, 2.0, 3.0, 4.0]).evaluate([1.0, 2.0]).tolist() == [
            10.0,
            49.0,
        ]

    def test_evaluate_shifted(self):
        """x0 shifts the evaluation center."""
        p = polynomial(torch.tensor([2.0, 3.0], dtype=torch.float64), x0=3.0)
        assert p.evaluate([1.0, 2.0]).tolist() == [-4.0, -1.0]

    def test_evaluate_empty_is_nan(self):
        """Empty polynomial evaluates to NaN with matching length."""
        result = polynomial([]).evaluate(torch.tensor([0.0, 1.0, 2.0]))
        assert result.shape == (3,)
        assert torch.isnan(result).all()

    def test_evaluate_scalar(self):
        """Scalar input gives a 0-dim result."""
        result = _coeffs([1.0, 2.0, 3.0]).evaluate(2.0)
        assert result.dim() == 0
        assert result.item() == 17.0

    def test_evaluate_empty_query(self):
        result = _coeffs([1.0, 2.0]).evaluate(torch.tensor([]))
        assert result.shape == (0,)

    def test_evaluate_preserves_shape(self):
        x = torch.arange(6, dtype=torch.float64).reshape(2, 3)
        result = _coeffs([1.0, 1.0])(x)
        torch.testing.assert_close(result, x + 1.0)

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_evaluate_dtype(self, dtype):
        p = polynomial(torch.tensor([1.0, 2.0, 3.0], dtype=dtype))
        result = p.evaluate(torch.tensor([0.0, 1.0, 2.0], dtype=dtype))
        assert result.dtype == dtype
        torch.testing.assert_close(
            result, torch.tensor([1.0, 6.0, 17.0], dtype=dtype)
        )

    def test_evaluate_integer_query(self):
        result = _coeffs([1.0, 2.0]).evaluate(torch.tensor([1, 2]))
        assert result.dtype == torch.float64
        assert result.tolist() == [3.0, 5.0]

    def test_matches_numpy(self):
        """Compare with numpy.polynomial.polynomial.polyval."""
        c = [0.5, -1.0, 2.0, 3.5, -0.25]
        x = np.linspace(-3.0, 3.0, 50)
        result = polynomial(torch.tensor(c, dtype=torch.float64), x0=0.75)(
            torch.from_numpy(x)
        )
        expected = np_polynomial.polyval(x - 0.75, c)
        np.testing.assert_allclose(
            result.numpy(), expected, rtol=1e-12, atol=1e-12
        )

    def test_horner_empty(self):
        result = evaluate_horner(torch.tensor([]), torch.tensor([1.0, 2.0]))
        assert result.shape == (2,)
        assert all(math.isnan(v) for v in result.tolist())

    def test_horner_does_not_shift(self):
        result = evaluate_horner(
            torch.tensor([2.0, 3.0]), torch.tensor([-2.0, -1.0])
        )
        assert result.tolist() == [-4.0, -1.0]

    def test_autograd(self):
        """Gradients flow through Horner evaluation."""
        coeffs = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        x = torch.tensor([2.0], dtype=torch.float64, requires_grad=True)
        polynomial(coeffs).evaluate(x).sum().backward()
        assert x.grad.item() == 14.0


class TestPolynomialEqual:
    """Tests for polynomial_equal."""

    def test_equal(self):
        assert polynomial_equal(_coeffs([1.0, 2.0]), _coeffs([1.0, 2.0]))

    def test_trailing_zeros_equal(self):
        assert polynomial_equal(_coeffs([1.0, 0.0]), _coeffs([1.0]))

    def test_different_center(self):
        p = polynomial([1.0, 2.0], x0=1.0)
        q = polynomial([1.0, 2.0], x0=0.0)
        assert not polynomial_equal(p, q)

    def test_empty(self):
        assert polynomial_equal(polynomial([]), polynomial([]))
        assert not polynomial_equal(polynomial([]), polynomial([0.0]))

    def test_tolerance(self):
        p = _coeffs([1.0, 2.0])
        q = _coeffs([1.0, 2.0 + 1e-9])
        assert not polynomial_equal(p, q)
        assert polynomial_equal(p, q, tol=1e-8)

    def test_derivative_of_empty_is_equal(self):
        """Derivative of an empty polynomial is observably the same."""
        p = polynomial([], x0=1.0)
        assert polynomial_equal(p.derivative(3), p)


class TestPolynomialErrors:
    """Test the polynomial exception."""

    def test_polynomial_error_message(self):
        with pytest.raises(PolynomialError, match="one-dimensional"):
            polynomial(torch.zeros(2, 2))
