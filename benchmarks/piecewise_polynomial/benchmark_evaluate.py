"""Benchmark piecewise polynomial evaluation.

Compares sorted queries (one search per segment crossed) with shuffled
queries (one search per run) and with a per-point baseline that searches the
full breakpoint list for every query point.
"""

import time

import torch

from torchpiecewise.piecewise_polynomial import (
    PiecewisePolynomial,
    piecewise_polynomial,
)


def build(n_segments: int, degree: int = 3) -> PiecewisePolynomial:
    """Random piecewise polynomial on [0, 1] with uniform breakpoints."""
    knots = torch.linspace(0.0, 1.0, n_segments + 1, dtype=torch.float64)
    coeffs = torch.randn(n_segments, degree + 1, dtype=torch.float64)

    return piecewise_polynomial(list(coeffs), knots)


def benchmark_evaluate(
    pp: PiecewisePolynomial,
    x: torch.Tensor,
    n_iterations: int = 5,
) -> float:
    """Average time per evaluation in milliseconds."""
    # Warmup
    _ = pp(x)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = pp(x)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_pointwise(
    pp: PiecewisePolynomial,
    x: torch.Tensor,
    n_iterations: int = 1,
) -> float:
    """Average time in milliseconds evaluating every point on its own."""
    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = torch.stack([pp.evaluate(v) for v in x])

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run evaluation benchmarks across segment counts."""
    n_points = 20_000
    segment_counts = [10, 100, 1000]

    print("Piecewise Polynomial Evaluation Benchmark")
    print("=" * 70)
    print(
        f"{'Segments':>8} {'Sorted (ms)':>16} {'Shuffled (ms)':>16} {'Pointwise (ms)':>16}"
    )
    print("-" * 70)

    for n_segments in segment_counts:
        pp = build(n_segments)

        x_sorted = torch.linspace(0.0, 1.0, n_points, dtype=torch.float64)
        x_shuffled = x_sorted[torch.randperm(n_points)]

        t_sorted = benchmark_evaluate(pp, x_sorted)
        t_shuffled = benchmark_evaluate(pp, x_shuffled)
        t_pointwise = benchmark_pointwise(pp, x_sorted[:2000]) * (
            n_points / 2000
        )

        print(
            f"{n_segments:>8} {t_sorted:>16.2f} {t_shuffled:>16.2f} {t_pointwise:>16.2f}"
        )

    print("=" * 70)
    print("Pointwise times are extrapolated from 2000 points.")


if __name__ == "__main__":
    main()
