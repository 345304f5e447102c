"""Tests for the inverse normal CDF approximation."""

from __future__ import annotations

import math

import numpy as np
import pytest
from scipy.special import ndtri

from random_oo.core.exceptions import InvalidArgumentError
from random_oo.services.inverse_normal import (
    A,
    B,
    C,
    D,
    P_HIGH,
    P_LOW,
    inverse_normal_cdf,
    ltqnorm,
)


class TestCoefficients:
    """Test the published Acklam constants."""

    def test_coefficient_counts(self):
        assert len(A) == 6
        assert len(B) == 5
        assert len(C) == 6
        assert len(D) == 4

    def test_breakpoints(self):
        assert P_LOW == 0.02425
        assert P_HIGH == 1 - 0.02425

    def test_central_leading_coefficient_is_sqrt_two_pi(self):
        """Near p = 0.5 the slope of the quantile is sqrt(2*pi)."""
        assert A[5] == pytest.approx(math.sqrt(2 * math.pi), rel=1e-8)


class TestLtqnorm:
    """Test the lower tail quantile function."""

    def test_median_is_zero(self):
        assert ltqnorm(0.5) == 0.0

    def test_known_quantiles(self):
        assert ltqnorm(0.025) == pytest.approx(-1.959963984540054, rel=1e-8)
        assert ltqnorm(0.975) == pytest.approx(1.959963984540054, rel=1e-8)
        assert ltqnorm(0.8413447460685429) == pytest.approx(1.0, rel=1e-8)

    def test_lower_tail_region(self):
        """Values below P_LOW use the tail approximation."""
        assert ltqnorm(0.001) == pytest.approx(-3.090232306167813, rel=1e-8)

    def test_upper_tail_region(self):
        """Values above P_HIGH use the negated tail approximation."""
        assert ltqnorm(0.999) == pytest.approx(3.090232306167813, rel=1e-8)

    def test_continuous_at_breakpoints(self):
        below = ltqnorm(math.nextafter(P_LOW, 0.0))
        at = ltqnorm(P_LOW)
        assert below == pytest.approx(at, rel=1e-8)

        above = ltqnorm(math.nextafter(P_HIGH, 1.0))
        at = ltqnorm(P_HIGH)
        assert above == pytest.approx(at, rel=1e-8)

    def test_extreme_lower_tail(self):
        """The zero-draw substitute still produces a finite quantile."""
        value = ltqnorm(1e-254)
        assert math.isfinite(value)
        assert -35.0 < value < -30.0

    def test_monotonic(self):
        grid = np.linspace(0.0005, 0.9995, 2001)
        values = np.array([ltqnorm(float(p)) for p in grid])
        assert np.all(np.diff(values) > 0)


class TestRelativeErrorBound:
    """Compare against scipy's inverse normal CDF."""

    @pytest.mark.parametrize(
        "grid",
        [
            np.logspace(-50, np.log10(P_LOW), 300),
            np.linspace(P_LOW, 0.49, 300),
            np.linspace(0.51, P_HIGH, 300),
            1 - np.logspace(-15, np.log10(P_LOW), 300),
        ],
        ids=["lower-tail", "central-low", "central-high", "upper-tail"],
    )
    def test_relative_error_below_bound(self, grid):
        approx = np.array([inverse_normal_cdf(float(p)) for p in grid])
        exact = ndtri(grid)
        relative_error = np.abs(approx - exact) / np.abs(exact)

        assert np.max(relative_error) < 1.15e-9


class TestInverseNormalCdf:
    """Test the checked public entry point."""

    @pytest.mark.parametrize("p", [0.01, 0.1, 0.25, 0.4, 0.49])
    def test_symmetry(self, p):
        assert inverse_normal_cdf(1 - p) == pytest.approx(-inverse_normal_cdf(p), rel=1e-9)

    def test_lower_half_matches_ltqnorm(self):
        assert inverse_normal_cdf(0.3) == ltqnorm(0.3)

    def test_upper_half_uses_symmetry(self):
        assert inverse_normal_cdf(0.7) == -ltqnorm(1 - 0.7)

    def test_accepts_numpy_scalars(self):
        assert inverse_normal_cdf(np.float64(0.5)) == 0.0

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5, float("nan")])
    def test_out_of_range_raises_error(self, p):
        with pytest.raises(InvalidArgumentError, match=r"must be in \(0, 1\)"):
            inverse_normal_cdf(p)

    def test_non_numeric_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            inverse_normal_cdf("half")

    @pytest.mark.parametrize("p", ["0.3", b"0.3", None, [0.3]])
    def test_numeric_strings_are_not_coerced(self, p):
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            inverse_normal_cdf(p)
