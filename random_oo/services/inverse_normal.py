"""Inverse of the standard normal cumulative distribution function.

Uses Peter J. Acklam's minimax rational approximation. The approximation
splits (0, 1) at ``P_LOW`` and ``P_HIGH``: both tails are rational functions
of ``sqrt(-2 log p)``, the central region a rational function of
``(p - 0.5)**2``. The relative error is below 1.15e-9 on the whole interval.
"""

from __future__ import annotations

import math

import numpy as np

from random_oo.core.exceptions import InvalidArgumentError

# Central region numerator
A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)

# Central region denominator
B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)

# Tail numerator
C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)

# Tail denominator
D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def _tail(q: float) -> float:
    return (((((C[0] * q + C[1]) * q + C[2]) * q + C[3]) * q + C[4]) * q + C[5]) / (
        (((D[0] * q + D[1]) * q + D[2]) * q + D[3]) * q + 1
    )


def ltqnorm(p: float) -> float:
    """Lower tail quantile of the standard normal distribution.

    Returns an approximation of the x satisfying p = Pr{Z <= x} for a
    standard normal Z. ``p`` must lie strictly inside (0, 1); it is not
    checked here.
    """
    if p < P_LOW:
        return _tail(math.sqrt(-2 * math.log(p)))

    if P_HIGH < p:
        return -_tail(math.sqrt(-2 * math.log(1 - p)))

    q = p - 0.5
    r = q * q
    return (((((A[0] * r + A[1]) * r + A[2]) * r + A[3]) * r + A[4]) * r + A[5]) * q / (
        ((((B[0] * r + B[1]) * r + B[2]) * r + B[3]) * r + B[4]) * r + 1
    )


def inverse_normal_cdf(p: float) -> float:
    """Inverse CDF of the standard normal distribution.

    The lower half of (0, 1) is evaluated directly and the upper half by
    symmetry as ``-ltqnorm(1 - p)``, so results for p and 1 - p are exact
    negatives of each other.

    Args:
        p: Probability strictly between 0 and 1

    Returns:
        The standard normal quantile for p

    Raises:
        InvalidArgumentError: If p is not a number in the open interval (0, 1)
    """
    if isinstance(p, bool) or not isinstance(p, (int, float, np.integer, np.floating)):
        raise InvalidArgumentError("inverse_normal_cdf", f"p must be a number, got {p!r}")
    p = float(p)
    if not 0 < p < 1:
        raise InvalidArgumentError("inverse_normal_cdf", f"p must be in (0, 1), got {p}")

    if p <= 0.5:
        return ltqnorm(p)
    return -ltqnorm(1 - p)
