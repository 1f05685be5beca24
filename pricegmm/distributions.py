"""Closed-form single-Gaussian primitives."""
from __future__ import annotations

import math

# Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7.
_ERF_P = 0.3275911
_ERF_COEFFICIENTS = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)

_SQRT_TWO = math.sqrt(2.0)
_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


def normal_density(x: float, mean: float, std_dev: float) -> float:
    """Gaussian probability density at ``x``. ``std_dev`` must be positive."""
    coefficient = 1.0 / (std_dev * _SQRT_TWO_PI)
    exponent = -((x - mean) ** 2) / (2.0 * std_dev**2)
    return coefficient * math.exp(exponent)


def error_function(x: float) -> float:
    """Rational approximation of erf, evaluated on ``|x|`` and re-signed."""
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    a1, a2, a3, a4, a5 = _ERF_COEFFICIENTS
    t = 1.0 / (1.0 + _ERF_P * x)
    y = 1.0 - ((((a5 * t + a4) * t + a3) * t + a2) * t + a1) * t * math.exp(-x * x)
    return sign * y


def normal_cdf(x: float, mean: float, std_dev: float) -> float:
    """Gaussian CDF; may saturate to exactly 0.0 or 1.0 far in the tails."""
    return 0.5 * (1.0 + error_function((x - mean) / (std_dev * _SQRT_TWO)))
