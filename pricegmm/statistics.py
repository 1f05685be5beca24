"""Decision statistics derived from the mixture CDF, plus Monte Carlo summaries."""
from __future__ import annotations

from dataclasses import dataclass
import math

import torch

from .config import DEFAULT_CONFIG, MixtureConfig
from .mixture import mixture_cdf


def percentile(price: float, *, config: MixtureConfig = DEFAULT_CONFIG) -> float:
    """Percentage of historical prices expected below ``price``."""
    return mixture_cdf(price, config=config) * 100.0


def probability_strictly_above(target_price: float, *, config: MixtureConfig = DEFAULT_CONFIG) -> float:
    """Percentage chance that one fresh draw exceeds ``target_price``."""
    return (1.0 - mixture_cdf(target_price, config=config)) * 100.0


def probability_above_with_trials(
    target_price: float,
    trials_per_period: int,
    *,
    config: MixtureConfig = DEFAULT_CONFIG,
) -> float:
    """Percentage chance that at least one of ``trials_per_period`` i.i.d. draws exceeds the target.

    ``trials_per_period`` is trusted to be a positive integer.
    """
    single = 1.0 - mixture_cdf(target_price, config=config)
    at_least_one = 1.0 - (1.0 - single) ** trials_per_period
    return at_least_one * 100.0


def expected_periods_to_wait(
    target_price: float,
    trials_per_period: int = 1,
    *,
    config: MixtureConfig = DEFAULT_CONFIG,
) -> float:
    """Geometric-distribution mean number of periods until a draw beats the target.

    Returns ``math.inf`` when the per-period probability has saturated to zero.
    """
    per_period = probability_above_with_trials(target_price, trials_per_period, config=config) / 100.0
    if per_period <= 0:
        return math.inf
    return 1.0 / per_period


@dataclass
class MonteCarloSummary:
    mean: float
    standard_deviation: float
    quantile_05: float
    quantile_95: float
    confidence_interval: tuple[float, float]


def summarize_samples(prices: torch.Tensor) -> MonteCarloSummary:
    """Mean, spread, 5th/95th quantiles and 95% CI of the mean for sampled prices."""
    if prices.numel() < 2:
        raise ValueError("At least two samples are required for a summary.")
    prices = prices.to(dtype=torch.float64)
    mean = prices.mean()
    std = prices.std(unbiased=True)
    quantiles = torch.quantile(
        prices,
        torch.tensor([0.05, 0.95], device=prices.device, dtype=prices.dtype),
    )
    stderr = std / math.sqrt(prices.numel())
    ci_low = mean - 1.96 * stderr
    ci_high = mean + 1.96 * stderr
    return MonteCarloSummary(
        mean=float(mean.cpu()),
        standard_deviation=float(std.cpu()),
        quantile_05=float(quantiles[0].cpu()),
        quantile_95=float(quantiles[1].cpu()),
        confidence_interval=(float(ci_low.cpu()), float(ci_high.cpu())),
    )
