"""Runtime helpers shared by the CLI and the interactive wizard."""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Optional

import numpy as np
import torch

from .config import DEFAULT_CONFIG, MixtureConfig
from .interpretation import DEFAULT_THRESHOLDS, InterpretationThresholds
from .mixture import PriceSampler, component_attribution, mixture_density
from .results import AnalysisResult, ChartData, WaitTimeCurve
from .statistics import (
    expected_periods_to_wait,
    percentile,
    probability_above_with_trials,
)

logger = logging.getLogger(__name__)

CHART_STEP = 50.0
WAIT_CURVE_STEP = 100.0
WAIT_CURVE_CEILING = 5500.0


@dataclass(frozen=True)
class AnalysisContext:
    """Holds the configured sampler and model for a session."""

    config: MixtureConfig
    sampler: PriceSampler


def manual_seed_or_random(generator: torch.Generator, seed: Optional[int]) -> None:
    if seed is not None:
        generator.manual_seed(seed)
    else:
        generator.manual_seed(torch.seed())


def create_analysis_context(*, seed: Optional[int], config: MixtureConfig = DEFAULT_CONFIG) -> AnalysisContext:
    generator = torch.Generator()
    manual_seed_or_random(generator, seed)
    return AnalysisContext(config=config, sampler=PriceSampler(config=config, generator=generator))


def validate_inputs(buy_price: float, sell_price: Optional[float] = None, friends: int = 0) -> None:
    """Reject inputs the engine is not defined for."""
    if not math.isfinite(buy_price) or buy_price <= 0:
        raise ValueError("Please enter a valid buy price greater than 0")
    if sell_price is not None and (not math.isfinite(sell_price) or sell_price <= 0):
        raise ValueError("Please enter a valid sell price greater than 0")
    if friends < 0:
        raise ValueError("Number of friends cannot be negative")


def analyze(
    buy_price: float,
    sell_price: Optional[float] = None,
    friends: int = 0,
    *,
    config: MixtureConfig = DEFAULT_CONFIG,
) -> AnalysisResult:
    validate_inputs(buy_price, sell_price, friends)
    trials_per_period = 1 + int(friends)

    buy_percentile = percentile(buy_price, config=config)
    attribution = component_attribution(buy_price, config=config)
    result = AnalysisResult(
        buy_price=buy_price,
        buy_percentile=buy_percentile,
        buy_probability_better=100.0 - buy_percentile,
        low_cluster_pct=attribution.low_cluster_pct,
        high_cluster_pct=attribution.high_cluster_pct,
        trials_per_period=trials_per_period,
    )

    if sell_price is not None:
        profit = sell_price - buy_price
        result.sell_price = sell_price
        result.profit = profit
        result.roi = profit / buy_price * 100.0
        result.sell_percentile = percentile(sell_price, config=config)
        result.probability_better = probability_above_with_trials(sell_price, trials_per_period, config=config)
        result.expected_periods = expected_periods_to_wait(sell_price, trials_per_period, config=config)

    logger.debug(
        "Analysed buy=%s sell=%s trials=%d -> percentile=%.2f",
        buy_price,
        sell_price,
        trials_per_period,
        buy_percentile,
    )
    return result


def distribution_chart_data(*, config: MixtureConfig = DEFAULT_CONFIG, step: float = CHART_STEP) -> ChartData:
    """Mixture density sampled across the display range."""
    if step <= 0:
        raise ValueError("Chart step must be positive.")
    low, high = config.display_range.min, config.display_range.max
    n_points = int(math.floor((high - low) / step)) + 1
    labels = low + step * np.arange(n_points, dtype=float)
    pdf_values = np.array([mixture_density(float(x), config=config) for x in labels])
    return ChartData(labels=labels, pdf_values=pdf_values)


def wait_time_curve(
    buy_price: float,
    trials_per_period: int = 1,
    *,
    config: MixtureConfig = DEFAULT_CONFIG,
    ceiling: float = WAIT_CURVE_CEILING,
    step: float = WAIT_CURVE_STEP,
    thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS,
) -> WaitTimeCurve:
    """Expected periods to wait for each target sell price above the buy price, capped for display."""
    cap = thresholds.display_cap
    start = math.ceil(buy_price / step) * step
    targets = np.arange(start, ceiling + step / 2, step, dtype=float) if start <= ceiling else np.empty(0)
    periods = np.array(
        [min(expected_periods_to_wait(float(t), trials_per_period, config=config), cap) for t in targets],
        dtype=float,
    )
    return WaitTimeCurve(targets=targets, periods=periods, trials_per_period=trials_per_period)


def fmt(value: float) -> str:
    return f"{value:.1f}"
