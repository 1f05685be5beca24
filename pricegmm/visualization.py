"""Visualization utilities for price analysis."""
from __future__ import annotations

from typing import Optional, Tuple

import matplotlib.pyplot as plt
import torch

from .config import DEFAULT_CONFIG, MixtureConfig
from .interpretation import DEFAULT_THRESHOLDS, InterpretationThresholds, wait_zone
from .runtime import distribution_chart_data, wait_time_curve


__all__ = (
    "plot_distribution",
    "plot_wait_times",
    "plot_sample_histogram",
)

_CURVE_COLOR = "#3b82f6"
_BUY_COLOR = "#06b6d4"
_SELL_COLOR = "#10b981"
# Shortest to longest wait.
_ZONE_COLORS = ("#ef4444", "#f59e0b", "#10b981")


def plot_distribution(
    buy_price: float,
    sell_price: Optional[float] = None,
    *,
    config: MixtureConfig = DEFAULT_CONFIG,
    ax: plt.Axes | None = None,
) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    chart = distribution_chart_data(config=config)
    ax.plot(chart.labels, chart.pdf_values, color=_CURVE_COLOR, linewidth=2)
    ax.fill_between(chart.labels, chart.pdf_values, color=_CURVE_COLOR, alpha=0.1)

    ax.axvline(buy_price, color=_BUY_COLOR, linestyle="--", linewidth=2, label=f"Buy: {buy_price:g}")
    if sell_price is not None:
        ax.axvline(sell_price, color=_SELL_COLOR, linestyle="--", linewidth=2, label=f"Sell: {sell_price:g}")
        if sell_price > buy_price:
            ax.axvspan(buy_price, sell_price, color=_SELL_COLOR, alpha=0.15)

    ax.set_xlabel("Price")
    ax.set_ylabel("Probability density")
    ax.set_title("Price distribution (Gaussian mixture)")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.2)
    return fig, ax


def plot_wait_times(
    buy_price: float,
    trials_per_period: int = 1,
    *,
    config: MixtureConfig = DEFAULT_CONFIG,
    thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS,
    ax: plt.Axes | None = None,
) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    curve = wait_time_curve(buy_price, trials_per_period, config=config, thresholds=thresholds)

    edges = (0.0, thresholds.worth_waiting, thresholds.borderline, thresholds.display_cap)
    for color, low, high in zip(_ZONE_COLORS, edges, edges[1:]):
        label = wait_zone(low, thresholds)
        ax.axhspan(low, high, color=color, alpha=0.15, label=label)

    ax.plot(curve.targets, curve.periods, color=_CURVE_COLOR, linewidth=3, marker="o", markersize=4)
    ax.set_ylim(0.0, thresholds.display_cap)
    ax.set_xlabel("Target sell price")
    ax.set_ylabel("Expected days to wait")
    title = "Expected wait time by target sell price"
    if trials_per_period > 1:
        title += f" ({trials_per_period} price checks per day)"
    ax.set_title(title)
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.2)
    return fig, ax


def plot_sample_histogram(
    samples: torch.Tensor,
    *,
    bins: int = 60,
    ax: plt.Axes | None = None,
) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    data = samples.detach().cpu().numpy()
    ax.hist(data, bins=bins, alpha=0.75, color="#1f77b4", edgecolor="black")
    ax.set_xlabel("Sampled price")
    ax.set_ylabel("Frequency")
    ax.set_title("Sampled prices (Monte Carlo)")
    ax.grid(True, alpha=0.2)
    return fig, ax
