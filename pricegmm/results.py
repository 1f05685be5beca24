"""Result dataclasses for price analysis."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class ComponentAttribution:
    low_cluster_pct: float
    high_cluster_pct: float


@dataclass
class AnalysisResult:
    """Aggregates a buy price, an optional sell price and every derived statistic."""

    buy_price: float
    buy_percentile: float
    buy_probability_better: float
    low_cluster_pct: float
    high_cluster_pct: float
    trials_per_period: int = 1
    sell_price: Optional[float] = None
    sell_percentile: Optional[float] = None
    profit: Optional[float] = None
    roi: Optional[float] = None
    probability_better: Optional[float] = None
    expected_periods: Optional[float] = None

    @property
    def has_sell(self) -> bool:
        return self.sell_price is not None


@dataclass
class ChartData:
    labels: np.ndarray
    pdf_values: np.ndarray


@dataclass
class WaitTimeCurve:
    """Expected wait per target sell price, capped for display."""

    targets: np.ndarray
    periods: np.ndarray
    trials_per_period: int
