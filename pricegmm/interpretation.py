"""Qualitative labels for percentiles and wait times.

The thresholds live in a single named configuration shared by every view so
the buy bucketing and the wait-time zones cannot drift apart.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InterpretationThresholds:
    great_buy: float = 25.0
    good_buy: float = 50.0
    average_buy: float = 75.0
    worth_waiting: float = 2.0
    borderline: float = 5.0
    display_cap: float = 100.0

    def __post_init__(self) -> None:
        if not self.great_buy < self.good_buy < self.average_buy:
            raise ValueError("Buy percentile thresholds must be strictly increasing.")
        if not 0 < self.worth_waiting < self.borderline < self.display_cap:
            raise ValueError("Wait-time thresholds must be positive, increasing and below the display cap.")


DEFAULT_THRESHOLDS = InterpretationThresholds()


@dataclass(frozen=True)
class Interpretation:
    text: str
    description: str
    tone: str


def interpret_buy(percentile: float, thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS) -> Interpretation:
    if percentile < thresholds.great_buy:
        return Interpretation("Great buy!", f"This is in the bottom {thresholds.great_buy:.0f}% of prices.", "success")
    if percentile < thresholds.good_buy:
        return Interpretation("Good buy!", "This is below average.", "success")
    if percentile < thresholds.average_buy:
        return Interpretation("Average buy.", "Consider waiting for better.", "warning")
    top = 100.0 - thresholds.average_buy
    return Interpretation("Poor buy.", f"This is in the top {top:.0f}% of prices.", "danger")


def recommend_sell(
    expected_periods: float,
    thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS,
) -> Interpretation:
    if expected_periods < thresholds.worth_waiting:
        return Interpretation("Might be worth waiting!", "A better price should show up soon.", "success")
    if expected_periods < thresholds.borderline:
        return Interpretation("Borderline - your call", "A better price is a few days away.", "warning")
    return Interpretation("Sell now! Not worth waiting", "The current offer is already quite good.", "danger")


def wait_zone(periods: float, thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS) -> str:
    if periods >= thresholds.borderline:
        return "Sell now"
    if periods >= thresholds.worth_waiting:
        return "Borderline"
    return "Worth waiting"


def format_periods(periods: float, thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS) -> str:
    """One decimal below the display cap; infinite or capped waits render as ``100+``."""
    if periods >= thresholds.display_cap:
        return f"{thresholds.display_cap:.0f}+"
    return f"{periods:.1f}"
