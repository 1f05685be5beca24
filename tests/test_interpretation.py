"""Tests for qualitative labels"""

import math

import pytest

from pricegmm.interpretation import (
    DEFAULT_THRESHOLDS,
    InterpretationThresholds,
    format_periods,
    interpret_buy,
    recommend_sell,
    wait_zone,
)


class TestThresholds:
    """Test the shared threshold configuration"""

    def test_defaults(self):
        assert (DEFAULT_THRESHOLDS.great_buy, DEFAULT_THRESHOLDS.good_buy, DEFAULT_THRESHOLDS.average_buy) == (
            25.0,
            50.0,
            75.0,
        )
        assert (DEFAULT_THRESHOLDS.worth_waiting, DEFAULT_THRESHOLDS.borderline) == (2.0, 5.0)
        assert DEFAULT_THRESHOLDS.display_cap == 100.0

    def test_unordered_buy_thresholds_rejected(self):
        with pytest.raises(ValueError):
            InterpretationThresholds(great_buy=60.0)

    def test_unordered_wait_thresholds_rejected(self):
        with pytest.raises(ValueError):
            InterpretationThresholds(worth_waiting=6.0)


class TestInterpretBuy:
    """Test percentile bucketing"""

    @pytest.mark.parametrize(
        "value,text,tone",
        [
            (10.0, "Great buy!", "success"),
            (24.99, "Great buy!", "success"),
            (25.0, "Good buy!", "success"),
            (49.0, "Good buy!", "success"),
            (50.0, "Average buy.", "warning"),
            (74.9, "Average buy.", "warning"),
            (75.0, "Poor buy.", "danger"),
            (99.0, "Poor buy.", "danger"),
        ],
    )
    def test_buckets(self, value, text, tone):
        verdict = interpret_buy(value)
        assert verdict.text == text
        assert verdict.tone == tone

    def test_descriptions_follow_thresholds(self):
        assert "bottom 25%" in interpret_buy(5.0).description
        assert "top 25%" in interpret_buy(90.0).description


class TestSellRecommendation:
    """Test wait-time advice"""

    @pytest.mark.parametrize(
        "days,text",
        [
            (1.2, "Might be worth waiting!"),
            (2.0, "Borderline - your call"),
            (4.9, "Borderline - your call"),
            (5.0, "Sell now! Not worth waiting"),
            (math.inf, "Sell now! Not worth waiting"),
        ],
    )
    def test_recommendations(self, days, text):
        assert recommend_sell(days).text == text

    @pytest.mark.parametrize(
        "days,zone",
        [(0.5, "Worth waiting"), (2.0, "Borderline"), (5.0, "Sell now"), (100.0, "Sell now")],
    )
    def test_zones(self, days, zone):
        assert wait_zone(days) == zone


class TestFormatPeriods:
    """Test display formatting of wait times"""

    def test_below_cap(self):
        assert format_periods(3.14159) == "3.1"

    def test_at_cap(self):
        assert format_periods(100.0) == "100+"

    def test_infinite(self):
        assert format_periods(math.inf) == "100+"
