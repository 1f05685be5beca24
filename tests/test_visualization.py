"""Tests for chart construction"""

import matplotlib.pyplot as plt
import pytest

from pricegmm.interpretation import InterpretationThresholds, wait_zone
from pricegmm.visualization import plot_distribution, plot_sample_histogram, plot_wait_times


def _span_top(patch) -> float:
    vertices = patch.get_path().transformed(patch.get_patch_transform()).vertices
    return float(vertices[:, 1].max())


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotDistribution:
    """Test the price distribution chart"""

    def test_buy_only(self):
        fig, ax = plot_distribution(2000.0)
        assert ax.get_xlabel() == "Price"
        assert len(ax.lines) == 2
        assert fig is ax.figure

    def test_buy_and_sell_with_profit_zone(self):
        _, ax = plot_distribution(2000.0, 2600.0)
        assert len(ax.lines) == 3
        assert len(ax.patches) == 1

    def test_sell_below_buy_has_no_profit_zone(self):
        _, ax = plot_distribution(2600.0, 2000.0)
        assert len(ax.patches) == 0

    def test_draws_on_existing_axes(self):
        fig, ax = plt.subplots()
        out_fig, out_ax = plot_distribution(2000.0, ax=ax)
        assert out_ax is ax
        assert out_fig is fig


class TestPlotWaitTimes:
    """Test the wait-time chart"""

    def test_zones_and_curve(self):
        _, ax = plot_wait_times(2000.0, 2)
        assert ax.get_ylim() == (0.0, 100.0)
        assert len(ax.patches) == 3
        assert "2 price checks per day" in ax.get_title()

    def test_band_labels_come_from_wait_zones(self):
        _, ax = plot_wait_times(2000.0)
        labels = [text.get_text() for text in ax.get_legend().get_texts()]
        assert labels == [wait_zone(0.0), wait_zone(2.0), wait_zone(5.0)]
        assert labels == ["Worth waiting", "Borderline", "Sell now"]

    def test_bands_follow_custom_thresholds(self):
        thresholds = InterpretationThresholds(worth_waiting=3.0, borderline=8.0, display_cap=40.0)
        _, ax = plot_wait_times(2000.0, thresholds=thresholds)
        assert ax.get_ylim() == (0.0, 40.0)
        tops = sorted(_span_top(patch) for patch in ax.patches)
        assert tops == pytest.approx([3.0, 8.0, 40.0])


class TestPlotSampleHistogram:
    """Test the sampled-price histogram"""

    def test_histogram(self, sampler):
        _, ax = plot_sample_histogram(sampler.sample_prices(500), bins=20)
        assert len(ax.patches) == 20
