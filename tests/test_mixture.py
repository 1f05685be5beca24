"""Tests for the mixture density, CDF and cluster attribution"""

import math

import pytest

from pricegmm.config import MixtureComponent, MixtureConfig
from pricegmm.distributions import normal_density
from pricegmm.mixture import component_attribution, mixture_cdf, mixture_density


class TestMixtureDensity:
    """Test the weighted PDF"""

    def test_weighted_sum(self, config):
        x = 2500.0
        expected = 0.779 * normal_density(x, 1691.0, 606.0) + 0.221 * normal_density(x, 3742.0, 714.0)
        assert mixture_density(x, config=config) == pytest.approx(expected)

    def test_integrates_to_one(self, config):
        step = 2.0
        low, high = -5000.0, 12000.0
        n = int((high - low) / step)
        area = sum(mixture_density(low + i * step, config=config) for i in range(n + 1)) * step
        assert area == pytest.approx(1.0, abs=1e-6)

    def test_bimodal_shape(self, config):
        # Local minimum between the two cluster means.
        assert mixture_density(3200.0) < mixture_density(3742.0)
        assert mixture_density(3200.0) < mixture_density(1691.0)


class TestMixtureCDF:
    """Test the weighted CDF"""

    def test_monotone(self, config):
        xs = [-5000.0 + 25.0 * i for i in range(601)]
        values = [mixture_cdf(x, config=config) for x in xs]
        assert all(b >= a for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("x", [-1e6, 0.0, 1691.0, 2147.0, 3742.0, 1e6])
    def test_complement_sums_to_one(self, x, config):
        cdf = mixture_cdf(x, config=config)
        assert cdf + (1.0 - cdf) == pytest.approx(1.0)

    def test_limits(self, config):
        assert mixture_cdf(-1e6, config=config) == pytest.approx(0.0, abs=1e-12)
        assert mixture_cdf(1e6, config=config) == pytest.approx(1.0, abs=1e-12)

    def test_custom_config(self):
        symmetric = MixtureConfig(
            low=MixtureComponent(weight=0.5, mean=-1.0, std_dev=1.0),
            high=MixtureComponent(weight=0.5, mean=1.0, std_dev=1.0),
        )
        assert mixture_cdf(0.0, config=symmetric) == pytest.approx(0.5, abs=1e-7)


class TestComponentAttribution:
    """Test posterior cluster responsibilities"""

    @pytest.mark.parametrize("price", [1.0, 500.0, 1691.0, 2700.0, 3742.0, 5100.0, 8000.0])
    def test_sums_to_hundred(self, price, config):
        attribution = component_attribution(price, config=config)
        assert attribution.low_cluster_pct + attribution.high_cluster_pct == pytest.approx(100.0)

    def test_low_price_from_low_cluster(self, config):
        attribution = component_attribution(1000.0, config=config)
        assert attribution.low_cluster_pct > 99.0

    def test_high_price_from_high_cluster(self, config):
        attribution = component_attribution(4500.0, config=config)
        assert attribution.high_cluster_pct > 90.0

    def test_bayes_rule(self, config):
        price = 2800.0
        low = 0.779 * normal_density(price, 1691.0, 606.0)
        high = 0.221 * normal_density(price, 3742.0, 714.0)
        attribution = component_attribution(price, config=config)
        assert attribution.low_cluster_pct == pytest.approx(low / (low + high) * 100.0)

    def test_underflowed_density_is_nan(self, config):
        attribution = component_attribution(1e9, config=config)
        assert math.isnan(attribution.low_cluster_pct)
        assert math.isnan(attribution.high_cluster_pct)
