"""Mixture density, cumulative distribution and sampling."""
from __future__ import annotations

from dataclasses import dataclass
import math

import torch

from .config import DEFAULT_CONFIG, MixtureConfig
from .distributions import normal_cdf, normal_density
from .results import ComponentAttribution


def mixture_density(x: float, *, config: MixtureConfig = DEFAULT_CONFIG) -> float:
    """Weighted sum of component densities; the curve plotted as the price distribution."""
    return sum(c.weight * normal_density(x, c.mean, c.std_dev) for c in config.components)


def mixture_cdf(x: float, *, config: MixtureConfig = DEFAULT_CONFIG) -> float:
    """Probability that a single draw from the mixture is at most ``x``."""
    return sum(c.weight * normal_cdf(x, c.mean, c.std_dev) for c in config.components)


def component_attribution(price: float, *, config: MixtureConfig = DEFAULT_CONFIG) -> ComponentAttribution:
    """Posterior responsibility of each cluster for ``price``, in percent.

    The denominator is strictly positive for any finite price and positive
    standard deviations. It can only underflow to zero for prices dozens of
    standard deviations away from both means, in which case the result is NaN.
    """
    low = config.low.weight * normal_density(price, config.low.mean, config.low.std_dev)
    high = config.high.weight * normal_density(price, config.high.mean, config.high.std_dev)
    total = low + high
    if total == 0.0:
        return ComponentAttribution(low_cluster_pct=math.nan, high_cluster_pct=math.nan)
    return ComponentAttribution(
        low_cluster_pct=low / total * 100.0,
        high_cluster_pct=high / total * 100.0,
    )


@dataclass
class PriceSampler:
    """Draws daily prices from the mixture using an injectable generator."""

    config: MixtureConfig = DEFAULT_CONFIG
    generator: torch.Generator | None = None

    def __post_init__(self) -> None:
        if self.generator is None:
            generator = torch.Generator()
            generator.manual_seed(torch.seed())
            object.__setattr__(self, "generator", generator)

    def _uniform(self, shape: tuple[int, ...]) -> torch.Tensor:
        return torch.rand(shape, generator=self.generator, dtype=torch.float64)

    def sample_price(self) -> float:
        """Pick a cluster by weight, then Box-Muller a Gaussian draw from it."""
        roll, u1, u2 = self._uniform((3,)).tolist()
        component = self.config.high if roll < self.config.high.weight else self.config.low
        # torch.rand is [0, 1); flip so the logarithm stays finite.
        radius = math.sqrt(-2.0 * math.log(1.0 - u1))
        z0 = radius * math.cos(2.0 * math.pi * u2)
        price = z0 * component.std_dev + component.mean
        return float(max(0, round(price)))

    def sample_prices(self, n_samples: int) -> torch.Tensor:
        """Vectorised equivalent of :meth:`sample_price`."""
        if n_samples <= 0:
            raise ValueError("Number of samples must be positive.")

        uniforms = self._uniform((3, n_samples))
        roll, u1, u2 = uniforms[0], uniforms[1], uniforms[2]

        high_mask = roll < self.config.high.weight
        means = torch.where(
            high_mask,
            torch.full_like(roll, self.config.high.mean),
            torch.full_like(roll, self.config.low.mean),
        )
        std_devs = torch.where(
            high_mask,
            torch.full_like(roll, self.config.high.std_dev),
            torch.full_like(roll, self.config.low.std_dev),
        )

        z0 = torch.sqrt(-2.0 * torch.log1p(-u1)) * torch.cos(2.0 * math.pi * u2)
        prices = z0 * std_devs + means
        return torch.clamp(torch.round(prices), min=0.0)
