"""Configuration helpers for the two-component price mixture."""
from __future__ import annotations

from dataclasses import dataclass, field
import math

WEIGHT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class MixtureComponent:
    """A single Gaussian component of the price mixture."""

    weight: float
    mean: float
    std_dev: float


@dataclass(frozen=True)
class DistributionRange:
    """Advisory bounds for chart grids; the density itself is defined on all reals."""

    min: float
    max: float


@dataclass(frozen=True)
class MixtureConfig:
    """Encapsulates the fitted low/high price clusters."""

    low: MixtureComponent
    high: MixtureComponent
    display_range: DistributionRange = field(
        default_factory=lambda: DistributionRange(min=500.0, max=5100.0)
    )

    def __post_init__(self) -> None:
        for name, component in (("low", self.low), ("high", self.high)):
            if not 0.0 < component.weight <= 1.0:
                raise ValueError(f"Weight of the {name} component must lie in (0, 1].")
            if component.std_dev <= 0:
                raise ValueError(f"Standard deviation of the {name} component must be strictly positive.")
        if not math.isclose(self.low.weight + self.high.weight, 1.0, rel_tol=0.0, abs_tol=WEIGHT_TOLERANCE):
            raise ValueError("Component weights must sum to 1.")
        if self.display_range.min >= self.display_range.max:
            raise ValueError("Display range minimum must be below its maximum.")

    @property
    def components(self) -> tuple[MixtureComponent, MixtureComponent]:
        return (self.low, self.high)

    @property
    def theoretical_mean(self) -> float:
        return sum(c.weight * c.mean for c in self.components)


def build_default_config() -> MixtureConfig:
    """Factory for the fitted daily-price mixture."""
    return MixtureConfig(
        low=MixtureComponent(weight=0.779, mean=1691.0, std_dev=606.0),
        high=MixtureComponent(weight=0.221, mean=3742.0, std_dev=714.0),
        display_range=DistributionRange(min=500.0, max=5100.0),
    )


DEFAULT_CONFIG = build_default_config()
