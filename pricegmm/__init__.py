"""Gaussian-mixture price analysis package."""
from .config import (
    DEFAULT_CONFIG,
    DistributionRange,
    MixtureComponent,
    MixtureConfig,
    build_default_config,
)
from .distributions import error_function, normal_cdf, normal_density
from .mixture import PriceSampler, component_attribution, mixture_cdf, mixture_density
from .results import AnalysisResult, ChartData, ComponentAttribution, WaitTimeCurve
from .statistics import (
    MonteCarloSummary,
    expected_periods_to_wait,
    percentile,
    probability_above_with_trials,
    probability_strictly_above,
    summarize_samples,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DistributionRange",
    "MixtureComponent",
    "MixtureConfig",
    "build_default_config",
    "error_function",
    "normal_cdf",
    "normal_density",
    "PriceSampler",
    "component_attribution",
    "mixture_cdf",
    "mixture_density",
    "AnalysisResult",
    "ChartData",
    "ComponentAttribution",
    "WaitTimeCurve",
    "MonteCarloSummary",
    "expected_periods_to_wait",
    "percentile",
    "probability_above_with_trials",
    "probability_strictly_above",
    "summarize_samples",
]
