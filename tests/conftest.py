"""Pytest configuration and shared fixtures."""

import matplotlib

matplotlib.use("Agg")

import pytest
import torch

from pricegmm.config import DEFAULT_CONFIG, MixtureConfig
from pricegmm.mixture import PriceSampler


@pytest.fixture
def config() -> MixtureConfig:
    return DEFAULT_CONFIG


@pytest.fixture
def generator() -> torch.Generator:
    """Deterministic random source."""
    gen = torch.Generator()
    gen.manual_seed(1234)
    return gen


@pytest.fixture
def sampler(config, generator) -> PriceSampler:
    return PriceSampler(config=config, generator=generator)
