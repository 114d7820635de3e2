"""Fixtures for chartstats.stats tests."""

from __future__ import annotations

import numpy as np
import pytest

from chartstats.stats.sample import ChartDataset


@pytest.fixture
def one_to_ten() -> list[float]:
    return [float(v) for v in range(1, 11)]


@pytest.fixture
def with_outlier() -> list[float]:
    return [1.0, 2.0, 2.0, 3.0, 100.0]


@pytest.fixture
def random_samples() -> list[list[float]]:
    """Sorted random samples of varied sizes and spreads."""
    rng = np.random.default_rng(42)
    samples = []
    for n in (1, 2, 3, 4, 5, 7, 10, 31, 100):
        values = rng.normal(loc=10.0, scale=3.0, size=n)
        # heavy tail so some samples carry outliers
        values[: max(1, n // 10)] *= 5
        samples.append(sorted(float(v) for v in values))
    return samples


@pytest.fixture
def datasets() -> list[ChartDataset]:
    return [
        ChartDataset.from_pairs("Mon", enumerate([3.0, 1.0, 2.0, 5.0, 4.0]), unit="km"),
        ChartDataset.from_pairs("Tue", enumerate([10.0, 12.0, 11.0]), unit="km"),
    ]
