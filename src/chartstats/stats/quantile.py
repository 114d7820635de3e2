"""Quantile estimator with linear interpolation between order statistics."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from chartstats.errors import EmptyInputError, InvalidQuantileError


def quantile(sample: Sequence[float], p: float) -> float:
    """Return the p-quantile of a sample.

    Rank r = p * (n - 1), interpolated linearly between sample[floor(r)] and
    sample[ceil(r)] (numpy's default "linear" method).

    Args:
        sample: Values, normally sorted ascending by prepare().
        p: Probability in [0, 1].

    Raises:
        InvalidQuantileError: If p is outside [0, 1] (or NaN).
        EmptyInputError: If sample is empty.
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidQuantileError(f"quantile probability must be in [0, 1], got {p!r}")
    if len(sample) == 0:
        raise EmptyInputError("cannot take a quantile of an empty sample")
    return float(np.quantile(np.asarray(sample, dtype=float), p))
