"""Shared pytest fixtures for classeval tests."""
from __future__ import annotations

import pytest

from classeval.config import BootstrapConfig, EvaluationConfig
from classeval.core.models import Observation


def _repeat(actual: bool, probability: float, n: int) -> list[Observation]:
    return [Observation(actual=actual, predicted_probability=probability)] * n


@pytest.fixture
def worked_example() -> list[Observation]:
    """714 cases that give TP=207, FP=68, TN=356, FN=83 at cutoff 0.5."""
    return (
        _repeat(True, 0.8, 207)
        + _repeat(True, 0.3, 83)
        + _repeat(False, 0.7, 68)
        + _repeat(False, 0.2, 356)
    )


@pytest.fixture
def small_observations() -> list[Observation]:
    """Eight cases with both classes and one tied probability."""
    data = [
        (True, 0.9),
        (True, 0.8),
        (False, 0.7),
        (True, 0.6),
        (False, 0.6),
        (False, 0.4),
        (True, 0.3),
        (False, 0.1),
    ]
    return [Observation(actual=a, predicted_probability=p) for a, p in data]


@pytest.fixture
def all_positive() -> list[Observation]:
    """Single-class observations (no actual negatives)."""
    return [
        Observation(actual=True, predicted_probability=p)
        for p in (0.2, 0.5, 0.9)
    ]


@pytest.fixture
def fast_config() -> EvaluationConfig:
    """Config with a small bootstrap for quick tests."""
    return EvaluationConfig(bootstrap=BootstrapConfig(n_iter=50, seed=7))
