"""Tests for core data models."""
from __future__ import annotations

import pydantic
import pytest

from classeval.core.models import Observation, observations_from_arrays


class TestObservation:
    """Tests for the Observation model."""

    def test_valid(self) -> None:
        obs = Observation(actual=True, predicted_probability=0.73)
        assert obs.actual is True
        assert obs.predicted_probability == 0.73

    @pytest.mark.parametrize("probability", [-0.01, 1.01, float("nan"), float("inf")])
    def test_probability_out_of_range_rejected(self, probability: float) -> None:
        """Probabilities outside [0, 1] or non-finite are rejected."""
        with pytest.raises(pydantic.ValidationError):
            Observation(actual=False, predicted_probability=probability)

    def test_bounds_accepted(self) -> None:
        """0 and 1 are valid probabilities."""
        assert Observation(actual=False, predicted_probability=0.0).predicted_probability == 0.0
        assert Observation(actual=True, predicted_probability=1.0).predicted_probability == 1.0

    def test_frozen(self) -> None:
        """Observations are immutable."""
        obs = Observation(actual=True, predicted_probability=0.5)
        with pytest.raises(pydantic.ValidationError):
            obs.predicted_probability = 0.9  # type: ignore[misc]

    def test_hashable_and_equal(self) -> None:
        """Equal observations compare and hash equal."""
        a = Observation(actual=True, predicted_probability=0.5)
        b = Observation(actual=True, predicted_probability=0.5)
        assert a == b
        assert len({a, b}) == 1


class TestObservationsFromArrays:
    """Tests for observations_from_arrays."""

    def test_pairs_in_order(self) -> None:
        """Labels and probabilities are paired in input order."""
        result = observations_from_arrays([1, 0, 1], [0.9, 0.2, 0.4])
        assert [o.actual for o in result] == [True, False, True]
        assert [o.predicted_probability for o in result] == [0.9, 0.2, 0.4]

    def test_mismatched_lengths_raises(self) -> None:
        """Mismatched lengths raise ValueError."""
        with pytest.raises(ValueError, match="length"):
            observations_from_arrays([1, 0], [0.5])

    def test_invalid_probability_raises(self) -> None:
        """Out-of-range probabilities fail validation."""
        with pytest.raises(pydantic.ValidationError):
            observations_from_arrays([1], [1.5])

    def test_empty(self) -> None:
        assert observations_from_arrays([], []) == []
