"""Core Pydantic data models for classeval."""
from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field


class Observation(BaseModel):
    """A single scored case: the actual outcome and the model's probability.

    Attributes:
        actual: Whether the case is actually positive.
        predicted_probability: Model-estimated probability of the positive
            class, in [0, 1].
    """

    actual: bool
    predicted_probability: float = Field(ge=0.0, le=1.0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)


def observations_from_arrays(
    actual: Sequence[bool | int],
    probabilities: Sequence[float],
) -> list[Observation]:
    """Pair actual outcomes with predicted probabilities.

    Args:
        actual: Ground-truth outcomes (truthy = positive, e.g. 0/1 labels).
        probabilities: Predicted probabilities of the positive class.

    Returns:
        List of Observation objects in input order.

    Raises:
        ValueError: If the sequences have different lengths.
        pydantic.ValidationError: If a probability is outside [0, 1] or NaN.
    """
    if len(actual) != len(probabilities):
        msg = (
            f"Mismatched length: actual={len(actual)}, "
            f"probabilities={len(probabilities)}"
        )
        raise ValueError(msg)

    return [
        Observation(actual=bool(a), predicted_probability=float(p))
        for a, p in zip(actual, probabilities, strict=True)
    ]
