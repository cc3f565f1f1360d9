"""Pure metric computation functions for binary classification evaluation.

Provides stateless functions for confusion counts at a cutoff, the
derived metric set, ROC curves and their AUC, cutoff selection,
calibration diagnostics, bootstrap confidence intervals, and
display formatting.

An observation is predicted positive only when its probability is
strictly greater than the cutoff; a probability equal to the cutoff
counts as a negative prediction.
"""
from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from itertools import pairwise
from typing import Any

import numpy as np
import structlog
from numpy.typing import NDArray

from classeval.core.exceptions import (
    DegenerateInputError,
    EmptyInputError,
    InvalidCurveError,
    UndefinedMetricError,
)
from classeval.core.models import Observation
from classeval.evaluation.models import (
    BootstrapResult,
    CalibrationBin,
    CalibrationMetrics,
    ConfusionCounts,
    CutoffChoice,
    MetricSet,
    RocCurve,
    RocPoint,
    ThresholdRow,
)

logger = structlog.get_logger(__name__)

CurveInput = RocCurve | Sequence[RocPoint] | Sequence[tuple[float, float]]


def confusion_counts(
    observations: Sequence[Observation],
    cutoff: float,
) -> ConfusionCounts:
    """Count true/false positives and negatives at a probability cutoff.

    Args:
        observations: Scored observations (must not be empty).
        cutoff: Probability cutoff. Any real number is accepted.

    Returns:
        ConfusionCounts whose total equals ``len(observations)``.

    Raises:
        EmptyInputError: If ``observations`` is empty.
    """
    if len(observations) == 0:
        msg = "Observations must not be empty"
        raise EmptyInputError(msg)

    tp = fp = tn = fn = 0
    for obs in observations:
        # Strict comparison: probability == cutoff is a negative prediction
        predicted_positive = obs.predicted_probability > cutoff
        if predicted_positive and obs.actual:
            tp += 1
        elif predicted_positive:
            fp += 1
        elif obs.actual:
            fn += 1
        else:
            tn += 1

    return ConfusionCounts(cutoff=cutoff, tp=tp, fp=fp, tn=tn, fn=fn)


def _ratio(numerator: int, denominator: int) -> float | None:
    """Divide, returning ``None`` (undefined) for a zero denominator."""
    if denominator == 0:
        return None
    return numerator / denominator


def compute_metrics(counts: ConfusionCounts) -> MetricSet:
    """Derive accuracy, sensitivity, specificity, PPV and NPV.

    Args:
        counts: Confusion counts at some cutoff.

    Returns:
        MetricSet; any metric with a zero denominator is ``None``.

    Raises:
        EmptyInputError: If the counts sum to zero.
    """
    if counts.total == 0:
        msg = "Confusion counts must not all be zero"
        raise EmptyInputError(msg)

    metrics = MetricSet(
        accuracy=_ratio(counts.tp + counts.tn, counts.total),
        sensitivity=_ratio(counts.tp, counts.tp + counts.fn),
        specificity=_ratio(counts.tn, counts.tn + counts.fp),
        ppv=_ratio(counts.tp, counts.tp + counts.fp),
        npv=_ratio(counts.tn, counts.tn + counts.fn),
    )
    if metrics.undefined:
        logger.debug(
            "metrics_undefined",
            cutoff=counts.cutoff,
            undefined=[m.value for m in metrics.undefined],
        )
    return metrics


def _split_classes(
    observations: Sequence[Observation],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return sorted positive and negative scores, checking both classes exist."""
    if len(observations) == 0:
        msg = "Observations must not be empty"
        raise EmptyInputError(msg)

    scores = np.asarray(
        [obs.predicted_probability for obs in observations], dtype=np.float64
    )
    labels = np.asarray([obs.actual for obs in observations], dtype=np.bool_)
    n_positive = int(np.sum(labels))
    n_negative = len(labels) - n_positive

    if n_positive == 0 or n_negative == 0:
        msg = (
            "Cannot compute ROC curve with only one class present "
            f"(positives={n_positive}, negatives={n_negative})"
        )
        raise DegenerateInputError(msg, n_positive=n_positive, n_negative=n_negative)

    return np.sort(scores[labels]), np.sort(scores[~labels])


def roc_curve(observations: Sequence[Observation]) -> RocCurve:
    """Compute the ROC curve over every distinct predicted probability.

    Candidate cutoffs are each distinct probability plus one just above
    the maximum and one just below the minimum. Observations sharing a
    probability cross the cutoff together, so ties form a single step.

    Args:
        observations: Scored observations with both actual classes present.

    Returns:
        RocCurve from (0, 0) to (1, 1), sorted by ascending FPR then TPR,
        with duplicate points merged (highest cutoff kept).

    Raises:
        EmptyInputError: If ``observations`` is empty.
        DegenerateInputError: If only one actual class is present.
    """
    positives, negatives = _split_classes(observations)
    all_scores = np.concatenate([positives, negatives])

    distinct_desc = np.unique(all_scores)[::-1]
    cutoffs: NDArray[np.float64] = np.concatenate(
        [
            [math.nextafter(float(distinct_desc[0]), math.inf)],
            distinct_desc,
            [math.nextafter(float(distinct_desc[-1]), -math.inf)],
        ]
    )

    # Count of scores strictly greater than each cutoff
    tp = len(positives) - np.searchsorted(positives, cutoffs, side="right")
    fp = len(negatives) - np.searchsorted(negatives, cutoffs, side="right")
    tpr = tp / len(positives)
    fpr = fp / len(negatives)

    candidates = [
        RocPoint(fpr=float(x), tpr=float(y), threshold=float(c))
        for x, y, c in zip(fpr, tpr, cutoffs, strict=True)
    ]
    # Stable sort keeps descending-cutoff order within identical points
    candidates.sort(key=lambda p: (p.fpr, p.tpr))

    points: list[RocPoint] = []
    for point in candidates:
        if points and (points[-1].fpr, points[-1].tpr) == (point.fpr, point.tpr):
            continue
        points.append(point)

    logger.debug(
        "roc_curve_computed",
        n_observations=len(observations),
        n_cutoffs=len(cutoffs),
        n_points=len(points),
    )
    return RocCurve(points=tuple(points))


def _as_coordinates(points: CurveInput) -> list[tuple[float, float]]:
    """Normalize curve input to a list of (fpr, tpr) pairs."""
    if isinstance(points, RocCurve):
        points = points.points

    coords: list[tuple[float, float]] = []
    for item in points:
        if isinstance(item, RocPoint):
            coords.append((item.fpr, item.tpr))
            continue
        try:
            x, y = item
            coords.append((float(x), float(y)))
        except (TypeError, ValueError) as exc:
            msg = f"Invalid ROC point: {item!r}"
            raise InvalidCurveError(msg) from exc
    return coords


def auc(points: CurveInput) -> float:
    """Area under a ROC curve by the trapezoidal rule.

    Args:
        points: A RocCurve, RocPoints, or (fpr, tpr) pairs sorted by
            ascending FPR.

    Returns:
        Area in [0, 1].

    Raises:
        InvalidCurveError: If fewer than two points are given, a coordinate
            lies outside [0, 1], or either coordinate decreases.
    """
    coords = _as_coordinates(points)
    if len(coords) < 2:
        msg = f"ROC curve needs at least 2 points, got {len(coords)}"
        raise InvalidCurveError(msg)

    for x, y in coords:
        if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
            msg = f"ROC point ({x}, {y}) lies outside the unit square"
            raise InvalidCurveError(msg)

    for (x0, y0), (x1, y1) in pairwise(coords):
        if x1 < x0 or y1 < y0:
            msg = f"ROC curve is not monotonic at ({x0}, {y0}) -> ({x1}, {y1})"
            raise InvalidCurveError(msg)

    return math.fsum(
        (x1 - x0) * (y0 + y1) / 2.0 for (x0, y0), (x1, y1) in pairwise(coords)
    )


def roc_auc(observations: Sequence[Observation]) -> float:
    """AUC of the ROC curve computed from observations."""
    return auc(roc_curve(observations))


def threshold_table(
    observations: Sequence[Observation],
    cutoffs: Sequence[float],
) -> list[ThresholdRow]:
    """Build the classification table at several cutoffs.

    Args:
        observations: Scored observations (must not be empty).
        cutoffs: Cutoffs to evaluate, reported in the given order.

    Returns:
        One ThresholdRow per cutoff.

    Raises:
        ValueError: If ``cutoffs`` is empty.
        EmptyInputError: If ``observations`` is empty.
    """
    if len(cutoffs) == 0:
        msg = "At least one cutoff is required"
        raise ValueError(msg)

    rows: list[ThresholdRow] = []
    for cutoff in cutoffs:
        counts = confusion_counts(observations, cutoff)
        rows.append(
            ThresholdRow(cutoff=cutoff, counts=counts, metrics=compute_metrics(counts))
        )
    return rows


def youden_cutoff(observations: Sequence[Observation]) -> CutoffChoice:
    """Pick the ROC cutoff maximizing sensitivity + specificity - 1.

    Ties resolve to the highest cutoff.

    Raises:
        EmptyInputError: If ``observations`` is empty.
        DegenerateInputError: If only one actual class is present.
    """
    curve = roc_curve(observations)

    best = curve.points[0]
    best_j = best.tpr - best.fpr
    for point in curve.points[1:]:
        j = point.tpr - point.fpr
        if j > best_j:
            best, best_j = point, j

    return CutoffChoice(
        cutoff=best.threshold,
        j_statistic=best_j,
        sensitivity=best.tpr,
        specificity=1.0 - best.fpr,
    )


def compute_calibration_metrics(
    observations: Sequence[Observation],
    n_bins: int = 10,
) -> CalibrationMetrics:
    """Compute calibration quality metrics with per-bin data.

    Args:
        observations: Scored observations (must not be empty).
        n_bins: Number of equal-width probability bins.

    Returns:
        CalibrationMetrics with ECE, MCE, Brier score, and bin data.

    Raises:
        ValueError: If ``n_bins`` is less than 1.
        EmptyInputError: If ``observations`` is empty.
    """
    if n_bins < 1:
        msg = f"n_bins must be at least 1, got {n_bins}"
        raise ValueError(msg)
    if len(observations) == 0:
        msg = "Observations must not be empty"
        raise EmptyInputError(msg)

    scores_arr: NDArray[np.floating[Any]] = np.asarray(
        [obs.predicted_probability for obs in observations], dtype=np.float64
    )
    labels_arr: NDArray[np.floating[Any]] = np.asarray(
        [obs.actual for obs in observations], dtype=np.float64
    )
    n_total = len(scores_arr)

    brier = float(np.mean((scores_arr - labels_arr) ** 2))

    bin_edges: NDArray[np.floating[Any]] = np.linspace(0.0, 1.0, n_bins + 1)
    bins: list[CalibrationBin] = []
    ece = 0.0
    mce = 0.0

    for i in range(n_bins):
        lower = float(bin_edges[i])
        upper = float(bin_edges[i + 1])

        if i < n_bins - 1:
            mask: NDArray[np.bool_] = (scores_arr >= lower) & (scores_arr < upper)
        else:
            # Last bin includes the right edge
            mask = (scores_arr >= lower) & (scores_arr <= upper)

        count = int(np.sum(mask))
        if count == 0:
            continue

        mean_predicted = float(np.mean(scores_arr[mask]))
        fraction_positive = float(np.mean(labels_arr[mask]))
        gap = abs(mean_predicted - fraction_positive)

        ece += (count / n_total) * gap
        mce = max(mce, gap)

        bins.append(
            CalibrationBin(
                bin_lower=lower,
                bin_upper=upper,
                mean_predicted=mean_predicted,
                fraction_positive=fraction_positive,
                count=count,
            )
        )

    return CalibrationMetrics(ece=ece, mce=mce, brier=brier, bins=bins)


def bootstrap_ci(
    metric_fn: Callable[[Sequence[Observation]], float],
    observations: Sequence[Observation],
    n_iter: int = 1000,
    seed: int = 42,
    confidence: float = 0.95,
) -> BootstrapResult:
    """Percentile bootstrap confidence interval for a metric function.

    Resamples on which the metric is undefined (single class, zero
    denominator) are skipped.

    Args:
        metric_fn: Function mapping observations to a float metric value.
        observations: Observations to resample with replacement.
        n_iter: Number of bootstrap iterations.
        seed: Random seed for reproducibility.
        confidence: Nominal coverage of the interval, in (0, 1).

    Returns:
        BootstrapResult with point estimate and interval bounds.

    Raises:
        ValueError: If ``n_iter`` < 1 or ``confidence`` is outside (0, 1).
        EmptyInputError: If ``observations`` is empty.
    """
    if n_iter < 1:
        msg = f"n_iter must be at least 1, got {n_iter}"
        raise ValueError(msg)
    if not 0.0 < confidence < 1.0:
        msg = f"confidence must be in (0, 1), got {confidence}"
        raise ValueError(msg)
    if len(observations) == 0:
        msg = "Observations must not be empty"
        raise EmptyInputError(msg)

    rng = np.random.default_rng(seed)
    n_samples = len(observations)

    point = metric_fn(observations)

    bootstrap_values: list[float] = []
    for _ in range(n_iter):
        indices: NDArray[np.intp] = rng.integers(0, n_samples, size=n_samples)
        resampled = [observations[i] for i in indices]
        try:
            bootstrap_values.append(metric_fn(resampled))
        except (DegenerateInputError, UndefinedMetricError):
            continue

    if len(bootstrap_values) == 0:
        logger.warning("bootstrap_no_valid_resamples", n_iter=n_iter)
        return BootstrapResult(
            point=point,
            ci_lower=point,
            ci_upper=point,
            confidence=confidence,
            n_valid=0,
        )

    alpha = (1.0 - confidence) / 2.0
    return BootstrapResult(
        point=point,
        ci_lower=float(np.percentile(bootstrap_values, 100.0 * alpha)),
        ci_upper=float(np.percentile(bootstrap_values, 100.0 * (1.0 - alpha))),
        confidence=confidence,
        n_valid=len(bootstrap_values),
    )


def format_metric(value: float | None, decimals: int = 1) -> str:
    """Format a metric as a percentage, or ``"undefined"`` for ``None``.

    Example: ``format_metric(0.7137)`` -> ``"71.4%"``
    """
    if value is None:
        return "undefined"
    return f"{100.0 * value:.{decimals}f}%"
