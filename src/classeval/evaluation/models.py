"""Evaluation data models for classeval.

Pydantic models for confusion counts, the derived metric set, ROC
curve points, calibration diagnostics, bootstrap confidence intervals,
and the composite evaluation report.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from classeval.core.enums import Metric
from classeval.core.exceptions import UndefinedMetricError


class ConfusionCounts(BaseModel):
    """Confusion matrix counts at a single cutoff.

    Attributes:
        cutoff: Probability cutoff; predicted positive iff probability > cutoff.
        tp: Actual positive, predicted positive.
        fp: Actual negative, predicted positive.
        tn: Actual negative, predicted negative.
        fn: Actual positive, predicted negative.
    """

    cutoff: float
    tp: int = Field(ge=0)
    fp: int = Field(ge=0)
    tn: int = Field(ge=0)
    fn: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    @property
    def actual_positive(self) -> int:
        return self.tp + self.fn

    @property
    def actual_negative(self) -> int:
        return self.tn + self.fp

    @property
    def predicted_positive(self) -> int:
        return self.tp + self.fp

    @property
    def predicted_negative(self) -> int:
        return self.tn + self.fn


class MetricSet(BaseModel):
    """Metrics derived from confusion counts.

    ``None`` marks a metric whose denominator is zero. It is never
    replaced by 0.0 or NaN.

    Attributes:
        accuracy: (TP + TN) / total.
        sensitivity: TP / (TP + FN), the true positive rate.
        specificity: TN / (TN + FP), the true negative rate.
        ppv: TP / (TP + FP), positive predictive value.
        npv: TN / (TN + FN), negative predictive value.
    """

    accuracy: float | None
    sensitivity: float | None
    specificity: float | None
    ppv: float | None
    npv: float | None

    model_config = ConfigDict(frozen=True)

    def get(self, metric: Metric | str) -> float | None:
        """Return a metric by name, ``None`` if undefined."""
        return getattr(self, Metric(metric).value)  # type: ignore[no-any-return]

    def require(self, metric: Metric | str) -> float:
        """Return a metric by name.

        Raises:
            UndefinedMetricError: If the metric's denominator was zero.
        """
        value = self.get(metric)
        if value is None:
            raise UndefinedMetricError(Metric(metric).value)
        return value

    @property
    def undefined(self) -> list[Metric]:
        return [m for m in Metric if self.get(m) is None]


class RocPoint(BaseModel):
    """One point of a ROC curve.

    Attributes:
        fpr: False positive rate (1 - specificity).
        tpr: True positive rate (sensitivity).
        threshold: Cutoff that produced this point.
    """

    fpr: float = Field(ge=0.0, le=1.0)
    tpr: float = Field(ge=0.0, le=1.0)
    threshold: float

    model_config = ConfigDict(frozen=True)


class RocCurve(BaseModel):
    """ROC curve sorted by ascending FPR, from (0, 0) to (1, 1).

    Attributes:
        points: Deduplicated, coordinate-wise non-decreasing points.
    """

    points: tuple[RocPoint, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def fpr(self) -> list[float]:
        return [p.fpr for p in self.points]

    @property
    def tpr(self) -> list[float]:
        return [p.tpr for p in self.points]

    @property
    def thresholds(self) -> list[float]:
        return [p.threshold for p in self.points]


class ThresholdRow(BaseModel):
    """Classification table entry for one cutoff."""

    cutoff: float
    counts: ConfusionCounts
    metrics: MetricSet


class CutoffChoice(BaseModel):
    """Cutoff maximizing Youden's J statistic.

    Attributes:
        cutoff: Selected probability cutoff.
        j_statistic: Sensitivity + specificity - 1 at the cutoff.
        sensitivity: True positive rate at the cutoff.
        specificity: True negative rate at the cutoff.
    """

    cutoff: float
    j_statistic: float
    sensitivity: float
    specificity: float


class CalibrationBin(BaseModel):
    """A single bin in the calibration reliability diagram.

    Attributes:
        bin_lower: Lower bound of the bin.
        bin_upper: Upper bound of the bin.
        mean_predicted: Mean predicted probability in this bin.
        fraction_positive: Observed fraction of positive outcomes.
        count: Number of observations in this bin.
    """

    bin_lower: float
    bin_upper: float
    mean_predicted: float
    fraction_positive: float
    count: int


class CalibrationMetrics(BaseModel):
    """Calibration quality metrics with per-bin data.

    Attributes:
        ece: Expected Calibration Error.
        mce: Maximum Calibration Error.
        brier: Brier score.
        bins: Non-empty bins, lowest first.
    """

    ece: float
    mce: float
    brier: float
    bins: list[CalibrationBin]


class BootstrapResult(BaseModel):
    """Bootstrap confidence interval result.

    Attributes:
        point: Point estimate of the metric.
        ci_lower: Lower bound of the interval.
        ci_upper: Upper bound of the interval.
        confidence: Nominal coverage, e.g. 0.95.
        n_valid: Resamples on which the metric could be computed.
    """

    point: float
    ci_lower: float
    ci_upper: float
    confidence: float = 0.95
    n_valid: int = 0


class EvaluationReport(BaseModel):
    """Complete evaluation of one set of observations.

    ROC-derived fields are ``None`` when the observations contain a
    single actual class.

    Attributes:
        counts: Confusion counts at the report cutoff.
        metrics: Metric set at the report cutoff.
        roc: ROC curve across all cutoffs.
        auc: Area under the ROC curve.
        auc_ci: Bootstrap interval for the AUC.
        optimal_cutoff: Cutoff maximizing Youden's J.
        calibration: Calibration quality metrics.
        metadata: n_observations, cutoff, seed, timestamp.
    """

    counts: ConfusionCounts
    metrics: MetricSet
    roc: RocCurve | None = None
    auc: float | None = None
    auc_ci: BootstrapResult | None = None
    optimal_cutoff: CutoffChoice | None = None
    calibration: CalibrationMetrics
    metadata: dict[str, Any] = Field(default_factory=dict)

    def summary_lines(self, decimals: int = 1) -> list[str]:
        """Render the report as plain text lines."""
        from classeval.evaluation.metrics import format_metric  # noqa: PLC0415

        c = self.counts
        lines = [
            f"Cutoff: > {c.cutoff:g}",
            f"  TP={c.tp}  FP={c.fp}  TN={c.tn}  FN={c.fn}  (N={c.total})",
            f"  Accuracy:    {format_metric(self.metrics.accuracy, decimals)}",
            f"  Sensitivity: {format_metric(self.metrics.sensitivity, decimals)}",
            f"  Specificity: {format_metric(self.metrics.specificity, decimals)}",
            f"  PPV:         {format_metric(self.metrics.ppv, decimals)}",
            f"  NPV:         {format_metric(self.metrics.npv, decimals)}",
        ]
        if self.auc is None:
            lines.append("  AUC:         undefined (single class)")
        else:
            auc_line = f"  AUC:         {self.auc:.3f}"
            if self.auc_ci is not None:
                auc_line += f" ({self.auc_ci.ci_lower:.3f}-{self.auc_ci.ci_upper:.3f})"
            lines.append(auc_line)
        if self.optimal_cutoff is not None:
            lines.append(
                f"  Youden cutoff: {self.optimal_cutoff.cutoff:.3f}"
                f" (J={self.optimal_cutoff.j_statistic:.3f})"
            )
        lines.append(f"  Brier:       {self.calibration.brier:.4f}")
        return lines
