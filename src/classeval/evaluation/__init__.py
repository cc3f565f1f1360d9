"""Evaluation module — confusion counts, metrics, ROC/AUC, and orchestration."""
from __future__ import annotations

from classeval.evaluation.evaluator import BinaryClassificationEvaluator
from classeval.evaluation.metrics import (
    auc,
    bootstrap_ci,
    compute_calibration_metrics,
    compute_metrics,
    confusion_counts,
    format_metric,
    roc_auc,
    roc_curve,
    threshold_table,
    youden_cutoff,
)
from classeval.evaluation.models import (
    BootstrapResult,
    CalibrationBin,
    CalibrationMetrics,
    ConfusionCounts,
    CutoffChoice,
    EvaluationReport,
    MetricSet,
    RocCurve,
    RocPoint,
    ThresholdRow,
)

__all__ = [
    "BinaryClassificationEvaluator",
    "BootstrapResult",
    "CalibrationBin",
    "CalibrationMetrics",
    "ConfusionCounts",
    "CutoffChoice",
    "EvaluationReport",
    "MetricSet",
    "RocCurve",
    "RocPoint",
    "ThresholdRow",
    "auc",
    "bootstrap_ci",
    "compute_calibration_metrics",
    "compute_metrics",
    "confusion_counts",
    "format_metric",
    "roc_auc",
    "roc_curve",
    "threshold_table",
    "youden_cutoff",
]
