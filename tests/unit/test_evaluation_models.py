"""Tests for evaluation data models."""
from __future__ import annotations

import pydantic
import pytest

from classeval.core.enums import Metric
from classeval.core.exceptions import UndefinedMetricError
from classeval.evaluation.models import (
    CalibrationMetrics,
    ConfusionCounts,
    EvaluationReport,
    MetricSet,
    RocCurve,
    RocPoint,
)


class TestConfusionCounts:
    """Tests for ConfusionCounts."""

    def test_derived_totals(self) -> None:
        counts = ConfusionCounts(cutoff=0.5, tp=207, fp=68, tn=356, fn=83)
        assert counts.total == 714
        assert counts.actual_positive == 290
        assert counts.actual_negative == 424
        assert counts.predicted_positive == 275
        assert counts.predicted_negative == 439

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ConfusionCounts(cutoff=0.5, tp=-1, fp=0, tn=0, fn=0)


class TestMetricSet:
    """Tests for MetricSet accessors."""

    @pytest.fixture
    def partial(self) -> MetricSet:
        return MetricSet(
            accuracy=1.0, sensitivity=None, specificity=1.0, ppv=None, npv=1.0
        )

    def test_get(self, partial: MetricSet) -> None:
        assert partial.get(Metric.ACCURACY) == 1.0
        assert partial.get("ppv") is None

    def test_require_defined(self, partial: MetricSet) -> None:
        assert partial.require("npv") == 1.0

    def test_require_undefined_raises(self, partial: MetricSet) -> None:
        with pytest.raises(UndefinedMetricError, match="sensitivity"):
            partial.require(Metric.SENSITIVITY)

    def test_undefined_lists_names(self, partial: MetricSet) -> None:
        assert partial.undefined == [Metric.SENSITIVITY, Metric.PPV]

    def test_unknown_metric_raises(self, partial: MetricSet) -> None:
        with pytest.raises(ValueError):
            partial.get("f1")


class TestRocCurve:
    """Tests for RocCurve accessors."""

    def test_coordinate_lists(self) -> None:
        curve = RocCurve(
            points=(
                RocPoint(fpr=0.0, tpr=0.0, threshold=0.9),
                RocPoint(fpr=0.0, tpr=1.0, threshold=0.5),
                RocPoint(fpr=1.0, tpr=1.0, threshold=0.1),
            )
        )
        assert curve.fpr == [0.0, 0.0, 1.0]
        assert curve.tpr == [0.0, 1.0, 1.0]
        assert curve.thresholds == [0.9, 0.5, 0.1]

    def test_rate_out_of_range_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            RocPoint(fpr=1.2, tpr=0.0, threshold=0.5)


class TestEvaluationReport:
    """Tests for EvaluationReport.summary_lines."""

    def _report(self, **kwargs: object) -> EvaluationReport:
        return EvaluationReport(
            counts=ConfusionCounts(cutoff=0.5, tp=0, fp=0, tn=10, fn=0),
            metrics=MetricSet(
                accuracy=1.0, sensitivity=None, specificity=1.0, ppv=None, npv=1.0
            ),
            calibration=CalibrationMetrics(ece=0.0, mce=0.0, brier=0.01, bins=[]),
            **kwargs,  # type: ignore[arg-type]
        )

    def test_undefined_rendered(self) -> None:
        lines = self._report().summary_lines()
        text = "\n".join(lines)
        assert "PPV:         undefined" in text
        assert "Accuracy:    100.0%" in text
        assert "AUC:         undefined (single class)" in text
        assert lines[0] == "Cutoff: > 0.5"

    def test_auc_rendered(self) -> None:
        text = "\n".join(self._report(auc=0.8125).summary_lines())
        assert "AUC:         0.812" in text or "AUC:         0.813" in text
