"""Evaluation orchestrator — compute all metrics for one set of observations.

Combines the pure functions in ``classeval.evaluation.metrics`` into a
single report, driven by an ``EvaluationConfig``.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

import structlog

from classeval.config import EvaluationConfig
from classeval.core.exceptions import DegenerateInputError
from classeval.core.models import Observation
from classeval.evaluation.metrics import (
    auc,
    bootstrap_ci,
    compute_calibration_metrics,
    compute_metrics,
    confusion_counts,
    roc_auc,
    roc_curve,
    threshold_table,
    youden_cutoff,
)
from classeval.evaluation.models import (
    BootstrapResult,
    CutoffChoice,
    EvaluationReport,
    RocCurve,
    ThresholdRow,
)

logger = structlog.get_logger(__name__)


class BinaryClassificationEvaluator:
    """Orchestrate the full evaluation workflow.

    Computes confusion counts and metrics at a cutoff, the ROC curve
    and AUC with a bootstrap interval, the Youden-optimal cutoff, and
    calibration diagnostics.
    """

    def __init__(self, config: EvaluationConfig | None = None) -> None:
        self._config = config or EvaluationConfig()

    @property
    def config(self) -> EvaluationConfig:
        return self._config

    def evaluate(
        self,
        observations: Sequence[Observation],
        cutoff: float | None = None,
    ) -> EvaluationReport:
        """Compute the complete evaluation report.

        ROC-derived fields are left as ``None`` when only one actual
        class is present.

        Args:
            observations: Scored observations (must not be empty).
            cutoff: Classification cutoff; defaults to the configured one.

        Returns:
            Complete EvaluationReport.

        Raises:
            EmptyInputError: If ``observations`` is empty.
        """
        if cutoff is None:
            cutoff = self._config.cutoff

        # 1. Counts and metrics at the cutoff
        counts = confusion_counts(observations, cutoff)
        metrics = compute_metrics(counts)

        # 2. ROC curve, AUC, optimal cutoff (only if both classes present)
        curve: RocCurve | None = None
        area: float | None = None
        auc_ci: BootstrapResult | None = None
        optimal: CutoffChoice | None = None
        try:
            curve = roc_curve(observations)
        except DegenerateInputError as exc:
            logger.warning(
                "roc_skipped_single_class",
                n_positive=exc.n_positive,
                n_negative=exc.n_negative,
            )
        else:
            area = auc(curve)
            optimal = youden_cutoff(observations)
            auc_ci = self._compute_auc_ci(observations)

        # 3. Calibration metrics
        calibration = compute_calibration_metrics(
            observations, n_bins=self._config.calibration.n_bins
        )

        # 4. Metadata
        metadata: dict[str, Any] = {
            "n_observations": len(observations),
            "cutoff": cutoff,
            "seed": self._config.bootstrap.seed,
            "timestamp": datetime.now(UTC).isoformat(),
        }

        logger.info(
            "evaluation_complete",
            n_observations=len(observations),
            cutoff=cutoff,
            accuracy=metrics.accuracy,
            auc=area,
        )

        return EvaluationReport(
            counts=counts,
            metrics=metrics,
            roc=curve,
            auc=area,
            auc_ci=auc_ci,
            optimal_cutoff=optimal,
            calibration=calibration,
            metadata=metadata,
        )

    def sweep(
        self,
        observations: Sequence[Observation],
        cutoffs: Sequence[float] | None = None,
    ) -> list[ThresholdRow]:
        """Classification table at explicit or configured cutoffs.

        Args:
            observations: Scored observations (must not be empty).
            cutoffs: Cutoffs to evaluate; defaults to ``sweep_cutoffs``.

        Returns:
            One ThresholdRow per cutoff.
        """
        if cutoffs is None:
            cutoffs = self._config.sweep_cutoffs
        rows = threshold_table(observations, cutoffs)
        logger.info("threshold_sweep_complete", n_cutoffs=len(rows))
        return rows

    def _compute_auc_ci(
        self,
        observations: Sequence[Observation],
    ) -> BootstrapResult | None:
        """Bootstrap interval for the AUC, if enabled in the config."""
        settings = self._config.bootstrap
        if not settings.enabled:
            return None
        return bootstrap_ci(
            roc_auc,
            observations,
            n_iter=settings.n_iter,
            seed=settings.seed,
            confidence=settings.confidence,
        )
