"""Configuration loading for classeval.

Loads the default cutoff, sweep cutoffs, bootstrap and calibration
settings from YAML configuration files for reproducible evaluation.
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from classeval.core.exceptions import ConfigError


class BootstrapConfig(BaseModel):
    """Bootstrap confidence interval settings.

    Attributes:
        enabled: Whether to compute a bootstrap interval for the AUC.
        n_iter: Number of bootstrap resamples.
        seed: Random seed for reproducibility.
        confidence: Nominal interval coverage.
    """

    enabled: bool = True
    n_iter: int = Field(default=1000, ge=1)
    seed: int = 42
    confidence: float = Field(default=0.95, gt=0.0, lt=1.0)


class CalibrationConfig(BaseModel):
    """Calibration diagnostic settings.

    Attributes:
        n_bins: Number of equal-width probability bins.
    """

    n_bins: int = Field(default=10, ge=1)


class EvaluationConfig(BaseModel):
    """Root configuration for classeval.

    Attributes:
        cutoff: Default classification cutoff (positive iff probability > cutoff).
        sweep_cutoffs: Cutoffs reported by a threshold sweep.
        bootstrap: Bootstrap interval settings.
        calibration: Calibration diagnostic settings.
    """

    cutoff: float = 0.5
    sweep_cutoffs: list[float] = Field(
        default_factory=lambda: [x / 10.0 for x in range(1, 10)],
        min_length=1,
    )
    bootstrap: BootstrapConfig = Field(default_factory=BootstrapConfig)
    calibration: CalibrationConfig = Field(default_factory=CalibrationConfig)


def load_config(path: Path) -> EvaluationConfig:
    """Load evaluation configuration from a YAML file.

    Missing sections fall back to their defaults.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        EvaluationConfig with cutoff, sweep, bootstrap and calibration settings.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the file is not valid YAML or fails validation.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config root must be a mapping: {path}"
        raise ConfigError(msg)

    try:
        return EvaluationConfig(**data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}: {exc}"
        raise ConfigError(msg) from exc
