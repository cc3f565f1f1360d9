"""Core enumerations for classeval."""
from enum import StrEnum


class Metric(StrEnum):
    """Named metric in a MetricSet."""

    ACCURACY = "accuracy"
    SENSITIVITY = "sensitivity"
    SPECIFICITY = "specificity"
    PPV = "ppv"
    NPV = "npv"
