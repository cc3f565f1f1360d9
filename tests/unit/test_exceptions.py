"""Tests for the custom exception hierarchy."""
from classeval.core.exceptions import (
    ClassEvalError,
    ConfigError,
    DegenerateInputError,
    EmptyInputError,
    InvalidCurveError,
    UndefinedMetricError,
)


def test_base_exception() -> None:
    err = ClassEvalError("base error")
    assert str(err) == "base error"


def test_all_derive_from_base() -> None:
    for cls in (EmptyInputError, InvalidCurveError, ConfigError):
        assert issubclass(cls, ClassEvalError)
    assert isinstance(UndefinedMetricError("ppv"), ClassEvalError)
    assert isinstance(DegenerateInputError("one class"), ClassEvalError)


def test_undefined_metric_stores_name() -> None:
    err = UndefinedMetricError("sensitivity")
    assert err.metric == "sensitivity"
    assert "sensitivity" in str(err)
    assert "zero denominator" in str(err)


def test_undefined_metric_custom_message() -> None:
    err = UndefinedMetricError("npv", "no negative predictions")
    assert str(err) == "no negative predictions"


def test_degenerate_input_stores_class_counts() -> None:
    err = DegenerateInputError("only positives", n_positive=5, n_negative=0)
    assert err.n_positive == 5
    assert err.n_negative == 0
