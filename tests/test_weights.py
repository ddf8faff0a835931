"""
Unit tests for metric weight normalization.
"""

import numpy as np
import pytest

from job_transitions.errors import DegenerateWeightError, InvalidWeightError
from job_transitions.metrics import METRICS, Metric
from job_transitions.weights import normalize, uniform_weights, weight_key


def weights(**overrides):
    base = {metric.value: 0.2 for metric in METRICS}
    base.update(overrides)
    return base


def test_normalize_sums_to_one():
    result = normalize(weights(skills=0.9, ability=0.05, age=0.3, income=0.0, gender=0.41))
    assert np.isclose(sum(result.values()), 1.0)


def test_normalize_keys_are_metrics_in_order():
    result = normalize(weights())
    assert list(result) == list(METRICS)
    assert all(np.isclose(v, 0.2) for v in result.values())


def test_normalize_divides_by_total():
    result = normalize(weights(skills=1.0, ability=1.0, age=0.0, income=0.0, gender=2.0))
    assert np.isclose(result[Metric.SKILLS], 0.25)
    assert np.isclose(result[Metric.GENDER], 0.5)
    assert result[Metric.AGE] == 0.0


@pytest.mark.parametrize("factor", [0.001, 3.0, 250.0])
def test_normalize_is_scale_invariant(factor):
    raw = weights(skills=0.7, ability=0.1, age=0.05, income=0.5, gender=0.2)
    scaled = {key: value * factor for key, value in raw.items()}
    assert np.allclose(weight_key(normalize(raw)), weight_key(normalize(scaled)))


def test_normalize_accepts_metric_keys():
    raw = {metric: 1.0 for metric in METRICS}
    assert normalize(raw) == normalize({metric.value: 1.0 for metric in METRICS})


def test_all_zero_weights_are_degenerate():
    with pytest.raises(DegenerateWeightError):
        normalize(weights(skills=0, ability=0, age=0, income=0, gender=0))


def test_negative_weight_is_rejected():
    with pytest.raises(InvalidWeightError) as excinfo:
        normalize(weights(income=-0.1))
    assert excinfo.value.metric == "income"


def test_nan_weight_is_rejected():
    with pytest.raises(InvalidWeightError):
        normalize(weights(age=float("nan")))


def test_unknown_metric_is_rejected():
    raw = weights()
    raw["skill"] = raw.pop("skills")
    with pytest.raises(InvalidWeightError) as excinfo:
        normalize(raw)
    assert excinfo.value.metric == "skill"


def test_missing_metric_is_rejected():
    raw = weights()
    del raw["gender"]
    with pytest.raises(InvalidWeightError, match="gender"):
        normalize(raw)


def test_errors_are_value_errors():
    try:
        normalize(weights(skills=0, ability=0, age=0, income=0, gender=0))
        assert False, "Expected ValueError"
    except ValueError:
        assert True


def test_uniform_weights():
    result = uniform_weights()
    assert list(result) == list(METRICS)
    assert np.isclose(sum(result.values()), 1.0)
    assert len(set(result.values())) == 1
