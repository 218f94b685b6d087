"""Test statistical helpers."""

import math

import pytest

from hashviz.metrics import gini_coefficient, mean_ci95, summarize_groups


def test_gini():
    assert gini_coefficient([1, 1, 1]) == pytest.approx(0.0)
    assert gini_coefficient([0, 0, 0, 10]) == pytest.approx(0.75)
    assert gini_coefficient([]) == 0.0
    assert gini_coefficient([0, 0]) == 0.0


def test_mean_ci95():
    assert mean_ci95([]) == (0.0, 0.0, 0.0, 0.0)
    assert mean_ci95([2.0]) == (2.0, 2.0, 2.0, 0.0)

    mean, low, high, std = mean_ci95([1.0, 2.0, 3.0])
    margin = 1.96 / math.sqrt(3)
    assert mean == pytest.approx(2.0)
    assert std == pytest.approx(1.0)
    assert low == pytest.approx(2.0 - margin)
    assert high == pytest.approx(2.0 + margin)


def test_summarize_groups():
    rows = [
        {"strategy": "linear", "fill": 0.5, "collisions": 2},
        {"strategy": "linear", "fill": 0.5, "collisions": 4},
        {"strategy": "double", "fill": 0.5, "collisions": 1},
    ]
    result = summarize_groups(rows, ["strategy", "fill"], ["collisions", "missing"])

    assert set(result) == {("linear", 0.5), ("double", 0.5)}
    assert result[("linear", 0.5)]["collisions"]["mean"] == pytest.approx(3.0)
    assert "missing" not in result[("linear", 0.5)]
