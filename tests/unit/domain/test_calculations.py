"""Unit tests for calculation building blocks."""

import math

import pytest

from domain.calculations import (
    LB_TO_KG,
    factor_from_activity,
    factor_from_goal,
    mps_per_meal,
    protein_percent,
    round1,
    select_factor,
    snap_custom_factor,
    split_per_meal,
    to_number,
    weight_to_kg,
)


class TestRound1:
    """Half-up rounding at one decimal."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0.05, 0.1), (0.15, 0.2), (2.25, 2.3), (1.04, 1.0), (20.48, 20.5), (63.865805696, 63.9), (0.0, 0.0)],
    )
    def test_half_up(self, value, expected):
        assert round1(value) == expected

    @pytest.mark.parametrize("value", [1e15, 1e27, 1e30, -1e300, 1.8e308])
    def test_large_values_pass_through(self, value):
        assert round1(value) == value

    def test_non_finite_values_pass_through(self):
        assert round1(float("inf")) == float("inf")
        assert math.isnan(round1(float("nan")))


class TestToNumber:
    """Defensive numeric coercion."""

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", [1], {"a": 1}, float("nan"), float("inf")])
    def test_unusable_values_become_zero(self, value):
        assert to_number(value) == 0.0

    def test_numeric_strings_are_parsed(self):
        assert to_number("70") == 70.0
        assert to_number(" 1.5 ") == 1.5

    def test_numbers_pass_through(self):
        assert to_number(3) == 3.0
        assert to_number(-2.5) == -2.5


class TestWeightToKg:
    """Weight normalization."""

    @pytest.mark.parametrize("pounds", [0, 1, 100, 176, 250.5])
    def test_pounds_converted(self, pounds):
        assert math.isclose(weight_to_kg(pounds, "lb"), pounds * 0.45359237, abs_tol=1e-6)

    def test_kg_passes_through(self):
        assert weight_to_kg(80, "kg") == 80.0

    def test_unknown_unit_passes_through(self):
        assert weight_to_kg(80, "stone") == 80.0

    def test_negative_and_garbage_weight_is_zero(self):
        assert weight_to_kg(-5, "kg") == 0.0
        assert weight_to_kg(-5, "lb") == 0.0
        assert weight_to_kg("heavy", "kg") == 0.0

    def test_constant(self):
        assert LB_TO_KG == 0.45359237


class TestFactorSelection:
    """Custom factor beats goal, goal beats activity."""

    @pytest.mark.parametrize("activity", ["sedentary", "moderately_active", "active", "athlete", "unknown"])
    def test_hypertrophy_ignores_activity(self, activity):
        assert select_factor(goal="hypertrophy", activity=activity, use_custom=False, custom_factor=1.0) == 1.6

    @pytest.mark.parametrize(
        "goal, factor",
        [("weight_loss", 1.8), ("older_adult", 1.2), ("pregnancy", 1.1)],
    )
    def test_goal_fixed_factors(self, goal, factor):
        assert select_factor(goal=goal, activity="athlete", use_custom=False, custom_factor=1.0) == factor

    @pytest.mark.parametrize(
        "activity, factor",
        [("sedentary", 0.8), ("moderately_active", 1.0), ("active", 1.4), ("athlete", 1.6)],
    )
    def test_maintenance_uses_activity(self, activity, factor):
        assert select_factor(goal="maintenance", activity=activity, use_custom=False, custom_factor=1.0) == factor

    def test_unknown_activity_defaults(self):
        assert factor_from_activity("couch") == 0.8

    def test_unknown_goal_falls_back_to_activity(self):
        assert factor_from_goal("bulk") is None
        assert select_factor(goal="bulk", activity="active", use_custom=False, custom_factor=1.0) == 1.4

    def test_custom_factor_wins(self):
        assert select_factor(goal="weight_loss", activity="athlete", use_custom=True, custom_factor=2.4) == 2.4

    def test_non_positive_custom_factor_is_ignored(self):
        assert select_factor(goal="pregnancy", activity="athlete", use_custom=True, custom_factor=0) == 1.1
        assert select_factor(goal="maintenance", activity="active", use_custom=True, custom_factor="x") == 1.4

    def test_custom_factor_unused_when_flag_off(self):
        assert select_factor(goal="maintenance", activity="sedentary", use_custom=False, custom_factor=2.4) == 0.8


class TestDerivedMetrics:
    """Percent, per-meal split and MPS heuristic."""

    def test_percent_without_calories_is_zero(self):
        assert protein_percent(512.0, 0) == 0.0
        assert protein_percent(512.0, -100) == 0.0

    def test_percent(self):
        assert protein_percent(512.0, 2500) == 20.5

    def test_split_without_meals_returns_total(self):
        assert split_per_meal(128.0, 0) == 128.0

    def test_split(self):
        assert split_per_meal(128.0, 3) == 42.7

    def test_mps(self):
        assert mps_per_meal(80) == 20.0
        assert mps_per_meal(70.3) == 17.6


class TestSnapCustomFactor:
    """Slider range 0.5-3.0 in 0.1 steps."""

    @pytest.mark.parametrize(
        "value, expected",
        [(5, 3.0), (0.1, 0.5), (1.25, 1.3), (1.6, 1.6), ("2.04", 2.0), ("x", 0.5)],
    )
    def test_snap(self, value, expected):
        assert snap_custom_factor(value) == expected
