from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


LB_TO_KG = 0.45359237
KCAL_PER_G_PROTEIN = 4.0
MPS_G_PER_KG_PER_MEAL = 0.25
DEFAULT_FACTOR = 0.8

CUSTOM_FACTOR_MIN = 0.5
CUSTOM_FACTOR_MAX = 3.0


ACTIVITY_FACTORS = {
    "sedentary": 0.8,
    "moderately_active": 1.0,
    "active": 1.4,
    "athlete": 1.6,
}

# None: factor comes from activity
GOAL_FACTORS: dict[str, float | None] = {
    "maintenance": None,
    "hypertrophy": 1.6,
    "weight_loss": 1.8,
    "older_adult": 1.2,
    "pregnancy": 1.1,
}


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def to_number(value: Any) -> float:
    """Best-effort numeric coercion: anything unusable becomes 0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(num) or math.isinf(num):
        return 0.0
    return num


def round1(value: float) -> float:
    """Round half-up to one decimal place.

    Works on the shortest repr of the float, so 0.05 -> 0.1 and 2.25 -> 2.3
    regardless of how the binary value sits around the boundary.
    """
    value = float(value)
    # Past 1e15 float spacing is already ~0.1; non-finite values pass through
    if not math.isfinite(value) or abs(value) >= 1e15:
        return value
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def weight_to_kg(weight: Any, unit: str) -> float:
    kg = to_number(weight)
    if kg < 0:
        return 0.0
    if unit == "lb":
        return kg * LB_TO_KG
    return kg


def factor_from_activity(activity: str) -> float:
    return ACTIVITY_FACTORS.get(activity, DEFAULT_FACTOR)


def factor_from_goal(goal: str) -> float | None:
    return GOAL_FACTORS.get(goal)


def select_factor(*, goal: str, activity: str, use_custom: bool, custom_factor: Any) -> float:
    custom = to_number(custom_factor)
    if use_custom and custom > 0:
        return custom
    fixed = factor_from_goal(goal)
    if fixed:
        return fixed
    return factor_from_activity(activity)


def protein_kcal(protein_g: float) -> float:
    return protein_g * KCAL_PER_G_PROTEIN


def protein_percent(kcal: float, calories: float) -> float:
    if calories <= 0:
        return 0.0
    return round1(kcal / calories * 100)


def split_per_meal(protein_g: float, meals: float) -> float:
    if meals <= 0:
        return protein_g
    return round1(protein_g / meals)


def mps_per_meal(weight_kg: float) -> float:
    return round1(weight_kg * MPS_G_PER_KG_PER_MEAL)


def snap_custom_factor(value: Any) -> float:
    """Clamp to the slider range and snap to its 0.1 step."""
    return round1(clamp(to_number(value), CUSTOM_FACTOR_MIN, CUSTOM_FACTOR_MAX))
