from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProteinInput:
    weight: Any = 70
    unit: str = "kg"  # kg|lb
    age: Any = 28
    gender: str = "male"  # male|female|other
    activity: str = "sedentary"
    goal: str = "maintenance"
    calories: Any = 2500
    meals: Any = 3
    custom_factor: Any = 1.0
    use_custom: bool = False


@dataclass(frozen=True)
class ProteinEstimate:
    weight_kg: float
    selected_factor: float
    protein_g: float
    protein_kcal: float
    protein_percent: float
    per_meal: float
    per_meal_mps: float
    meals: float
    calories: float
    invalid: bool = False

    @property
    def percent_applicable(self) -> bool:
        return self.calories > 0
