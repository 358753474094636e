from __future__ import annotations

from domain.calculations import (
    mps_per_meal,
    protein_kcal,
    protein_percent,
    round1,
    select_factor,
    split_per_meal,
    to_number,
    weight_to_kg,
)
from domain.dtos import ProteinEstimate, ProteinInput


def is_invalid(*, weight_kg: float, age: float, calories: float, meals: float) -> bool:
    return weight_kg <= 0 or age <= 0 or calories < 0 or meals <= 0


def estimate(inp: ProteinInput) -> ProteinEstimate:
    # 1) Weight in kg
    weight_kg = weight_to_kg(inp.weight, inp.unit)

    # 2) Effective g/kg factor: custom > goal > activity
    factor = select_factor(
        goal=inp.goal,
        activity=inp.activity,
        use_custom=inp.use_custom,
        custom_factor=inp.custom_factor,
    )

    # 3) Daily protein and derived metrics
    age = to_number(inp.age)
    calories = to_number(inp.calories)
    meals = to_number(inp.meals)

    protein_g = round1(weight_kg * factor)
    kcal = protein_kcal(protein_g)

    return ProteinEstimate(
        weight_kg=weight_kg,
        selected_factor=factor,
        protein_g=protein_g,
        protein_kcal=kcal,
        protein_percent=protein_percent(kcal, calories),
        per_meal=split_per_meal(protein_g, meals),
        per_meal_mps=mps_per_meal(weight_kg),
        meals=meals,
        calories=calories,
        invalid=is_invalid(weight_kg=weight_kg, age=age, calories=calories, meals=meals),
    )
