from __future__ import annotations

from domain.calculations import round1, to_number
from domain.dtos import ProteinEstimate, ProteinInput
from domain import reference


PLACEHOLDER = "—"
ENTER_CALORIES = "Enter calories"


def format_number(value: float) -> str:
    """Print a number the way the form shows it: 128.0 -> "128", 42.7 -> "42.7"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def factor_label(est: ProteinEstimate) -> str:
    return f"{format_number(est.selected_factor)} g/kg"


def factor_note(est: ProteinEstimate, use_custom: bool) -> str:
    if use_custom:
        return f"Custom factor: {factor_label(est)}"
    return f"Current factor: {factor_label(est)} (set by goal / activity)"


def result_card(est: ProteinEstimate) -> list[tuple[str, str]]:
    """Rows of the result card. Invalid input shows placeholders instead of numbers."""
    daily = PLACEHOLDER if est.invalid else f"{format_number(est.protein_g)} g"
    per_meal = PLACEHOLDER if est.invalid else f"{format_number(est.per_meal)} g"
    percent = f"{format_number(est.protein_percent)}%" if est.percent_applicable else ENTER_CALORIES
    return [
        ("Weight (kg)", f"{round1(est.weight_kg):.1f} kg"),
        ("Factor used", factor_label(est)),
        ("Protein / day", daily),
        (f"Protein / meal ({format_number(est.meals)}x)", per_meal),
        ("% calories from protein", percent),
        ("MPS heuristic / meal", f"{format_number(est.per_meal_mps)} g (0.25 g/kg)"),
    ]


def format_summary(est: ProteinEstimate) -> str:
    return (
        f"Protein recommendation: {format_number(est.protein_g)} g/day "
        f"({format_number(est.per_meal)} g x {format_number(est.meals)}), "
        f"{format_number(est.protein_percent)}% of {format_number(est.calories)} kcal/day"
    )


def format_card_text(est: ProteinEstimate) -> str:
    width = max(len(label) for label, _ in result_card(est))
    return "\n".join(f"{label.ljust(width)}  {value}" for label, value in result_card(est))


def format_report(est: ProteinEstimate, inp: ProteinInput, title: str = reference.TITLE) -> str:
    """Printable plain-text version of the whole calculator page."""
    weight = f"{format_number(to_number(inp.weight))} {inp.unit}"
    lines = [
        title,
        "=" * len(title),
        reference.SUBTITLE,
        "",
        "Input",
        "-----",
        f"Weight: {weight}",
        f"Age: {format_number(to_number(inp.age))}",
        f"Gender: {inp.gender}",
        f"Activity: {inp.activity}",
        f"Goal: {inp.goal}",
        f"Daily calories: {format_number(to_number(inp.calories))}",
        f"Meals per day: {format_number(to_number(inp.meals))}",
        factor_note(est, inp.use_custom),
        "",
        "Estimate",
        "--------",
        format_card_text(est),
        "",
        reference.TIPS,
        reference.ESTIMATE_NOTE,
        "",
        "Short references",
        "----------------",
    ]
    lines.extend(f"- {ref}" for ref in reference.REFERENCES)
    lines.extend(["", reference.DISCLAIMER])
    return "\n".join(lines) + "\n"
