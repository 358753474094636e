from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Literal

from domain.calculations import LB_TO_KG, snap_custom_factor, to_number
from domain.dtos import ProteinEstimate, ProteinInput
from domain.errors import InvalidInputError
from domain.use_cases.estimate_protein import estimate


Unit = Literal["kg", "lb"]
Gender = Literal["male", "female", "other"]
Activity = Literal["sedentary", "moderately_active", "active", "athlete"]
Goal = Literal["maintenance", "hypertrophy", "weight_loss", "older_adult", "pregnancy"]


@dataclass(frozen=True)
class Preset:
    key: str
    label: str
    factor: float


PRESETS: tuple[Preset, ...] = (
    Preset("rda_adult", "RDA (adult)", 0.8),
    Preset("older_adult", "Older adult", 1.2),
    Preset("active_endurance", "Active / endurance", 1.4),
    Preset("strength_hypertrophy", "Strength / hypertrophy", 1.6),
    Preset("high_cut", "High (cut/retain LBM)", 1.8),
    Preset("very_high", "Very high (bodybuilders)", 2.2),
)


def get_preset(key: str) -> Preset:
    for preset in PRESETS:
        if preset.key == key:
            return preset
    raise InvalidInputError(f"Unknown preset: {key}")


@dataclass
class ProteinForm:
    """Editable input snapshot behind the calculator form."""

    weight: float = 70
    unit: Unit = "kg"
    age: float = 28
    gender: Gender = "male"
    activity: Activity = "sedentary"
    goal: Goal = "maintenance"
    calories: float = 2500
    meals: float = 3
    custom_factor: float = 1.0
    use_custom: bool = False

    def to_input(self) -> ProteinInput:
        return ProteinInput(**asdict(self))

    def estimate(self) -> ProteinEstimate:
        return estimate(self.to_input())

    def set_custom_factor(self, value: Any) -> None:
        self.custom_factor = snap_custom_factor(value)

    def apply_preset(self, key: str) -> Preset:
        # A preset pins the factor: custom mode stays on until switched off,
        # later goal/activity edits do not override it.
        preset = get_preset(key)
        self.goal = "maintenance"
        self.activity = "sedentary"
        self.custom_factor = preset.factor
        self.use_custom = True
        return preset

    def weight_hint(self) -> str:
        if self.unit != "lb":
            return ""
        return f"{to_number(self.weight) * LB_TO_KG:.1f} kg"

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ProteinForm":
        data = data or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
