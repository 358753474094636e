from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from domain.calculations import to_number
from domain.entities import ProteinForm


class ProteinInputSchema(BaseModel):
    weight: float = Field(70, examples=[80])
    unit: Literal["kg", "lb"] = Field("kg", examples=["kg"])
    age: float = Field(28, examples=[30])
    gender: Literal["male", "female", "other"] = Field("male", examples=["male"])
    activity: Literal["sedentary", "moderately_active", "active", "athlete"] = Field(
        "sedentary", examples=["active"]
    )
    goal: Literal["maintenance", "hypertrophy", "weight_loss", "older_adult", "pregnancy"] = Field(
        "maintenance", examples=["hypertrophy"]
    )
    calories: float = Field(2500, examples=[2500])
    meals: float = Field(3, examples=[4])
    custom_factor: float = Field(1.0, examples=[1.6])
    use_custom: bool = False

    # Numbers are coerced, never rejected: garbage becomes 0 and the
    # estimate comes back flagged invalid instead of a 422.
    @field_validator("weight", "age", "calories", "meals", "custom_factor", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any) -> float:
        return to_number(v)

    def to_form(self) -> ProteinForm:
        return ProteinForm(**self.model_dump())


class EstimateSchema(BaseModel):
    weight_kg: float
    selected_factor: float
    protein_g: float
    protein_kcal: float
    protein_percent: float
    percent_applicable: bool
    per_meal: float
    per_meal_mps: float
    meals: float
    calories: float
    invalid: bool


class CardRow(BaseModel):
    label: str
    value: str


class EstimateResponse(BaseModel):
    estimate: EstimateSchema
    card: list[CardRow]
    factor_label: str
    factor_note: str
    weight_hint: str = ""
    summary: str


class PresetSchema(BaseModel):
    key: str
    label: str
    factor: float


class PresetApplyInput(BaseModel):
    form: ProteinInputSchema = Field(default_factory=ProteinInputSchema)
    preset: str = Field(..., min_length=1, examples=["strength_hypertrophy"])


class APIResponse(BaseModel):
    ok: bool = True
    data: dict | None = None
    error: dict | None = None
