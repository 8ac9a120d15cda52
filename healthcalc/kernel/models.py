"""Metrics report contract: Pydantic v2 models.

A section that could not be computed is None on the model and is dropped
from to_dict() / JSON output, so absence (never null) is the only signal
that its inputs were missing or invalid.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BmiResult(BaseModel):
    value: float  # 1 decimal
    category: str


class EnergyExpenditure(BaseModel):
    """BMR and optional TDEE, kcal/day, both rounded up."""

    bmr: int
    tdee: int | None = None


class SkinfoldProtocol(BaseModel):
    skinfoldsum: int
    body_density: float  # g/cm³
    bf: float  # percent, 2 decimals
    fatmass: float | None = None  # kg, 3 decimals; needs weight
    leanmass: float | None = None  # kg; needs weight


class Measurements(BaseModel):
    # Echo of the usable raw inputs
    height: int | float | None = None
    weight: int | float | None = None
    age: int | float | None = None
    gender: str | None = None
    skinfolds: dict[str, int | float] = Field(default_factory=dict)

    # Derived sections
    bmi: BmiResult | None = None
    harris_benedict: EnergyExpenditure | None = None
    prot_7_skinfolds: SkinfoldProtocol | None = None
    katch_mcardle: EnergyExpenditure | None = None
    mifflin_st_jeor: EnergyExpenditure | None = None


class Report(BaseModel):
    """Top-level report object, always constructible."""

    measurements: Measurements = Field(default_factory=Measurements)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
