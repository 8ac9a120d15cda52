"""
Jackson & Pollock 7-site skinfold protocol configuration.

SKINFOLD_SITES is the fixed measurement order used for echoing and summing.

DENSITY_COEFFICIENTS holds the generalized body-density equation per gender:

  density = intercept - linear * S + quadratic * S² - age_coef * age

where S is the sum of the seven skinfolds in mm.
  male:   Jackson & Pollock (1978)
  female: Jackson, Pollock & Ward (1980)
"""

from __future__ import annotations

from dataclasses import dataclass

SKINFOLD_SITES: tuple[str, ...] = (
    "triceps",
    "chest",
    "subscapular",
    "midaxillary",
    "suprailiac",
    "abdominal",
    "thigh",
)


@dataclass(frozen=True, slots=True)
class DensityCoefficients:
    intercept: float
    linear: float
    quadratic: float
    age_coef: float


DENSITY_COEFFICIENTS: dict[str, DensityCoefficients] = {
    "male": DensityCoefficients(intercept=1.112, linear=0.00043499, quadratic=0.00000055, age_coef=0.00028826),
    "female": DensityCoefficients(intercept=1.097, linear=0.00046971, quadratic=0.00000056, age_coef=0.00012828),
}


def get_coefficients(gender: str) -> DensityCoefficients | None:
    return DENSITY_COEFFICIENTS.get(gender)
