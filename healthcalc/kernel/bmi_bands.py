"""BMI category bands, static configuration.

Bands are checked in order; the first band whose upper bound is >= bmi
wins. The last band has no upper bound.

LEGACY_BANDS reproduces the old health class, where the "Obese Class II"
clause could never match (it tested bmi < 35 after every bmi <= 35 had
already been taken), so anything above 35 fell through to Class III.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BmiBand:
    label: str
    upper: float | None  # inclusive; None = open-ended


BMI_BANDS: tuple[BmiBand, ...] = (
    BmiBand("Several Thinness", 16.0),
    BmiBand("Moderate Thinness", 17.0),
    BmiBand("Mild Thinness", 18.5),
    BmiBand("Normal", 25.0),
    BmiBand("Overheight", 30.0),
    BmiBand("Obese Class I", 35.0),
    BmiBand("Obese Class II", 40.0),
    BmiBand("Obese Class III", None),
)

LEGACY_BMI_BANDS: tuple[BmiBand, ...] = tuple(b for b in BMI_BANDS if b.label != "Obese Class II")


def list_bands(legacy: bool = False) -> list[BmiBand]:
    return list(LEGACY_BMI_BANDS if legacy else BMI_BANDS)
