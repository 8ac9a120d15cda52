"""Pure stateless formula functions: math only, never raises.

Every function takes already-extracted values and returns None when an
argument is missing or the math is undefined (zero height, zero density,
results outside the float range).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from healthcalc.kernel.bmi_bands import list_bands
from healthcalc.kernel.skinfold_map import get_coefficients


def _finite(value: float | None) -> float | None:
    """None for missing, NaN or infinite results."""
    if value is None or not math.isfinite(value):
        return None
    return value


def _as_float(value: float | None) -> float | None:
    """float(value), or None when it is missing or too large for a float."""
    if value is None:
        return None
    try:
        return _finite(float(value))
    except OverflowError:
        return None


# ---------------------------------------------------------------------------
# Rounding helpers
# ---------------------------------------------------------------------------

def round_half_up(value: float | None, ndigits: int = 0) -> float | None:
    """Round half away from zero on the decimal representation.

    round_half_up(2.675, 2) == 2.68, where the builtin round() gives 2.67.
    Values too large to quantize have no fractional digits left to round
    and come back unchanged.
    """
    value = _as_float(value)
    if value is None:
        return None
    quantum = Decimal(1).scaleb(-ndigits)
    try:
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return value


def ceil_int(value: float | None) -> int | None:
    """Round toward positive infinity."""
    if _as_float(value) is None:
        return None
    return math.ceil(value)


# ---------------------------------------------------------------------------
# BMI
# ---------------------------------------------------------------------------

def compute_bmi(weight: float | None, height_cm: float | None) -> float | None:
    """weight / height_m². Unrounded."""
    weight, height_cm = _as_float(weight), _as_float(height_cm)
    if weight is None or height_cm is None:
        return None
    height_m = height_cm / 100
    denominator = height_m * height_m
    if denominator == 0:
        return None
    return _finite(weight / denominator)


def bmi_category(bmi: float | None, legacy: bool = False) -> str | None:
    """Map an unrounded BMI to its band label."""
    if _as_float(bmi) is None:
        return None
    for band in list_bands(legacy):
        if band.upper is None or bmi <= band.upper:
            return band.label
    return None


# ---------------------------------------------------------------------------
# BMR / TDEE
# ---------------------------------------------------------------------------

def harris_benedict_bmr(
    gender: str | None,
    weight: float | None,
    height_cm: float | None,
    age: float | None,
) -> float | None:
    """Revised Harris-Benedict (Roza & Shizgal, 1984). Unrounded kcal/day."""
    weight, height_cm, age = _as_float(weight), _as_float(height_cm), _as_float(age)
    if weight is None or height_cm is None or age is None:
        return None
    if gender == "male":
        return _finite(88 + (13.4 * weight) + (4.8 * height_cm) - (5.7 * age))
    if gender == "female":
        return _finite(448 + (9.2 * weight) + (3.1 * height_cm) - (4.3 * age))
    return None


def mifflin_st_jeor_bmr(
    gender: str | None,
    weight: float | None,
    height_cm: float | None,
    age: float | None,
) -> float | None:
    """Mifflin-St Jeor (1990). Unrounded kcal/day."""
    weight, height_cm, age = _as_float(weight), _as_float(height_cm), _as_float(age)
    if weight is None or height_cm is None or age is None:
        return None
    if gender == "male":
        return _finite((10 * weight) + (6.25 * height_cm) - (5 * age) + 5)
    if gender == "female":
        return _finite((10 * weight) + (6.25 * height_cm) - (5 * age) - 161)
    return None


def katch_mcardle_bmr(lean_mass: float | None) -> float | None:
    """Katch-McArdle: 370 + 21.6 × lean body mass (kg)."""
    lean_mass = _as_float(lean_mass)
    if lean_mass is None:
        return None
    return _finite(370 + (21.6 * lean_mass))


def compute_tdee(bmr: float | None, activity: float | None) -> float | None:
    """BMR scaled by the activity factor. Range checks belong to the caller."""
    bmr, activity = _as_float(bmr), _as_float(activity)
    if bmr is None or activity is None:
        return None
    return _finite(bmr * activity)


# ---------------------------------------------------------------------------
# Jackson & Pollock 7-site body composition
# ---------------------------------------------------------------------------

def body_density_7_site(
    skinfold_sum: int | None,
    age: float | None,
    gender: str | None,
    legacy_female_xor: bool = False,
) -> float | None:
    """Generalized body density (g/cm³) from the sum of 7 skinfolds.

    With `legacy_female_xor` the female quadratic term uses S ^ S, which is
    always 0, matching what the old health class actually computed.
    """
    s, age = _as_float(skinfold_sum), _as_float(age)
    if s is None or age is None or gender is None:
        return None
    coef = get_coefficients(gender)
    if coef is None:
        return None
    squared = s * s
    if legacy_female_xor and gender == "female":
        squared = 0.0  # S ^ S
    return _finite(coef.intercept - (coef.linear * s) + (coef.quadratic * squared) - (coef.age_coef * age))


def siri_body_fat(body_density: float | None) -> float | None:
    """Siri (1961) body-fat fraction: 4.95 / density - 4.5 (0.15 == 15%)."""
    body_density = _as_float(body_density)
    if body_density is None or body_density == 0:
        return None
    return _finite((4.95 / body_density) - 4.5)


def fat_mass(bf_fraction: float | None, weight: float | None) -> float | None:
    """Fat mass in kg, rounded to 3 decimals."""
    bf_fraction, weight = _as_float(bf_fraction), _as_float(weight)
    if bf_fraction is None or weight is None:
        return None
    return round_half_up(bf_fraction * weight, 3)


def lean_mass(weight: float | None, rounded_fat_mass: float | None) -> float | None:
    """Lean mass in kg from the already-rounded fat mass."""
    weight, rounded_fat_mass = _as_float(weight), _as_float(rounded_fat_mass)
    if weight is None or rounded_fat_mass is None:
        return None
    return _finite(weight - rounded_fat_mass)
