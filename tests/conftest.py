"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest

from healthcalc.config import Settings
from healthcalc.kernel.inputs import MeasurementInput, Skinfolds


SAMPLE_SKINFOLDS: dict[str, int] = {
    "triceps": 6,
    "chest": 9,
    "subscapular": 13,
    "midaxillary": 9,
    "suprailiac": 8,
    "abdominal": 15,
    "thigh": 11,
}  # sum = 71


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def default_settings() -> Settings:
    """Defaults only, regardless of HEALTHCALC_* variables in the environment."""
    return Settings(
        activity_min=1.0,
        activity_max=2.0,
        legacy_bmi_bands=False,
        legacy_female_density_xor=False,
        katch_mcardle_unbounded_activity=False,
    )


@pytest.fixture()
def legacy_settings() -> Settings:
    return Settings(
        legacy_bmi_bands=True,
        legacy_female_density_xor=True,
        katch_mcardle_unbounded_activity=True,
    )


def make_input(**overrides: Any) -> MeasurementInput:
    """Helper to build the 46-year-old male sample with all inputs present.

    Pass skinfolds={...} to replace individual sites (merged over the sample),
    or skinfolds=None to drop them all.
    """
    fields: dict[str, Any] = dict(age=46, gender="male", height=168, weight=80, activity=1.2)
    sites: dict[str, Any] | None = dict(SAMPLE_SKINFOLDS)
    if "skinfolds" in overrides:
        replacement = overrides.pop("skinfolds")
        sites = None if replacement is None else {**SAMPLE_SKINFOLDS, **replacement}
    fields.update(overrides)
    return MeasurementInput(
        skinfolds=Skinfolds.from_mapping(sites) if sites is not None else Skinfolds(),
        **fields,
    )
