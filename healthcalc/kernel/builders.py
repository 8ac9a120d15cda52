"""Report builders, the kernel.

Each section builder re-validates the inputs it needs, runs the formulas
from `features` and returns its section model, or None when a
precondition fails. compute_report stitches the sections together.
Graceful degradation: missing data never raises.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping

from healthcalc.config import Settings, settings as default_settings
from healthcalc.kernel import extractor, features
from healthcalc.kernel.inputs import MeasurementInput, Skinfolds
from healthcalc.kernel.models import (
    BmiResult,
    EnergyExpenditure,
    Measurements,
    Report,
    SkinfoldProtocol,
)

logger = logging.getLogger(__name__)


def _as_input(inputs: MeasurementInput | Mapping[str, Any]) -> MeasurementInput:
    if isinstance(inputs, MeasurementInput):
        if isinstance(inputs.skinfolds, Mapping):
            return dataclasses.replace(inputs, skinfolds=Skinfolds.from_mapping(inputs.skinfolds))
        if not isinstance(inputs.skinfolds, Skinfolds):
            return dataclasses.replace(inputs, skinfolds=Skinfolds())
        return inputs
    if isinstance(inputs, Mapping):
        return MeasurementInput.from_mapping(inputs)
    raise TypeError(f"expected MeasurementInput or mapping, got {type(inputs).__name__}")


def _energy_section(
    bmr: float | None,
    activity: float | None,
) -> EnergyExpenditure | None:
    """Ceil the BMR and, when an activity factor was accepted, the TDEE."""
    if bmr is None:
        return None
    tdee = features.compute_tdee(bmr, activity)
    return EnergyExpenditure(bmr=features.ceil_int(bmr), tdee=features.ceil_int(tdee))


def _ranged_activity(inp: MeasurementInput, cfg: Settings) -> float | None:
    return extractor.usable_activity(inp.activity, cfg.activity_min, cfg.activity_max)


# ---------------------------------------------------------------------------
# Section builders
# ---------------------------------------------------------------------------

def build_bmi(inp: MeasurementInput, cfg: Settings) -> BmiResult | None:
    weight = extractor.usable_number(inp.weight)
    height = extractor.usable_number(inp.height)
    # Age does not enter the formula but gates the section.
    if extractor.usable_number(inp.age) is None:
        logger.debug("bmi skipped: age unusable")
        return None

    bmi = features.compute_bmi(weight, height)
    if bmi is None:
        logger.debug("bmi skipped: weight/height unusable")
        return None

    return BmiResult(
        value=features.round_half_up(bmi, 1),
        category=features.bmi_category(bmi, legacy=cfg.legacy_bmi_bands),
    )


def echo_skinfolds(skinfolds: Skinfolds) -> dict[str, int | float]:
    """Numeric skinfold readings as given, integral or not."""
    echoed: dict[str, int | float] = {}
    for site, raw in skinfolds.items():
        value = extractor.usable_number(raw)
        if value is not None:
            echoed[site] = value
    return echoed


def build_skinfold_protocol(inp: MeasurementInput, cfg: Settings) -> SkinfoldProtocol | None:
    """Jackson & Pollock 7-site body composition.

    Gated on all seven skinfolds being integers plus a valid gender and a
    usable age; the section is absent otherwise. Weight is optional: without
    it the fatmass and leanmass fields are left out.
    """
    values: list[int] = []
    for site, raw in inp.skinfolds.items():
        value = extractor.usable_skinfold(raw)
        if value is None:
            logger.debug("prot_7_skinfolds skipped: %s missing or not an integer", site)
            return None
        values.append(value)

    skinfold_sum = sum(values)
    density = features.body_density_7_site(
        skinfold_sum,
        extractor.usable_number(inp.age),
        extractor.usable_gender(inp.gender),
        legacy_female_xor=cfg.legacy_female_density_xor,
    )
    bf = features.siri_body_fat(density)
    bf_pct = features.round_half_up(bf * 100, 2) if bf is not None else None
    if density is None or bf_pct is None:
        logger.debug("prot_7_skinfolds skipped: gender/age unusable or density undefined")
        return None

    weight = extractor.usable_number(inp.weight)
    fatmass = features.fat_mass(bf, weight)
    return SkinfoldProtocol(
        skinfoldsum=skinfold_sum,
        body_density=density,
        bf=bf_pct,
        fatmass=fatmass,
        leanmass=features.lean_mass(weight, fatmass),
    )


def build_harris_benedict(inp: MeasurementInput, cfg: Settings) -> EnergyExpenditure | None:
    bmr = features.harris_benedict_bmr(
        extractor.usable_gender(inp.gender),
        extractor.usable_number(inp.weight),
        extractor.usable_number(inp.height),
        extractor.usable_number(inp.age),
    )
    if bmr is None:
        logger.debug("harris_benedict skipped: gender/weight/height/age unusable")
    return _energy_section(bmr, _ranged_activity(inp, cfg))


def build_katch_mcardle(
    inp: MeasurementInput,
    protocol: SkinfoldProtocol | None,
    cfg: Settings,
) -> EnergyExpenditure | None:
    """Katch-McArdle BMR from the lean mass of the skinfold protocol."""
    lean = extractor.usable_number(protocol.leanmass) if protocol is not None else None
    if lean is None:
        logger.debug("katch_mcardle skipped: no lean mass")
        return None

    if cfg.katch_mcardle_unbounded_activity:
        activity = extractor.usable_number(inp.activity)
    else:
        activity = _ranged_activity(inp, cfg)
    return _energy_section(features.katch_mcardle_bmr(lean), activity)


def build_mifflin_st_jeor(inp: MeasurementInput, cfg: Settings) -> EnergyExpenditure | None:
    bmr = features.mifflin_st_jeor_bmr(
        extractor.usable_gender(inp.gender),
        extractor.usable_number(inp.weight),
        extractor.usable_number(inp.height),
        extractor.usable_number(inp.age),
    )
    if bmr is None:
        logger.debug("mifflin_st_jeor skipped: gender/weight/height/age unusable")
    return _energy_section(bmr, _ranged_activity(inp, cfg))


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def compute_report(
    inputs: MeasurementInput | Mapping[str, Any],
    settings: Settings | None = None,
) -> Report:
    """Build a fresh report from whichever inputs are usable.

    Sections whose preconditions fail are left out. Only a non-mapping
    `inputs` raises (TypeError).
    """
    inp = _as_input(inputs)
    cfg = settings if settings is not None else default_settings

    bmi = build_bmi(inp, cfg)
    skinfolds = echo_skinfolds(inp.skinfolds)
    protocol = build_skinfold_protocol(inp, cfg)
    harris_benedict = build_harris_benedict(inp, cfg)
    katch_mcardle = build_katch_mcardle(inp, protocol, cfg)
    mifflin_st_jeor = build_mifflin_st_jeor(inp, cfg)

    measurements = Measurements(
        height=extractor.usable_number(inp.height),
        weight=extractor.usable_number(inp.weight),
        age=extractor.usable_number(inp.age),
        gender=extractor.usable_gender(inp.gender),
        skinfolds=skinfolds,
        bmi=bmi,
        harris_benedict=harris_benedict,
        prot_7_skinfolds=protocol,
        katch_mcardle=katch_mcardle,
        mifflin_st_jeor=mifflin_st_jeor,
    )

    sections = {
        "bmi": bmi,
        "harris_benedict": harris_benedict,
        "prot_7_skinfolds": protocol,
        "katch_mcardle": katch_mcardle,
        "mifflin_st_jeor": mifflin_st_jeor,
    }
    computed = [name for name, section in sections.items() if section is not None]
    logger.debug("report computed %d section(s): %s", len(computed), ", ".join(computed) or "none")

    return Report(measurements=measurements)
