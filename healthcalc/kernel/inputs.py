"""Measurement input records.

One optional slot per measurement. Nothing is validated here: a slot may
hold None, a number, or any junk the caller passed in. Each formula
module decides for itself whether the values it needs are usable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from healthcalc.kernel.skinfold_map import SKINFOLD_SITES


@dataclass(frozen=True, slots=True)
class Skinfolds:
    """Jackson & Pollock 7-site caliper readings (mm)."""

    triceps: Any = None
    chest: Any = None
    subscapular: Any = None
    midaxillary: Any = None
    suprailiac: Any = None
    abdominal: Any = None
    thigh: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Skinfolds:
        return cls(**{site: data.get(site) for site in SKINFOLD_SITES})

    def items(self) -> Iterator[tuple[str, Any]]:
        """(site, raw value) pairs in protocol order."""
        yield ("triceps", self.triceps)
        yield ("chest", self.chest)
        yield ("subscapular", self.subscapular)
        yield ("midaxillary", self.midaxillary)
        yield ("suprailiac", self.suprailiac)
        yield ("abdominal", self.abdominal)
        yield ("thigh", self.thigh)


@dataclass(frozen=True, slots=True)
class MeasurementInput:
    age: Any = None  # years
    gender: Any = None  # "male" | "female"
    height: Any = None  # cm
    weight: Any = None  # kg
    activity: Any = None  # activity factor, 1.0 (sedentary) to 2.0
    skinfolds: Skinfolds = field(default_factory=Skinfolds)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MeasurementInput:
        """Build an input from a bag of named fields.

        Skinfold sites may be given flat (``{"chest": 9}``) or nested under
        ``"skinfolds"``; flat keys win when both are present. Unknown keys
        are ignored.
        """
        nested = data.get("skinfolds")
        sites: dict[str, Any] = dict(nested) if isinstance(nested, Mapping) else {}
        for site in SKINFOLD_SITES:
            if site in data:
                sites[site] = data[site]

        activity = data.get("activity")
        if activity is None:
            activity = data.get("activity_factor")

        return cls(
            age=data.get("age"),
            gender=data.get("gender"),
            height=data.get("height"),
            weight=data.get("weight"),
            activity=activity,
            skinfolds=Skinfolds.from_mapping(sites),
        )
