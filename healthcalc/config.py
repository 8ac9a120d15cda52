from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # TDEE is only reported for activity factors inside this range (inclusive).
    activity_min: float = 1.0
    activity_max: float = 2.0

    # Compatibility switches. Each one restores a quirk of the legacy health class.
    legacy_bmi_bands: bool = False  # every bmi > 35 is "Obese Class III"
    legacy_female_density_xor: bool = False  # female density drops the S² term
    katch_mcardle_unbounded_activity: bool = False  # Katch-McArdle TDEE skips the range check

    model_config = {"env_prefix": "HEALTHCALC_", "env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _check_activity_range(self) -> "Settings":
        if self.activity_min > self.activity_max:
            raise ValueError("activity_min must not exceed activity_max")
        return self


settings = Settings()
