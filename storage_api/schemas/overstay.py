from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from storage_api.schemas.common import CamelModel


class PlatformDefaultsOut(CamelModel):
    grace_period_days: int
    penalty_rate: float
    max_penalty_days: int


class LocationDefaultsOut(CamelModel):
    grace_period_days: int | None
    penalty_rate: float | None
    max_penalty_days: int | None
    policy_text: str | None


class LocationOverstayDefaultsOut(CamelModel):
    location_defaults: LocationDefaultsOut
    platform_defaults: PlatformDefaultsOut
    is_using_defaults: bool


class LocationOverstayDefaultsUpdate(CamelModel):
    # An explicit null clears the location value, an absent key leaves it untouched.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    grace_period_days: int | float | str | None = None
    penalty_rate: float | str | None = None
    max_penalty_days: int | float | str | None = None
    policy_text: str | None = None
