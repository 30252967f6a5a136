from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from storage_api.schemas.common import CamelModel


class StorageListingCreate(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # Required fields are checked by the handler so the 400 message matches the API contract.
    kitchen_id: int | str | None = None
    name: str | None = None
    storage_type: str | None = None
    pricing_model: str | None = None
    base_price: int | None = None

    description: str | None = None
    price_per_cubic_foot: int | None = None
    minimum_booking_duration: int | None = None
    booking_duration_unit: str | None = None
    currency: str | None = None
    features: list[str] | None = None

    overstay_grace_period_days: int | None = None
    overstay_penalty_rate: float | None = None
    overstay_max_penalty_days: int | None = None
    overstay_policy_text: str | None = None


class StorageListingUpdate(CamelModel):
    """
    Field patch applied verbatim to an existing listing.
    Only keys present in the request body are written.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    kitchen_id: int | None = None
    name: str | None = None
    description: str | None = None
    storage_type: str | None = None
    pricing_model: str | None = None
    base_price: int | None = None
    price_per_cubic_foot: int | None = None
    minimum_booking_duration: int | None = None
    booking_duration_unit: str | None = None
    currency: str | None = None
    status: str | None = None
    is_active: bool | None = None
    features: list[str] | None = None

    overstay_grace_period_days: int | None = None
    overstay_penalty_rate: float | None = None
    overstay_max_penalty_days: int | None = None
    overstay_policy_text: str | None = None


class PenaltyConfigUpdate(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # Numbers arrive loosely typed; the range validators parse them.
    overstay_grace_period_days: int | float | str | None = None
    overstay_penalty_rate: float | str | None = None
    overstay_max_penalty_days: int | float | str | None = None
    overstay_policy_text: str | None = None


class StorageListingOut(CamelModel):
    id: int
    kitchen_id: int
    name: str
    description: str | None
    storage_type: str
    pricing_model: str
    base_price: int
    price_per_cubic_foot: int | None
    minimum_booking_duration: int
    booking_duration_unit: str
    currency: str
    status: str
    is_active: bool
    features: list = Field(default_factory=list)

    overstay_grace_period_days: int | None
    overstay_penalty_rate: float | None
    overstay_max_penalty_days: int | None
    overstay_policy_text: str | None

    created_at: datetime | None = None
    updated_at: datetime | None = None
