"""
Overstay penalty defaults.

Values resolve through three layers, highest priority first:
storage listing -> location -> platform. Platform values live in
``platform_settings`` and fall back to OVERSTAY_DEFAULTS when unset.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.models.location import Location
from storage_api.models.platform_setting import PlatformSetting
from storage_api.services.locations import get_location_by_id

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverstayPlatformDefaults:
    grace_period_days: int
    penalty_rate: float  # decimal, 0.10 == 10%
    max_penalty_days: int


@dataclass(frozen=True)
class OverstayLocationDefaults:
    grace_period_days: int | None = None
    penalty_rate: float | None = None
    max_penalty_days: int | None = None
    policy_text: str | None = None

    @property
    def is_using_defaults(self) -> bool:
        return self.grace_period_days is None and self.penalty_rate is None and self.max_penalty_days is None


@dataclass(frozen=True)
class EffectivePenaltyConfig:
    grace_period_days: int
    penalty_rate: float
    max_penalty_days: int
    policy_text: str | None


OVERSTAY_DEFAULTS = OverstayPlatformDefaults(grace_period_days=3, penalty_rate=0.10, max_penalty_days=30)

PLATFORM_SETTING_KEYS = {
    "overstay_grace_period_days": ("grace_period_days", int),
    "overstay_penalty_rate": ("penalty_rate", float),
    "overstay_max_penalty_days": ("max_penalty_days", int),
}

GRACE_PERIOD_RANGE = (0, 14)
PENALTY_RATE_RANGE = (0.0, 0.5)
MAX_PENALTY_DAYS_RANGE = (1, 90)


async def get_overstay_platform_defaults(db: AsyncSession) -> OverstayPlatformDefaults:
    stmt = select(PlatformSetting).where(PlatformSetting.key.in_(list(PLATFORM_SETTING_KEYS)))
    rows = (await db.execute(stmt)).scalars().all()

    values: dict[str, Any] = {
        "grace_period_days": OVERSTAY_DEFAULTS.grace_period_days,
        "penalty_rate": OVERSTAY_DEFAULTS.penalty_rate,
        "max_penalty_days": OVERSTAY_DEFAULTS.max_penalty_days,
    }
    for row in rows:
        field, cast = PLATFORM_SETTING_KEYS[row.key]
        try:
            values[field] = cast(row.value)
        except ValueError:
            log.warning("ignoring malformed platform setting %s=%r", row.key, row.value)

    return OverstayPlatformDefaults(**values)


def location_defaults_of(location: Location | None) -> OverstayLocationDefaults:
    if location is None:
        return OverstayLocationDefaults()
    return OverstayLocationDefaults(
        grace_period_days=location.overstay_grace_period_days,
        penalty_rate=float(location.overstay_penalty_rate) if location.overstay_penalty_rate is not None else None,
        max_penalty_days=location.overstay_max_penalty_days,
        policy_text=location.overstay_policy_text,
    )


async def get_overstay_location_defaults(db: AsyncSession, location_id: int) -> OverstayLocationDefaults:
    return location_defaults_of(await get_location_by_id(db, location_id))


def _first_set(*values: Any) -> Any:
    return next((v for v in values if v is not None), None)


def resolve_listing_overstay_fields(
    supplied: dict[str, Any],
    location_defaults: OverstayLocationDefaults,
) -> dict[str, Any]:
    """
    Fill the four overstay columns for a new listing.
    A value supplied by the caller is kept as-is (0 included); otherwise the
    location default applies, then the literal fallback. Policy text has no
    literal fallback.
    """
    return {
        "overstay_grace_period_days": _first_set(
            supplied.get("overstay_grace_period_days"),
            location_defaults.grace_period_days,
            OVERSTAY_DEFAULTS.grace_period_days,
        ),
        "overstay_penalty_rate": _first_set(
            supplied.get("overstay_penalty_rate"),
            location_defaults.penalty_rate,
            OVERSTAY_DEFAULTS.penalty_rate,
        ),
        "overstay_max_penalty_days": _first_set(
            supplied.get("overstay_max_penalty_days"),
            location_defaults.max_penalty_days,
            OVERSTAY_DEFAULTS.max_penalty_days,
        ),
        "overstay_policy_text": _first_set(
            supplied.get("overstay_policy_text"),
            location_defaults.policy_text,
        ),
    }


async def get_effective_penalty_config(
    db: AsyncSession,
    *,
    listing_grace_period_days: int | None,
    listing_penalty_rate: float | str | None,
    listing_max_penalty_days: int | None,
    location_id: int | None = None,
) -> EffectivePenaltyConfig:
    platform = await get_overstay_platform_defaults(db)
    location = (
        await get_overstay_location_defaults(db, location_id) if location_id else OverstayLocationDefaults()
    )

    if isinstance(listing_penalty_rate, str):
        listing_penalty_rate = float(listing_penalty_rate)

    return EffectivePenaltyConfig(
        grace_period_days=_first_set(listing_grace_period_days, location.grace_period_days, platform.grace_period_days),
        penalty_rate=_first_set(listing_penalty_rate, location.penalty_rate, platform.penalty_rate),
        max_penalty_days=_first_set(listing_max_penalty_days, location.max_penalty_days, platform.max_penalty_days),
        policy_text=location.policy_text,
    )


def _parse_number(value: Any, cast: type) -> Any:
    if value is None or isinstance(value, bool):
        return None
    try:
        return cast(value)
    except (TypeError, ValueError, OverflowError):
        return None


def validate_grace_period_days(value: Any) -> int:
    low, high = GRACE_PERIOD_RANGE
    value = _parse_number(value, int)
    if value is None or not low <= value <= high:
        raise HTTPException(status_code=400, detail="Grace period must be between 0 and 14 days")
    return value


def validate_penalty_rate(value: Any) -> float:
    low, high = PENALTY_RATE_RANGE
    value = _parse_number(value, float)
    # NaN fails the range comparison
    if value is None or not low <= value <= high:
        raise HTTPException(status_code=400, detail="Penalty rate must be between 0 and 0.50 (50%)")
    return value


def validate_max_penalty_days(value: Any) -> int:
    low, high = MAX_PENALTY_DAYS_RANGE
    value = _parse_number(value, int)
    if value is None or not low <= value <= high:
        raise HTTPException(status_code=400, detail="Max penalty days must be between 1 and 90")
    return value
