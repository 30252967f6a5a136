from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.api.params import parse_positive_id
from storage_api.core.db import get_db
from storage_api.schemas.common import ERROR_RESPONSES, SuccessResponse
from storage_api.schemas.overstay import (
    LocationDefaultsOut,
    LocationOverstayDefaultsOut,
    LocationOverstayDefaultsUpdate,
    PlatformDefaultsOut,
)
from storage_api.services.access import require_location_access
from storage_api.services.auth import Actor, require_manager
from storage_api.services.locations import update_location_overstay_defaults
from storage_api.services.overstay_defaults import (
    get_overstay_platform_defaults,
    location_defaults_of,
    validate_grace_period_days,
    validate_max_penalty_days,
    validate_penalty_rate,
)

router = APIRouter(prefix="/manager", responses=ERROR_RESPONSES)


@router.get("/locations/{location_id}/overstay-penalty-defaults", response_model=LocationOverstayDefaultsOut)
async def get_location_overstay_defaults(
    location_id: str,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> LocationOverstayDefaultsOut:
    lid = parse_positive_id(location_id, "Invalid location ID")
    location = await require_location_access(db, actor.user_id, lid)

    defaults = location_defaults_of(location)
    platform = await get_overstay_platform_defaults(db)

    return LocationOverstayDefaultsOut(
        location_defaults=LocationDefaultsOut(
            grace_period_days=defaults.grace_period_days,
            penalty_rate=defaults.penalty_rate,
            max_penalty_days=defaults.max_penalty_days,
            policy_text=defaults.policy_text,
        ),
        platform_defaults=PlatformDefaultsOut(
            grace_period_days=platform.grace_period_days,
            penalty_rate=platform.penalty_rate,
            max_penalty_days=platform.max_penalty_days,
        ),
        is_using_defaults=defaults.is_using_defaults,
    )


@router.put("/locations/{location_id}/overstay-penalty-defaults", response_model=SuccessResponse)
async def put_location_overstay_defaults(
    location_id: str,
    payload: LocationOverstayDefaultsUpdate,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    lid = parse_positive_id(location_id, "Invalid location ID")
    location = await require_location_access(
        db, actor.user_id, lid, denied_detail="Not authorized to update this location"
    )

    sent = payload.model_fields_set
    updates = {}
    if "grace_period_days" in sent:
        value = payload.grace_period_days
        updates["overstay_grace_period_days"] = None if value is None else validate_grace_period_days(value)
    if "penalty_rate" in sent:
        value = payload.penalty_rate
        updates["overstay_penalty_rate"] = None if value is None else validate_penalty_rate(value)
    if "max_penalty_days" in sent:
        value = payload.max_penalty_days
        updates["overstay_max_penalty_days"] = None if value is None else validate_max_penalty_days(value)
    if "policy_text" in sent:
        updates["overstay_policy_text"] = payload.policy_text or None

    await update_location_overstay_defaults(db, actor=actor, location=location, updates=updates)
    return SuccessResponse(success=True, message="Overstay penalty defaults updated successfully")
