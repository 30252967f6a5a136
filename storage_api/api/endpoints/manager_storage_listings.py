from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.api.params import parse_positive_id
from storage_api.core.db import get_db
from storage_api.schemas.common import ERROR_RESPONSES, SuccessResponse
from storage_api.schemas.storage_listing import (
    PenaltyConfigUpdate,
    StorageListingCreate,
    StorageListingOut,
    StorageListingUpdate,
)
from storage_api.services.access import require_kitchen_access, require_listing_access
from storage_api.services.auth import Actor, require_manager
from storage_api.services.overstay_defaults import (
    get_overstay_location_defaults,
    resolve_listing_overstay_fields,
    validate_grace_period_days,
    validate_max_penalty_days,
    validate_penalty_rate,
)
from storage_api.services.storage_listings import (
    create_storage_listing,
    delete_storage_listing,
    get_storage_listings_by_kitchen,
    update_storage_listing,
)

router = APIRouter(prefix="/manager", responses=ERROR_RESPONSES)


@router.get("/kitchens/{kitchen_id}/storage-listings", response_model=list[StorageListingOut])
async def list_kitchen_storage_listings(
    kitchen_id: str,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> list[StorageListingOut]:
    kid = parse_positive_id(kitchen_id, "Invalid kitchen ID")
    await require_kitchen_access(db, actor.user_id, kid)

    # Managers see every status, inactive listings included.
    listings = await get_storage_listings_by_kitchen(db, kid)
    return [StorageListingOut.model_validate(listing) for listing in listings]


@router.get("/storage-listings/{listing_id}", response_model=StorageListingOut)
async def get_storage_listing(
    listing_id: str,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> StorageListingOut:
    lid = parse_positive_id(listing_id, "Invalid listing ID")
    listing, _ = await require_listing_access(db, actor.user_id, lid)
    return StorageListingOut.model_validate(listing)


@router.post("/storage-listings", response_model=StorageListingOut, status_code=201)
async def create_listing(
    payload: StorageListingCreate,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> StorageListingOut:
    kid = parse_positive_id(payload.kitchen_id, "Valid kitchen ID is required")

    kitchen = await require_kitchen_access(db, actor.user_id, kid)

    if not (payload.name and payload.storage_type and payload.pricing_model and payload.base_price):
        raise HTTPException(
            status_code=400,
            detail="Name, storage type, pricing model, and base price are required",
        )

    supplied = payload.model_dump(exclude_none=True, exclude={"kitchen_id"})
    location_defaults = await get_overstay_location_defaults(db, kitchen.location_id)

    data = {
        **supplied,
        **resolve_listing_overstay_fields(supplied, location_defaults),
        "kitchen_id": kid,
        # Manager-created listings skip the approval queue.
        "status": "active",
        "is_active": True,
    }

    listing = await create_storage_listing(db, actor=actor, data=data)
    return StorageListingOut.model_validate(listing)


@router.put("/storage-listings/{listing_id}", response_model=StorageListingOut)
async def update_listing(
    listing_id: str,
    payload: StorageListingUpdate,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> StorageListingOut:
    lid = parse_positive_id(listing_id, "Invalid listing ID")
    listing, _ = await require_listing_access(db, actor.user_id, lid)

    listing = await update_storage_listing(
        db,
        actor=actor,
        listing=listing,
        updates=payload.model_dump(exclude_unset=True),
    )
    return StorageListingOut.model_validate(listing)


@router.delete("/storage-listings/{listing_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_listing(
    listing_id: str,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    lid = parse_positive_id(listing_id, "Invalid listing ID")
    listing, _ = await require_listing_access(db, actor.user_id, lid)

    await delete_storage_listing(db, actor=actor, listing=listing)
    return SuccessResponse(success=True)


@router.put("/storage-listings/{listing_id}/penalty-config", response_model=SuccessResponse)
async def update_listing_penalty_config(
    listing_id: str,
    payload: PenaltyConfigUpdate,
    actor: Actor = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    lid = parse_positive_id(listing_id, "Invalid listing ID")
    listing, _ = await require_listing_access(
        db, actor.user_id, lid, denied_detail="Not authorized to update this listing"
    )

    # A key that is present must carry a value in range; null is rejected too.
    sent = payload.model_fields_set
    updates = {}
    if "overstay_grace_period_days" in sent:
        updates["overstay_grace_period_days"] = validate_grace_period_days(payload.overstay_grace_period_days)
    if "overstay_penalty_rate" in sent:
        updates["overstay_penalty_rate"] = validate_penalty_rate(payload.overstay_penalty_rate)
    if "overstay_max_penalty_days" in sent:
        updates["overstay_max_penalty_days"] = validate_max_penalty_days(payload.overstay_max_penalty_days)
    if "overstay_policy_text" in sent:
        updates["overstay_policy_text"] = payload.overstay_policy_text or None

    await update_storage_listing(db, actor=actor, listing=listing, updates=updates)
    return SuccessResponse(success=True, message="Penalty configuration updated successfully")
