"""
Manager ownership chain: manager -> location -> kitchen -> listing.

Every manager route resolves access through this module so that a missing
entity always answers 404 before an ownership failure answers 403.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.models.kitchen import Kitchen
from storage_api.models.location import Location
from storage_api.models.storage_listing import StorageListing
from storage_api.services.kitchens import get_kitchen_by_id
from storage_api.services.locations import get_location_by_id, get_locations_by_manager
from storage_api.services.storage_listings import get_storage_listing_by_id


class AccessResult(str, Enum):
    NOT_FOUND = "not_found"
    DENIED = "denied"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class KitchenAccess:
    result: AccessResult
    kitchen: Kitchen | None = None


def evaluate_kitchen_access(kitchen: Kitchen | None, owned_locations: Iterable[Location]) -> AccessResult:
    if kitchen is None:
        return AccessResult.NOT_FOUND
    if any(loc.id == kitchen.location_id for loc in owned_locations):
        return AccessResult.ALLOWED
    return AccessResult.DENIED


async def check_kitchen_access(db: AsyncSession, manager_id: int, kitchen_id: int) -> KitchenAccess:
    kitchen = await get_kitchen_by_id(db, kitchen_id)
    if kitchen is None:
        return KitchenAccess(result=AccessResult.NOT_FOUND)

    locations = await get_locations_by_manager(db, manager_id)
    return KitchenAccess(result=evaluate_kitchen_access(kitchen, locations), kitchen=kitchen)


async def can_manager_access_kitchen(db: AsyncSession, manager_id: int, kitchen_id: int) -> bool:
    return (await check_kitchen_access(db, manager_id, kitchen_id)).result is AccessResult.ALLOWED


async def require_kitchen_access(
    db: AsyncSession,
    manager_id: int,
    kitchen_id: int,
    *,
    denied_detail: str = "Access denied to this kitchen",
) -> Kitchen:
    access = await check_kitchen_access(db, manager_id, kitchen_id)
    if access.result is AccessResult.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Kitchen not found")
    if access.result is AccessResult.DENIED:
        raise HTTPException(status_code=403, detail=denied_detail)
    return access.kitchen


async def require_listing_access(
    db: AsyncSession,
    manager_id: int,
    listing_id: int,
    *,
    denied_detail: str = "Access denied to this listing",
) -> tuple[StorageListing, Kitchen]:
    listing = await get_storage_listing_by_id(db, listing_id)
    if listing is None:
        raise HTTPException(status_code=404, detail="Storage listing not found")

    kitchen = await require_kitchen_access(db, manager_id, listing.kitchen_id, denied_detail=denied_detail)
    return listing, kitchen


async def require_location_access(
    db: AsyncSession,
    manager_id: int,
    location_id: int,
    *,
    denied_detail: str = "Not authorized to access this location",
) -> Location:
    location = await get_location_by_id(db, location_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    if location.manager_id != manager_id:
        raise HTTPException(status_code=403, detail=denied_detail)
    return location
