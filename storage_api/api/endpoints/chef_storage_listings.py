import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.api.params import parse_positive_id
from storage_api.core.db import get_db
from storage_api.schemas.common import ERROR_RESPONSES
from storage_api.schemas.storage_listing import StorageListingOut
from storage_api.services.auth import Actor, require_chef
from storage_api.services.storage_listings import get_storage_listings_by_kitchen, is_visible_to_chef

log = logging.getLogger(__name__)
router = APIRouter(prefix="/chef", responses=ERROR_RESPONSES)


@router.get("/kitchens/{kitchen_id}/storage-listings", response_model=list[StorageListingOut])
async def list_visible_storage_listings(
    kitchen_id: str,
    actor: Actor = Depends(require_chef),
    db: AsyncSession = Depends(get_db),
) -> list[StorageListingOut]:
    kid = parse_positive_id(kitchen_id, "Invalid kitchen ID")

    # Any chef may browse any kitchen; only approved/active listings are exposed.
    listings = await get_storage_listings_by_kitchen(db, kid)
    visible = [listing for listing in listings if is_visible_to_chef(listing)]

    log.info(
        "chef %s kitchen %s storage listings: returning %d visible of %d",
        actor.user_id, kid, len(visible), len(listings),
    )
    return [StorageListingOut.model_validate(listing) for listing in visible]
