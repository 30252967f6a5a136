from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.core.errors import DataAccessError
from storage_api.models.storage_listing import StorageListing
from storage_api.services.audit import audit
from storage_api.services.auth import Actor

log = logging.getLogger(__name__)

CHEF_VISIBLE_STATUSES = frozenset({"approved", "active"})


def is_visible_to_chef(listing: StorageListing) -> bool:
    # Both conditions are required; an approved but deactivated listing stays hidden.
    return listing.status in CHEF_VISIBLE_STATUSES and listing.is_active is True


@asynccontextmanager
async def _data_access(db: AsyncSession, action: str) -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        log.exception("storage listing repository failed to %s", action)
        raise DataAccessError(f"Failed to {action}", original_exception=e) from e


async def get_storage_listing_by_id(db: AsyncSession, listing_id: int) -> StorageListing | None:
    async with _data_access(db, "get storage listing"):
        stmt = select(StorageListing).where(StorageListing.id == listing_id)
        return (await db.execute(stmt)).scalar_one_or_none()


async def get_storage_listings_by_kitchen(db: AsyncSession, kitchen_id: int) -> list[StorageListing]:
    async with _data_access(db, "get storage listings"):
        stmt = (
            select(StorageListing)
            .where(StorageListing.kitchen_id == kitchen_id)
            .order_by(StorageListing.id)
        )
        return list((await db.execute(stmt)).scalars().all())


async def create_storage_listing(
    db: AsyncSession,
    *,
    actor: Actor,
    data: dict[str, Any],
) -> StorageListing:
    """
    Insert a listing row and record the audit entry in the same commit.
    Ownership and field validation are handled by the API layer.
    """
    async with _data_access(db, "create storage listing"):
        listing = StorageListing(**data)
        db.add(listing)
        await db.flush()

        await audit(
            db,
            actor=actor,
            action="storage_listing.created",
            target_type="storage_listing",
            target_id=str(listing.id),
            detail={"kitchen_id": listing.kitchen_id, "name": listing.name},
        )
        await db.commit()
        await db.refresh(listing)

    log.info("storage listing %s created by manager %s", listing.id, actor.user_id)
    return listing


async def update_storage_listing(
    db: AsyncSession,
    *,
    actor: Actor,
    listing: StorageListing,
    updates: dict[str, Any],
) -> StorageListing:
    # No field allow-list: every key the caller passes is written.
    async with _data_access(db, "update storage listing"):
        for field, value in updates.items():
            setattr(listing, field, value)

        await audit(
            db,
            actor=actor,
            action="storage_listing.updated",
            target_type="storage_listing",
            target_id=str(listing.id),
            detail={"fields": sorted(updates)},
        )
        await db.commit()
        await db.refresh(listing)

    log.info("storage listing %s updated by manager %s", listing.id, actor.user_id)
    return listing


async def delete_storage_listing(
    db: AsyncSession,
    *,
    actor: Actor,
    listing: StorageListing,
) -> None:
    listing_id = listing.id
    async with _data_access(db, "delete storage listing"):
        await audit(
            db,
            actor=actor,
            action="storage_listing.deleted",
            target_type="storage_listing",
            target_id=str(listing_id),
            detail={"kitchen_id": listing.kitchen_id},
        )
        await db.delete(listing)
        await db.commit()

    log.info("storage listing %s deleted by manager %s", listing_id, actor.user_id)
