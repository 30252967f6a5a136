from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.core.errors import DataAccessError
from storage_api.models.location import Location
from storage_api.services.audit import audit
from storage_api.services.auth import Actor

log = logging.getLogger(__name__)


async def get_location_by_id(db: AsyncSession, location_id: int) -> Location | None:
    stmt = select(Location).where(Location.id == location_id)
    return (await db.execute(stmt)).scalar_one_or_none()


async def get_locations_by_manager(db: AsyncSession, manager_id: int) -> list[Location]:
    stmt = select(Location).where(Location.manager_id == manager_id).order_by(Location.id)
    return list((await db.execute(stmt)).scalars().all())


async def update_location_overstay_defaults(
    db: AsyncSession,
    *,
    actor: Actor,
    location: Location,
    updates: dict[str, Any],
) -> Location:
    for field, value in updates.items():
        setattr(location, field, value)

    await audit(
        db,
        actor=actor,
        action="location.overstay_defaults.updated",
        target_type="location",
        target_id=str(location.id),
        detail={"updates": updates},
    )

    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        log.exception("update overstay defaults failed for location %s", location.id)
        raise DataAccessError("Failed to update location overstay defaults", original_exception=e) from e

    await db.refresh(location)
    return location
