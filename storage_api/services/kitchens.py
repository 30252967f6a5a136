from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.models.kitchen import Kitchen


async def get_kitchen_by_id(db: AsyncSession, kitchen_id: int) -> Kitchen | None:
    stmt = select(Kitchen).where(Kitchen.id == kitchen_id)
    return (await db.execute(stmt)).scalar_one_or_none()
