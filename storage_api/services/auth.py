from dataclasses import dataclass
from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storage_api.core.db import get_db
from storage_api.core.security import hash_api_key
from storage_api.models.api_key import ApiKey
from storage_api.models.user import User

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


@dataclass(frozen=True)
class Actor:
    api_key_id: str
    user_id: int
    role: str  # "manager" | "chef" | "admin"


async def get_actor(
    api_key: str | None = Security(api_key_header),
    db: AsyncSession = Depends(get_db),
) -> Actor:
    if not api_key:
        raise HTTPException(status_code=401, detail="Missing X-API-Key")

    hashed = hash_api_key(api_key)
    stmt = (
        select(ApiKey, User)
        .join(User, User.id == ApiKey.user_id)
        .where(ApiKey.key_hash == hashed, ApiKey.is_active.is_(True))
    )
    row = (await db.execute(stmt)).one_or_none()
    if not row:
        raise HTTPException(status_code=401, detail="Invalid API key")

    key, user = row
    return Actor(api_key_id=key.id, user_id=user.id, role=user.role)


def require_manager(actor: Actor = Depends(get_actor)) -> Actor:
    if actor.role != "manager":
        raise HTTPException(status_code=403, detail="Manager access required")
    return actor


CHEF_ROUTE_ROLES = ("chef", "admin")


def require_chef(actor: Actor = Depends(get_actor)) -> Actor:
    # Admins can browse chef routes too.
    if actor.role not in CHEF_ROUTE_ROLES:
        raise HTTPException(status_code=403, detail="Chef access required")
    return actor
