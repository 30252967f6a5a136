from __future__ import annotations
from sqlalchemy.ext.asyncio import AsyncSession
from storage_api.models.audit_log import AuditLog
from storage_api.services.auth import Actor

async def audit(
    db: AsyncSession,
    *,
    actor: Actor | None,
    action: str,
    target_type: str | None = None,
    target_id: str | None = None,
    detail: dict | None = None,
) -> None:
    db.add(AuditLog(
        actor_user_id=actor.user_id if actor else None,
        actor_api_key_id=actor.api_key_id if actor else None,
        action=action,
        target_type=target_type,
        target_id=target_id,
        detail=detail or {},
    ))
