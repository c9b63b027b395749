"""Turret registry: point reads and writes on the TurretOwner and OwnerShotOnce tables.

Every function touches a single table and a single key.  The two tables are
independent; nothing here couples a change of owner to the shot-once flag.
Writes are flushed but not committed, so the caller owns the transaction.

Missing records are a normal state, not an error:
- get_owner returns None for a turret with no recorded owner
- get_shot_once returns False for a turret with no flag record

Encoding and storage errors from SQLAlchemy propagate unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ownerturret.models.owner_shot_once import OwnerShotOnce
from ownerturret.models.turret_owner import TurretOwner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurretStatus:
    smart_turret_id: int
    owner_character_id: int | None
    has_been_shot: bool


# ---------------------------------------------------------------------------
# TurretOwner
# ---------------------------------------------------------------------------


async def get_owner_record(db: AsyncSession, smart_turret_id: int) -> TurretOwner | None:
    """Return the TurretOwner row for the turret, or None if no owner is recorded."""
    return await db.get(TurretOwner, smart_turret_id)


async def get_owner(db: AsyncSession, smart_turret_id: int) -> int | None:
    record = await get_owner_record(db, smart_turret_id)
    return record.owner_character_id if record is not None else None


async def set_owner(
    db: AsyncSession, smart_turret_id: int, owner_character_id: int
) -> TurretOwner:
    """Insert or overwrite the owner of a turret.  The previous owner is discarded."""
    record = await get_owner_record(db, smart_turret_id)
    if record is None:
        record = TurretOwner(
            smart_turret_id=smart_turret_id,
            owner_character_id=owner_character_id,
        )
        db.add(record)
    else:
        record.owner_character_id = owner_character_id
    await db.flush()
    logger.debug("Turret %s owner set to %s", smart_turret_id, owner_character_id)
    return record


async def delete_owner(db: AsyncSession, smart_turret_id: int) -> bool:
    """Clear the owner of a turret.  Returns False if none was recorded."""
    record = await get_owner_record(db, smart_turret_id)
    if record is None:
        return False
    await db.delete(record)
    await db.flush()
    logger.debug("Turret %s owner cleared", smart_turret_id)
    return True


# ---------------------------------------------------------------------------
# OwnerShotOnce
# ---------------------------------------------------------------------------


async def get_shot_once_record(
    db: AsyncSession, smart_turret_id: int
) -> OwnerShotOnce | None:
    """Return the OwnerShotOnce row, or None when the flag was never written."""
    return await db.get(OwnerShotOnce, smart_turret_id)


async def get_shot_once(db: AsyncSession, smart_turret_id: int) -> bool:
    """Return whether the turret's owner has been shot.  Absent record means False."""
    record = await get_shot_once_record(db, smart_turret_id)
    if record is None:
        return False
    return record.has_been_shot


async def set_shot_once(
    db: AsyncSession, smart_turret_id: int, has_been_shot: bool
) -> OwnerShotOnce:
    """Insert or overwrite the shot-once flag.

    No latch is enforced: writing False after True is accepted.  Callers that
    want a one-way flag must check get_shot_once first.
    """
    record = await get_shot_once_record(db, smart_turret_id)
    if record is None:
        record = OwnerShotOnce(smart_turret_id=smart_turret_id, has_been_shot=has_been_shot)
        db.add(record)
    else:
        record.has_been_shot = has_been_shot
    await db.flush()
    logger.debug("Turret %s has_been_shot set to %s", smart_turret_id, has_been_shot)
    return record


async def delete_shot_once(db: AsyncSession, smart_turret_id: int) -> bool:
    record = await get_shot_once_record(db, smart_turret_id)
    if record is None:
        return False
    await db.delete(record)
    await db.flush()
    logger.debug("Turret %s shot-once flag cleared", smart_turret_id)
    return True


# ---------------------------------------------------------------------------
# Combined view
# ---------------------------------------------------------------------------


async def get_turret_status(db: AsyncSession, smart_turret_id: int) -> TurretStatus:
    """Look up both tables for one turret.

    These are two independent reads; run them inside one transaction if a
    consistent view across both tables matters.
    """
    return TurretStatus(
        smart_turret_id=smart_turret_id,
        owner_character_id=await get_owner(db, smart_turret_id),
        has_been_shot=await get_shot_once(db, smart_turret_id),
    )
