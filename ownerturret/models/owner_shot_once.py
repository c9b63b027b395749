"""OwnerShotOnce model: whether a turret's owner has already been shot."""

from sqlalchemy import Boolean, false
from sqlalchemy.orm import Mapped, mapped_column

from ownerturret.codec import pack_owner_shot_once
from ownerturret.models.base import NAMESPACE, Base, namespaced
from ownerturret.models.types import Uint256


class OwnerShotOnce(Base):
    """Shot-once flag per turret.

    A missing row reads as has_been_shot=False.  The flag normally only goes
    False -> True, but nothing here stops a caller from writing False again.
    """

    __tablename__ = namespaced("owner_shot_once")
    __table_args__ = {"info": {"namespace": NAMESPACE, "name": "OwnerShotOnce"}}

    smart_turret_id: Mapped[int] = mapped_column(Uint256(), primary_key=True, autoincrement=False)
    has_been_shot: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    def pack(self) -> bytes:
        return pack_owner_shot_once(self.smart_turret_id, self.has_been_shot)

    def __repr__(self) -> str:
        return (
            f"OwnerShotOnce(smart_turret_id={self.smart_turret_id!r}, "
            f"has_been_shot={self.has_been_shot!r})"
        )
