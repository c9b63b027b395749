"""TurretOwner model: which character owns each smart turret."""

from sqlalchemy.orm import Mapped, mapped_column

from ownerturret.codec import pack_turret_owner
from ownerturret.models.base import NAMESPACE, Base, namespaced
from ownerturret.models.types import Uint256


class TurretOwner(Base):
    """One row per turret that has a recorded owner.

    A turret with no row has no owner.  Writing a new owner replaces the
    previous one; no history is kept.
    """

    __tablename__ = namespaced("turret_owner")
    __table_args__ = {"info": {"namespace": NAMESPACE, "name": "TurretOwner"}}

    smart_turret_id: Mapped[int] = mapped_column(Uint256(), primary_key=True, autoincrement=False)
    owner_character_id: Mapped[int] = mapped_column(Uint256(), nullable=False)

    def pack(self) -> bytes:
        return pack_turret_owner(self.smart_turret_id, self.owner_character_id)

    def __repr__(self) -> str:
        return (
            f"TurretOwner(smart_turret_id={self.smart_turret_id!r}, "
            f"owner_character_id={self.owner_character_id!r})"
        )
