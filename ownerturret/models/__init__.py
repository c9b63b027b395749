from ownerturret.models.base import NAMESPACE, Base  # noqa: F401
from ownerturret.models.owner_shot_once import OwnerShotOnce  # noqa: F401
from ownerturret.models.turret_owner import TurretOwner  # noqa: F401

# Declared table name -> model, in declaration order.
TABLES: dict[str, type[Base]] = {
    "TurretOwner": TurretOwner,
    "OwnerShotOnce": OwnerShotOnce,
}
