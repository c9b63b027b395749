from sqlalchemy.orm import DeclarativeBase

# Qualifies every table declared here so it cannot collide with tables from
# other modules sharing the same database.
NAMESPACE = "ownerturret"


def namespaced(name: str) -> str:
    return f"{NAMESPACE}__{name}"


class Base(DeclarativeBase):
    pass
