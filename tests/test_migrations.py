"""Tests for the alembic migration environment and initial revision."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from ownerturret.services.turret_registry import get_owner, get_shot_once, set_owner, set_shot_once

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TABLE_NAMES = {"ownerturret__turret_owner", "ownerturret__owner_shot_once"}


def _alembic_config(url: str) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    cfg.attributes["configure_logger"] = False
    return cfg


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "migrations.db"


def test_upgrade_and_downgrade(db_path):
    url = f"sqlite:///{db_path}"
    cfg = _alembic_config(url)
    engine = create_engine(url)
    try:
        command.upgrade(cfg, "head")
        inspector = inspect(engine)
        assert TABLE_NAMES <= set(inspector.get_table_names())
        for table in TABLE_NAMES:
            pk = inspector.get_pk_constraint(table)["constrained_columns"]
            assert pk == ["smart_turret_id"]
            assert not inspector.get_foreign_keys(table)

        columns = {c["name"]: c for c in inspector.get_columns("ownerturret__owner_shot_once")}
        assert set(columns) == {"smart_turret_id", "has_been_shot"}
        assert columns["has_been_shot"]["nullable"] is False

        command.downgrade(cfg, "base")
        assert not TABLE_NAMES & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


async def test_async_url_is_migrated_with_sync_driver(db_path):
    url = f"sqlite+aiosqlite:///{db_path}"
    command.upgrade(_alembic_config(url), "head")

    engine = create_async_engine(url)
    try:
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        async with session_factory() as session:
            await set_owner(session, 42, 7)
            await set_shot_once(session, 42, True)
            await session.commit()

        async with session_factory() as session:
            assert await get_owner(session, 42) == 7
            assert await get_shot_once(session, 42) is True
    finally:
        await engine.dispose()
