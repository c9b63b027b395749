"""ownerturret tables: turret owner and owner shot-once flag

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # uint256 columns are 32-byte big-endian words
    op.create_table(
        "ownerturret__turret_owner",
        sa.Column("smart_turret_id", sa.LargeBinary(length=32), nullable=False),
        sa.Column("owner_character_id", sa.LargeBinary(length=32), nullable=False),
        sa.PrimaryKeyConstraint("smart_turret_id"),
    )

    op.create_table(
        "ownerturret__owner_shot_once",
        sa.Column("smart_turret_id", sa.LargeBinary(length=32), nullable=False),
        sa.Column("has_been_shot", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("smart_turret_id"),
    )


def downgrade() -> None:
    op.drop_table("ownerturret__owner_shot_once")
    op.drop_table("ownerturret__turret_owner")
