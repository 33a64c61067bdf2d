"""accountboard_baseline

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op

from accountboard.provisioning.provisioner import create_indexes, create_tables, drop_tables


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the AccountBoard schema.

    Runs the provisioner's table and index steps on the migration
    connection, so databases bootstrapped by ``accountboard-provision``
    and by Alembic end up identical. The demo tenant is not seeded here.
    """
    bind = op.get_bind()
    create_tables(bind)
    create_indexes(bind)


def downgrade() -> None:
    """
    Drop the AccountBoard schema.

    WARNING: This deletes every company and all data scoped to it.
    """
    drop_tables(op.get_bind())
