"""Create dags, nodes and edges tables

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

Initial schema for storing DAG topology. Foreign keys carry no ON DELETE or
ON UPDATE action and every reference column is nullable.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the three DAG tables."""

    op.create_table(
        "dags",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "nodes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("dag_id", sa.Uuid(), nullable=True),
        sa.Column("label", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dag_id"], ["dags.id"]),
    )

    op.create_table(
        "edges",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("source", sa.Uuid(), nullable=True),
        sa.Column("target", sa.Uuid(), nullable=True),
        sa.Column("dag_id", sa.Uuid(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["source"], ["nodes.id"]),
        sa.ForeignKeyConstraint(["target"], ["nodes.id"]),
        sa.ForeignKeyConstraint(["dag_id"], ["dags.id"]),
    )


def downgrade() -> None:
    """Drop the DAG tables in reverse dependency order."""

    op.drop_table("edges")
    op.drop_table("nodes")
    op.drop_table("dags")
