"""Initial schema: relationship graph, attribute catalog, resources, ACL config.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # -- Relationships --
    op.create_table(
        "relationships",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("party_a_id", sa.Integer, nullable=False),
        sa.Column("party_b_id", sa.Integer, nullable=False),
        sa.Column("permission_a_b", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("permission_b_a", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("start_date", sa.Date, nullable=True),
        sa.Column("end_date", sa.Date, nullable=True),
    )
    op.create_index("ix_relationships_party_a", "relationships", ["party_a_id"])
    op.create_index("ix_relationships_party_b", "relationships", ["party_b_id"])

    # -- Attribute catalog --
    op.create_table(
        "attribute_groups",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(128), nullable=False, unique=True),
        sa.Column("table_name", sa.String(64), nullable=False),
    )
    op.create_table(
        "attribute_fields",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "group_id",
            sa.Integer,
            sa.ForeignKey("attribute_groups.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("label", sa.String(128), nullable=False, server_default=""),
        sa.Column("column_name", sa.String(64), nullable=False),
    )
    op.create_index("ix_attribute_fields_group_id", "attribute_fields", ["group_id"])

    # -- Owned resources --
    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
    )
    op.create_table(
        "participants",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer, nullable=False),
        sa.Column("party_id", sa.Integer, nullable=False),
    )
    op.create_index("ix_participants_event_id", "participants", ["event_id"])
    op.create_table(
        "participant_payments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("participant_id", sa.Integer, nullable=False),
        sa.Column("contribution_id", sa.Integer, nullable=False),
    )
    op.create_index(
        "ix_participant_payments_contribution_id",
        "participant_payments",
        ["contribution_id"],
    )
    op.create_table(
        "contributions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("party_id", sa.Integer, nullable=False),
        sa.Column("total_amount", sa.Numeric(20, 2), nullable=False, server_default="0"),
    )

    # -- Identity & configuration --
    op.create_table(
        "user_party_links",
        sa.Column("user_id", sa.String(128), primary_key=True),
        sa.Column("party_id", sa.Integer, nullable=False),
    )
    op.create_table(
        "acl_config",
        sa.Column("config_key", sa.String(255), primary_key=True),
        sa.Column("config_value", sa.String(255), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("acl_config")
    op.drop_table("user_party_links")
    op.drop_table("contributions")
    op.drop_index("ix_participant_payments_contribution_id", table_name="participant_payments")
    op.drop_table("participant_payments")
    op.drop_index("ix_participants_event_id", table_name="participants")
    op.drop_table("participants")
    op.drop_table("events")
    op.drop_index("ix_attribute_fields_group_id", table_name="attribute_fields")
    op.drop_table("attribute_fields")
    op.drop_table("attribute_groups")
    op.drop_index("ix_relationships_party_b", table_name="relationships")
    op.drop_index("ix_relationships_party_a", table_name="relationships")
    op.drop_table("relationships")
