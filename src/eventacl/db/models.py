"""SQLAlchemy ORM models for all persistent tables.

Relationships, events, participants, contributions and the attribute
catalog belong to the host CRM and are only read here. The ACL owns
``acl_config`` and writes to attribute value tables through
``PostgresAttributeRepository``.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import (
    Boolean,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from eventacl.db.base import Base


# ---------------------------------------------------------------------------
# Relationship graph
# ---------------------------------------------------------------------------


class RelationshipRow(Base):
    __tablename__ = "relationships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    party_a_id: Mapped[int] = mapped_column(Integer)
    party_b_id: Mapped[int] = mapped_column(Integer)
    permission_a_b: Mapped[bool] = mapped_column(Boolean, default=False)
    permission_b_a: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index("ix_relationships_party_a", "party_a_id"),
        Index("ix_relationships_party_b", "party_b_id"),
    )


# ---------------------------------------------------------------------------
# Generic attribute catalog
# ---------------------------------------------------------------------------


class AttributeGroupRow(Base):
    __tablename__ = "attribute_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(128), unique=True)
    table_name: Mapped[str] = mapped_column(String(64))


class AttributeFieldRow(Base):
    __tablename__ = "attribute_fields"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("attribute_groups.id", ondelete="CASCADE")
    )
    label: Mapped[str] = mapped_column(String(128), default="")
    column_name: Mapped[str] = mapped_column(String(64))

    __table_args__ = (
        Index("ix_attribute_fields_group_id", "group_id"),
    )


# ---------------------------------------------------------------------------
# Owned resources
# ---------------------------------------------------------------------------


class EventRow(Base):
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), default="")


class ParticipantRow(Base):
    __tablename__ = "participants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(Integer)
    party_id: Mapped[int] = mapped_column(Integer)

    __table_args__ = (
        Index("ix_participants_event_id", "event_id"),
    )


class ParticipantPaymentRow(Base):
    __tablename__ = "participant_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    participant_id: Mapped[int] = mapped_column(Integer)
    contribution_id: Mapped[int] = mapped_column(Integer)

    __table_args__ = (
        Index("ix_participant_payments_contribution_id", "contribution_id"),
    )


class ContributionRow(Base):
    __tablename__ = "contributions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    party_id: Mapped[int] = mapped_column(Integer)
    total_amount: Mapped[float] = mapped_column(Numeric(20, 2), default=0)


# ---------------------------------------------------------------------------
# Identity & configuration
# ---------------------------------------------------------------------------


class UserPartyLinkRow(Base):
    __tablename__ = "user_party_links"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    party_id: Mapped[int] = mapped_column(Integer)


class ACLConfigRow(Base):
    __tablename__ = "acl_config"

    config_key: Mapped[str] = mapped_column(String(255), primary_key=True)
    config_value: Mapped[str] = mapped_column(String(255))
