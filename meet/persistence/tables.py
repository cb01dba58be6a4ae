"""SQLAlchemy table definitions for the connection engine.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PEOPLE TABLE (owned by the external person store, read-only here)
# ============================================================================
people_table = Table(
    "people",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_people_name", people_table.c.name)

# ============================================================================
# PERSON PROFILES TABLE (0..1 per person)
# ============================================================================
person_profiles_table = Table(
    "person_profiles",
    metadata,
    Column(
        "person_id",
        UUID,
        ForeignKey("people.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("bio", Text, nullable=True),
    Column("interests", ARRAY(Text), nullable=False, server_default="{}"),
    Column("expertise", ARRAY(Text), nullable=False, server_default="{}"),
    Column("offerings", ARRAY(Text), nullable=False, server_default="{}"),
    Column("seeking", ARRAY(Text), nullable=False, server_default="{}"),
    Column("availability_text", Text, nullable=True),
    Column("timezone", String(64), nullable=True),
    Column("wechat_id", String(255), nullable=True),
    Column("city", String(255), nullable=True),
)

Index("idx_person_profiles_city", person_profiles_table.c.city)
Index(
    "idx_person_profiles_interests",
    person_profiles_table.c.interests,
    postgresql_using="gin",
)
Index(
    "idx_person_profiles_expertise",
    person_profiles_table.c.expertise,
    postgresql_using="gin",
)

# ============================================================================
# ONE-ON-ONE INVITES TABLE
# ============================================================================
invites_table = Table(
    "one_on_one_invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "inviter_id", UUID, ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "invitee_id", UUID, ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    ),
    Column("message", Text, nullable=False, server_default=""),
    # [{"datetime_iso": "...", "mode": "online"}, ...]
    Column("proposed_slots", JSONB, nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "pending",
            "accepted",
            "declined",
            "cancelled",
            name="invite_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("inviter_id <> invitee_id", name="invite_distinct_parties"),
    CheckConstraint(
        "jsonb_array_length(proposed_slots) BETWEEN 1 AND 3",
        name="invite_proposed_slots_count",
    ),
)

Index("idx_invites_inviter_id", invites_table.c.inviter_id)
Index("idx_invites_invitee_id", invites_table.c.invitee_id)
Index("idx_invites_created_at", invites_table.c.created_at.desc())

# ============================================================================
# ONE-ON-ONE MEETINGS TABLE
# ============================================================================
meetings_table = Table(
    "one_on_one_meetings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "invite_id",
        UUID,
        ForeignKey("one_on_one_invites.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("final_datetime_iso", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "mode",
        postgresql.ENUM("online", "offline", name="meeting_mode", create_type=False),
        nullable=False,
    ),
    Column("meeting_url", Text, nullable=True),
    Column("location_text", Text, nullable=True),
    Column("notes", Text, nullable=True),
    Column(
        "status",
        postgresql.ENUM(
            "scheduled",
            "completed",
            "cancelled",
            name="meeting_status",
            create_type=False,
        ),
        nullable=False,
        server_default="scheduled",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # At most one meeting per invite
    UniqueConstraint("invite_id", name="uq_meetings_invite_id"),
)

Index("idx_meetings_created_at", meetings_table.c.created_at.desc())

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("path", Text, nullable=True),
    Column(
        "status",
        postgresql.ENUM("unread", "read", name="notification_status", create_type=False),
        nullable=False,
        server_default="unread",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_status",
    notifications_table.c.user_id,
    notifications_table.c.status,
)
