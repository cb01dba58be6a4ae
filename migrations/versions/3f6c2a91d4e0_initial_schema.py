"""initial_schema

Create the schema for the one-on-one connection engine:
- People and person profiles (read-only directory, owned upstream)
- One-on-one invites (1-3 proposed slots as JSONB)
- One-on-one meetings (at most one per invite)
- Notifications (per-person feed)

Revision ID: 3f6c2a91d4e0
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f6c2a91d4e0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ENUMS = {
    "invite_status": ("pending", "accepted", "declined", "cancelled"),
    "meeting_mode": ("online", "offline"),
    "meeting_status": ("scheduled", "completed", "cancelled"),
    "notification_status": ("unread", "read"),
}


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in _ENUMS.items():
        labels = ", ".join(f"'{v}'" for v in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # PEOPLE table
    # ========================================================================
    op.create_table(
        "people",
        _uuid_pk(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_people_username"),
    )
    op.create_index("idx_people_name", "people", ["name"])

    # ========================================================================
    # PERSON_PROFILES table
    # ========================================================================
    op.create_table(
        "person_profiles",
        sa.Column("person_id", sa.UUID(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column(
            "interests",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "expertise",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "offerings",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "seeking",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("availability_text", sa.Text(), nullable=True),
        sa.Column("timezone", sa.String(64), nullable=True),
        sa.Column("wechat_id", sa.String(255), nullable=True),
        sa.Column("city", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(["person_id"], ["people.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("person_id"),
    )
    op.create_index("idx_person_profiles_city", "person_profiles", ["city"])
    op.create_index(
        "idx_person_profiles_interests",
        "person_profiles",
        ["interests"],
        postgresql_using="gin",
    )
    op.create_index(
        "idx_person_profiles_expertise",
        "person_profiles",
        ["expertise"],
        postgresql_using="gin",
    )

    # ========================================================================
    # ONE_ON_ONE_INVITES table
    # ========================================================================
    op.create_table(
        "one_on_one_invites",
        _uuid_pk(),
        sa.Column("inviter_id", sa.UUID(), nullable=False),
        sa.Column("invitee_id", sa.UUID(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False, server_default=""),
        sa.Column("proposed_slots", postgresql.JSONB(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(*_ENUMS["invite_status"], name="invite_status", create_type=False),
            nullable=False,
            server_default="pending",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["inviter_id"], ["people.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["invitee_id"], ["people.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("inviter_id <> invitee_id", name="invite_distinct_parties"),
        sa.CheckConstraint(
            "jsonb_array_length(proposed_slots) BETWEEN 1 AND 3",
            name="invite_proposed_slots_count",
        ),
    )
    op.create_index("idx_invites_inviter_id", "one_on_one_invites", ["inviter_id"])
    op.create_index("idx_invites_invitee_id", "one_on_one_invites", ["invitee_id"])
    op.create_index(
        "idx_invites_created_at",
        "one_on_one_invites",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # ONE_ON_ONE_MEETINGS table
    # ========================================================================
    op.create_table(
        "one_on_one_meetings",
        _uuid_pk(),
        sa.Column("invite_id", sa.UUID(), nullable=False),
        sa.Column("final_datetime_iso", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "mode",
            postgresql.ENUM(*_ENUMS["meeting_mode"], name="meeting_mode", create_type=False),
            nullable=False,
        ),
        sa.Column("meeting_url", sa.Text(), nullable=True),
        sa.Column("location_text", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                *_ENUMS["meeting_status"], name="meeting_status", create_type=False
            ),
            nullable=False,
            server_default="scheduled",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["invite_id"], ["one_on_one_invites.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        # At most one meeting per invite, enforced under concurrent accepts
        sa.UniqueConstraint("invite_id", name="uq_meetings_invite_id"),
    )
    op.create_index(
        "idx_meetings_created_at",
        "one_on_one_meetings",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("path", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                *_ENUMS["notification_status"],
                name="notification_status",
                create_type=False,
            ),
            nullable=False,
            server_default="unread",
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["people.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_status", "notifications", ["user_id", "status"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("one_on_one_meetings")
    op.drop_table("one_on_one_invites")
    op.drop_table("person_profiles")
    op.drop_table("people")

    # Drop ENUM types
    for name in reversed(list(_ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
