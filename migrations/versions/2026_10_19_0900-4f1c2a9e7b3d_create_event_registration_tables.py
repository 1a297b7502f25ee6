"""create_event_registration_tables

Revision ID: 4f1c2a9e7b3d
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "4f1c2a9e7b3d"
down_revision = None
branch_labels = None
depends_on = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("is_superuser", sa.Boolean(), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("company", sa.String(length=255), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "organizations",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_organizations_username", "organizations", ["username"], unique=True)

    op.create_table(
        "organization_members",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("organization_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.Enum("admin", "member", name="member_role_enum"), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["organization_id"], ["organizations.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("organization_id", "user_id"),
    )
    op.create_index("ix_organization_members_organization_id", "organization_members", ["organization_id"])
    op.create_index("ix_organization_members_user_id", "organization_members", ["user_id"])

    op.create_table(
        "events",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("organization_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("event_time", sa.String(length=20), nullable=True),
        sa.Column("type", sa.Enum("offline", "online", "hybrid", name="event_type_enum"), nullable=False),
        sa.Column("location", sa.String(length=500), nullable=True),
        sa.Column("zoom_link", sa.String(length=500), nullable=True),
        sa.Column("max_participants", sa.Integer(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["organization_id"], ["organizations.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_events_organization_id", "events", ["organization_id"])

    op.create_table(
        "event_registrations",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("institution", sa.String(length=200), nullable=True),
        sa.Column(
            "status",
            sa.Enum("pending", "confirmed", "cancelled", name="registration_status_enum"),
            nullable=False,
        ),
        sa.Column(
            "registered_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        *timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.uuid"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("event_id", "email", name="uq_event_registrations_event_email"),
    )
    op.create_index("ix_event_registrations_event_id", "event_registrations", ["event_id"])
    op.create_index("ix_event_registrations_email", "event_registrations", ["email"])
    op.create_index("ix_event_registrations_status", "event_registrations", ["status"])

    op.create_table(
        "event_payment_proofs",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("registration_id", sa.UUID(), nullable=False),
        sa.Column("image_url", sa.String(length=1000), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["registration_id"], ["event_registrations.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(
        "ix_event_payment_proofs_registration_id", "event_payment_proofs", ["registration_id"]
    )

    op.create_table(
        "event_tickets",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("registration_id", sa.UUID(), nullable=False),
        sa.Column("ticket_number", sa.String(length=32), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["registration_id"], ["event_registrations.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("registration_id"),
    )
    op.create_index("ix_event_tickets_ticket_number", "event_tickets", ["ticket_number"], unique=True)

    op.create_table(
        "event_rsvps",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("registration_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("Hadir Tepat Waktu", "Hadir Terlambat", "Tidak Hadir", name="rsvp_status_enum"),
            nullable=False,
        ),
        *timestamps(),
        sa.ForeignKeyConstraint(["registration_id"], ["event_registrations.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("registration_id"),
    )

    op.create_table(
        "email_logs",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("provider_message_id", sa.String(length=255), nullable=True),
        sa.Column("to_address", sa.String(length=255), nullable=False),
        sa.Column("from_address", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=500), nullable=False),
        sa.Column("html_body", sa.Text(), nullable=True),
        sa.Column("text_body", sa.Text(), nullable=True),
        sa.Column(
            "email_type",
            sa.Enum("registration_confirmation", "registration_approval", name="email_type_enum"),
            nullable=False,
        ),
        sa.Column("registration_id", sa.UUID(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("pending", "sent", "failed", name="email_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("error_message", sa.Text(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(["registration_id"], ["event_registrations.uuid"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(
        "ix_email_logs_provider_message_id", "email_logs", ["provider_message_id"], unique=True
    )
    op.create_index("ix_email_logs_to_address", "email_logs", ["to_address"])
    op.create_index("ix_email_logs_email_type", "email_logs", ["email_type"])
    op.create_index("ix_email_logs_registration_id", "email_logs", ["registration_id"])
    op.create_index("ix_email_logs_status", "email_logs", ["status"])


def downgrade() -> None:
    op.drop_table("email_logs")
    op.drop_table("event_rsvps")
    op.drop_table("event_tickets")
    op.drop_table("event_payment_proofs")
    op.drop_table("event_registrations")
    op.drop_table("events")
    op.drop_table("organization_members")
    op.drop_table("organizations")
    op.drop_table("users")
    op.execute("DROP TYPE email_status_enum")
    op.execute("DROP TYPE email_type_enum")
    op.execute("DROP TYPE rsvp_status_enum")
    op.execute("DROP TYPE registration_status_enum")
    op.execute("DROP TYPE event_type_enum")
    op.execute("DROP TYPE member_role_enum")
