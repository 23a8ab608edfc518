"""Create plant care tables

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2025-02-03

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "1a2b3c4d5e6f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("notifications_enabled", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("notify_email", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("notify_push", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("notify_reminders", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("notify_plant_care", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("notify_weather_alerts", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("notify_ai_insights", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "plants",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("species", sa.String(length=200), nullable=True),
        sa.Column("pot_size", sa.String(length=50), nullable=True),
        sa.Column("sunlight", sa.String(length=100), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("care_schedule", sa.JSON(), nullable=True),
        sa.Column("location_city", sa.String(length=200), nullable=True),
        sa.Column("location_lat", sa.Float(), nullable=True),
        sa.Column("location_lon", sa.Float(), nullable=True),
        sa.Column("weather_aware", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_plants_user_id", "plants", ["user_id"], unique=False)

    op.create_table(
        "diary_entries",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("plant_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("activity", sa.String(length=50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["plant_id"], ["plants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_diary_entries_user_id", "diary_entries", ["user_id"], unique=False)
    op.create_index(
        "idx_diary_entries_plant_created",
        "diary_entries",
        ["plant_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "reminders",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("plant_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("reminder_type", sa.String(length=20), nullable=False),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_recurring", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("recurring_days", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["plant_id"], ["plants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_reminders_due",
        "reminders",
        ["is_completed", "scheduled_date"],
        unique=False,
    )
    op.create_index("idx_reminders_user_id", "reminders", ["user_id"], unique=False)
    op.create_index("idx_reminders_plant_id", "reminders", ["plant_id"], unique=False)

    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("related_plant_id", sa.UUID(), nullable=True),
        sa.Column("related_reminder_id", sa.UUID(), nullable=True),
        sa.Column("priority", sa.String(length=10), nullable=False, server_default="medium"),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["related_plant_id"], ["plants.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["related_reminder_id"], ["reminders.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_read_created",
        "notifications",
        ["user_id", "read", "created_at"],
        unique=False,
    )
    op.create_index(
        "idx_notifications_user_type",
        "notifications",
        ["user_id", "type"],
        unique=False,
    )
    op.create_index("idx_notifications_expires_at", "notifications", ["expires_at"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_notifications_expires_at", table_name="notifications")
    op.drop_index("idx_notifications_user_type", table_name="notifications")
    op.drop_index("idx_notifications_user_read_created", table_name="notifications")
    op.drop_table("notifications")

    op.drop_index("idx_reminders_plant_id", table_name="reminders")
    op.drop_index("idx_reminders_user_id", table_name="reminders")
    op.drop_index("idx_reminders_due", table_name="reminders")
    op.drop_table("reminders")

    op.drop_index("idx_diary_entries_plant_created", table_name="diary_entries")
    op.drop_index("idx_diary_entries_user_id", table_name="diary_entries")
    op.drop_table("diary_entries")

    op.drop_index("idx_plants_user_id", table_name="plants")
    op.drop_table("plants")

    op.drop_table("users")
