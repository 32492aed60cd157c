"""initial schema: users, skills, matches, messages, exchanges, time_credits

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

Creates every SkillTrade table:
  • users: credentials, profile, time credit balance
  • skills: offered / sought skills per user (proficiency 1-5)
  • matches: one directed swipe record per (user1, user2)
  • messages: direct messages between matched users
  • exchanges: teaching sessions that move credits on completion
  • time_credits: the credit ledger, one row per balance change
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # ── users ─────────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.String(500), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("occupation", sa.String(255), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        sa.Column("time_credits", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("profile_completion", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_verified", sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("profile_completion BETWEEN 0 AND 100", name="ck_users_profile_completion"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_is_active", "users", ["is_active"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # ── skills ────────────────────────────────────────────────────────────
    op.create_table(
        "skills",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(100), nullable=False, server_default="General"),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("proficiency_level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("type IN ('offering', 'seeking')", name="ck_skills_type"),
        sa.CheckConstraint("proficiency_level BETWEEN 1 AND 5", name="ck_skills_proficiency_level"),
    )
    op.create_index("ix_skills_user_id", "skills", ["user_id"])
    op.create_index("ix_skills_category", "skills", ["category"])
    op.create_index("ix_skills_type", "skills", ["type"])
    op.create_index("ix_skills_created_at", "skills", ["created_at"])

    # ── matches ───────────────────────────────────────────────────────────
    op.create_table(
        "matches",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("user1_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user2_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        *_timestamps(),
        sa.UniqueConstraint("user1_id", "user2_id", name="uq_match_pair"),
        sa.CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name="ck_matches_status"),
    )
    op.create_index("ix_matches_user1_id", "matches", ["user1_id"])
    op.create_index("ix_matches_user2_id", "matches", ["user2_id"])
    op.create_index("ix_matches_status", "matches", ["status"])
    op.create_index("ix_matches_created_at", "matches", ["created_at"])

    # ── messages ──────────────────────────────────────────────────────────
    op.create_table(
        "messages",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("sender_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("receiver_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=True, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_messages_pair", "messages", ["sender_id", "receiver_id"])
    op.create_index("ix_messages_receiver_id", "messages", ["receiver_id"])
    op.create_index("ix_messages_is_read", "messages", ["is_read"])
    op.create_index("ix_messages_created_at", "messages", ["created_at"])

    # ── exchanges ─────────────────────────────────────────────────────────
    op.create_table(
        "exchanges",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("match_id", sa.Uuid(as_uuid=True), sa.ForeignKey("matches.id", ondelete="SET NULL"), nullable=True),
        sa.Column("teacher_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("student_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("skill_offered", sa.String(255), nullable=False),
        sa.Column("skill_requested", sa.String(255), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False, server_default="60"),
        sa.Column("credits_amount", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("status", sa.String(20), nullable=False, server_default="scheduled"),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("feedback", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("status IN ('scheduled', 'completed', 'cancelled')", name="ck_exchanges_status"),
        sa.CheckConstraint("rating IS NULL OR rating BETWEEN 1 AND 5", name="ck_exchanges_rating"),
        sa.CheckConstraint("credits_amount > 0", name="ck_exchanges_credits_amount"),
    )
    op.create_index("ix_exchanges_teacher_id", "exchanges", ["teacher_id"])
    op.create_index("ix_exchanges_student_id", "exchanges", ["student_id"])
    op.create_index("ix_exchanges_status", "exchanges", ["status"])
    op.create_index("ix_exchanges_created_at", "exchanges", ["created_at"])

    # ── time_credits (ledger) ─────────────────────────────────────────────
    op.create_table(
        "time_credits",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.Uuid(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("exchange_id", sa.Uuid(as_uuid=True), sa.ForeignKey("exchanges.id", ondelete="SET NULL"), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("type IN ('earned', 'spent', 'bonus')", name="ck_time_credits_type"),
    )
    op.create_index("ix_time_credits_user_id", "time_credits", ["user_id"])
    op.create_index("ix_time_credits_created_at", "time_credits", ["created_at"])


def downgrade() -> None:
    op.drop_table("time_credits")
    op.drop_table("exchanges")
    op.drop_table("messages")
    op.drop_table("matches")
    op.drop_table("skills")
    op.drop_table("users")
