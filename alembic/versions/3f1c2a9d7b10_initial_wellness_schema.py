"""initial wellness schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:02:44.512301

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

EMOTION_TYPES = ("happy", "sad", "anxious", "angry", "neutral", "excited", "frustrated", "calm", "stressed", "grateful")


def upgrade() -> None:
    """Upgrade schema."""
    emotion_types = sa.Enum(*EMOTION_TYPES, name="emotion_types")
    message_roles = sa.Enum("user", "assistant", "system", name="message_roles")
    session_statuses = sa.Enum("active", "paused", "completed", "archived", name="session_statuses")

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=True),
        sa.Column("auth_provider", sa.String(), nullable=True),
        sa.Column("role", sa.String(length=10), nullable=False, server_default="user"),
        sa.Column("campus", sa.String(length=20), nullable=True),
        sa.Column("office_or_dept", sa.String(), nullable=True),
        sa.Column("is_profile_complete", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("has_completed_pre_assessment", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "pre_assessments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        *[
            sa.Column(name, sa.Integer(), nullable=False)
            for name in (
                "work_overwhelmed", "concentration_difficulty", "procrastination", "irritability",
                "lack_accomplishment", "trouble_switching_off", "feeling_down", "losing_interest",
                "feeling_anxious", "mood_swings", "feeling_guilty", "sleep_problems", "appetite_changes",
                "feeling_tired", "physical_symptoms", "substance_use", "withdrawing", "thoughts_of_harm",
                "life_not_worth_living", "worried_about_students",
            )
        ],
        sa.Column("coping_mechanisms", sa.JSON(), nullable=False),
        sa.Column("goals", sa.JSON(), nullable=False),
        sa.Column("total_score", sa.Integer(), nullable=False),
        sa.Column("risk_level", sa.String(length=20), nullable=False),
        sa.Column("ai_analysis", sa.JSON(), nullable=True),
        sa.Column("personalized_plan", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "chat_sessions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("status", session_statuses, nullable=False, server_default="active"),
        sa.Column("context", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("last_activity_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_chat_sessions_user_id", "chat_sessions", ["user_id"])

    op.create_table(
        "chat_messages",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("chat_sessions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("role", message_roles, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("emotion", emotion_types, nullable=True),
        sa.Column("confidence", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_chat_messages_session_id", "chat_messages", ["session_id"])

    op.create_table(
        "user_emotions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("chat_sessions.id", ondelete="SET NULL"), nullable=True),
        sa.Column("emotion", emotion_types, nullable=False),
        sa.Column("intensity", sa.Integer(), nullable=False),
        sa.Column("context", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_user_emotions_user_id", "user_emotions", ["user_id"])

    op.create_table(
        "chat_analytics",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("chat_sessions.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("message_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_response_time", sa.Integer(), nullable=True),
        sa.Column("dominant_emotion", emotion_types, nullable=True),
        sa.Column("session_duration", sa.Integer(), nullable=True),
        sa.Column("user_satisfaction", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "ai_response_templates",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("emotion", emotion_types, nullable=False),
        sa.Column("response_type", sa.String(length=20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("coping_strategies", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_ai_response_templates_emotion", "ai_response_templates", ["emotion"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_ai_response_templates_emotion", table_name="ai_response_templates")
    op.drop_table("ai_response_templates")
    op.drop_table("chat_analytics")
    op.drop_index("ix_user_emotions_user_id", table_name="user_emotions")
    op.drop_table("user_emotions")
    op.drop_index("ix_chat_messages_session_id", table_name="chat_messages")
    op.drop_table("chat_messages")
    op.drop_index("ix_chat_sessions_user_id", table_name="chat_sessions")
    op.drop_table("chat_sessions")
    op.drop_table("pre_assessments")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")

    bind = op.get_bind()
    for name in ("emotion_types", "message_roles", "session_statuses"):
        sa.Enum(name=name).drop(bind, checkfirst=True)
