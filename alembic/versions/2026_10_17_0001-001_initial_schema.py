"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-17

All 8 tables as defined in app/models/database_models.py:
users, business_plans, market_data, compliance_items, marketplaces,
courses, mentors, user_progress.
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # ── users ─────────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("avatar", sa.JSON, nullable=True),
        sa.Column("business_profile", sa.JSON, nullable=True),
        sa.Column("completed_compliance_items", sa.JSON, nullable=False),
        *_timestamps(),
    )

    # ── business_plans ────────────────────────────────────────────────────
    op.create_table(
        "business_plans",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("business_name", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(50), nullable=False),
        sa.Column("business_idea", sa.Text, nullable=False),
        sa.Column("target_market", sa.Text, nullable=False),
        sa.Column("products_services", sa.Text, nullable=True),
        sa.Column("competition", sa.Text, nullable=True),
        sa.Column("market_size", sa.Text, nullable=True),
        sa.Column("unique_value", sa.Text, nullable=True),
        sa.Column("challenges", sa.Text, nullable=True),
        sa.Column("sections", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, index=True),
        sa.Column("version_history", sa.JSON, nullable=False),
        *_timestamps(),
    )

    # ── market_data ───────────────────────────────────────────────────────
    op.create_table(
        "market_data",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("plan_id", sa.Integer, nullable=False, index=True),
        sa.Column("tab_type", sa.String(32), nullable=False),
        sa.Column("data", sa.JSON, nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "plan_id", "tab_type", name="uq_market_data_user_plan_tab"),
    )

    # ── compliance_items ──────────────────────────────────────────────────
    op.create_table(
        "compliance_items",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("priority", sa.String(10), nullable=False),
        sa.Column("applicable_business_types", sa.JSON, nullable=False),
        sa.Column("applicable_states", sa.JSON, nullable=False),
        sa.Column("due_date", sa.String(255), nullable=True),
        sa.Column("link", sa.String(512), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, index=True),
        sa.Column("steps", sa.JSON, nullable=False),
        sa.Column("fees", sa.JSON, nullable=True),
        sa.Column("helpful_links", sa.JSON, nullable=False),
        sa.Column("template_url", sa.String(512), nullable=True),
    )

    # ── marketplaces ──────────────────────────────────────────────────────
    op.create_table(
        "marketplaces",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("logo", sa.String(512), nullable=False),
        sa.Column("website", sa.String(512), nullable=False),
        sa.Column("industries", sa.JSON, nullable=False),
        sa.Column("product_types", sa.JSON, nullable=False),
        sa.Column("target_market", sa.JSON, nullable=False),
        sa.Column("commission_rate", sa.Float, nullable=False),
        sa.Column("average_rating", sa.Float, nullable=True),
        sa.Column("review_count", sa.Integer, nullable=False),
        sa.Column("features", sa.JSON, nullable=False),
        sa.Column("requirements", sa.JSON, nullable=False),
        sa.Column("onboarding_steps", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, index=True),
        sa.Column("supported_regions", sa.JSON, nullable=False),
        sa.Column("payment_methods", sa.JSON, nullable=False),
        sa.Column("shipping_options", sa.JSON, nullable=False),
        sa.Column("minimum_order_value", sa.Float, nullable=False),
        sa.Column("maximum_order_value", sa.Float, nullable=True),
        *_timestamps(),
    )

    # ── courses ───────────────────────────────────────────────────────────
    op.create_table(
        "courses",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", sa.String(50), nullable=False, index=True),
        sa.Column("level", sa.String(20), nullable=False),
        sa.Column("thumbnail", sa.String(512), nullable=True),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("instructor", sa.JSON, nullable=False),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("prerequisites", sa.JSON, nullable=False),
        sa.Column("learning_outcomes", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("language", sa.String(10), nullable=False),
        sa.Column("rating_average", sa.Float, nullable=False),
        sa.Column("rating_count", sa.Integer, nullable=False),
        sa.Column("enrollment_count", sa.Integer, nullable=False),
        sa.Column("completion_rate", sa.Float, nullable=False),
        sa.Column("certificate_available", sa.Boolean, nullable=False),
    )

    # ── mentors ───────────────────────────────────────────────────────────
    op.create_table(
        "mentors",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text, nullable=False),
        sa.Column("avatar", sa.String(512), nullable=True),
        sa.Column("expertise", sa.JSON, nullable=False),
        sa.Column("industries", sa.JSON, nullable=False),
        sa.Column("languages", sa.JSON, nullable=False),
        sa.Column("experience", sa.JSON, nullable=False),
        sa.Column("mentee_capacity", sa.JSON, nullable=False),
        sa.Column("rating_average", sa.Float, nullable=False),
        sa.Column("rating_count", sa.Integer, nullable=False),
        sa.Column("sessions_done", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
    )

    # ── user_progress ─────────────────────────────────────────────────────
    op.create_table(
        "user_progress",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("courses", sa.JSON, nullable=False),
        sa.Column("mentor_sessions", sa.JSON, nullable=False),
        sa.Column("learning_path", sa.JSON, nullable=False),
        sa.Column("achievements", sa.JSON, nullable=False),
        sa.Column("stats", sa.JSON, nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("user_progress")
    op.drop_table("mentors")
    op.drop_table("courses")
    op.drop_table("marketplaces")
    op.drop_table("compliance_items")
    op.drop_table("market_data")
    op.drop_table("business_plans")
    op.drop_table("users")
