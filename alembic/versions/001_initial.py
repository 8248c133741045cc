"""Initial migration: users, slideshows, slides and slideshow settings.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ANIMATIONS = ("fade", "slide", "zoom", "none")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create enum types
    user_role_enum = postgresql.ENUM("admin", "user", name="user_role_enum", create_type=False)
    user_role_enum.create(op.get_bind(), checkfirst=True)
    animation_enum = postgresql.ENUM(*ANIMATIONS, name="slide_animation_enum", create_type=False)
    animation_enum.create(op.get_bind(), checkfirst=True)

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("role", user_role_enum, nullable=False, server_default="user"),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Create slideshows table
    op.create_table(
        "slideshows",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("pages", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        sa.Column("auto_play", sa.Boolean(), nullable=False, default=True),
        sa.Column("interval", sa.Integer(), nullable=False, default=5000),
        sa.Column("show_controls", sa.Boolean(), nullable=False, default=True),
        sa.Column("show_indicators", sa.Boolean(), nullable=False, default=True),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_slideshows_name", "slideshows", ["name"], unique=True)
    op.create_index("ix_slideshows_author_id", "slideshows", ["author_id"])

    # Create slides table
    op.create_table(
        "slides",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("slideshow_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, default=1),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        sa.Column("title_en", sa.String(200), nullable=False, server_default=""),
        sa.Column("title_ta", sa.String(200), nullable=False, server_default=""),
        sa.Column("content_en", sa.Text(), nullable=True),
        sa.Column("content_ta", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("button_text_en", sa.String(100), nullable=True),
        sa.Column("button_text_ta", sa.String(100), nullable=True),
        sa.Column("button_link", sa.String(500), nullable=True),
        sa.Column("background_color", sa.String(20), nullable=False, server_default="#ffffff"),
        sa.Column("text_color", sa.String(20), nullable=False, server_default="#000000"),
        sa.Column("animation", animation_enum, nullable=False, server_default="fade"),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="5000"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["slideshow_id"], ["slideshows.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_slides_slideshow_id", "slides", ["slideshow_id"])
    op.create_index("ix_slides_slideshow_order", "slides", ["slideshow_id", "order"])
    op.create_index("ix_slides_slideshow_active", "slides", ["slideshow_id", "is_active"])

    # Create slideshow_settings table
    op.create_table(
        "slideshow_settings",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("default_interval", sa.Integer(), nullable=False, server_default="5000"),
        sa.Column("default_auto_play", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("default_show_controls", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("default_show_indicators", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("max_slides_per_show", sa.Integer(), nullable=False, server_default="10"),
        sa.Column("animations_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("default_animation", animation_enum, nullable=False, server_default="fade"),
        sa.Column("default_animation_duration", sa.Integer(), nullable=False, server_default="500"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("slideshow_settings")
    op.drop_index("ix_slides_slideshow_active", table_name="slides")
    op.drop_index("ix_slides_slideshow_order", table_name="slides")
    op.drop_index("ix_slides_slideshow_id", table_name="slides")
    op.drop_table("slides")
    op.drop_index("ix_slideshows_author_id", table_name="slideshows")
    op.drop_index("ix_slideshows_name", table_name="slideshows")
    op.drop_table("slideshows")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

    postgresql.ENUM(name="slide_animation_enum").drop(op.get_bind(), checkfirst=True)
    postgresql.ENUM(name="user_role_enum").drop(op.get_bind(), checkfirst=True)
