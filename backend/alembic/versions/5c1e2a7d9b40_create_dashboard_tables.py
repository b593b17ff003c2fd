"""Create team members, tasks and uploads

Revision ID: 5c1e2a7d9b40
Revises:
Create Date: 2026-10-18

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c1e2a7d9b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "team_members",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default=""),
        sa.Column("avatar", sa.String(), nullable=False),
        sa.Column("color", sa.String(), nullable=False),
    )
    # Names are display labels, not keys: deliberately not unique.
    op.create_index("ix_team_members_name", "team_members", ["name"], unique=False)

    op.create_table(
        "tasks",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("assignees", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("due_date", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_tasks_status", "tasks", ["status"], unique=False)
    op.create_index("ix_tasks_category", "tasks", ["category"], unique=False)

    op.create_table(
        "uploads",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("filename", sa.String(), nullable=False),
        sa.Column("original_name", sa.String(), nullable=False),
        sa.Column("member_name", sa.String(), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("file_type", sa.String(), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("filename", name="uq_uploads_filename"),
    )
    op.create_index("ix_uploads_member_name", "uploads", ["member_name"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_uploads_member_name", table_name="uploads")
    op.drop_table("uploads")

    op.drop_index("ix_tasks_category", table_name="tasks")
    op.drop_index("ix_tasks_status", table_name="tasks")
    op.drop_table("tasks")

    op.drop_index("ix_team_members_name", table_name="team_members")
    op.drop_table("team_members")
