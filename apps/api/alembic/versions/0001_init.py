"""init

Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
  op.create_table(
    "projects",
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("name", sa.String(), nullable=False),
    sa.Column("start_date", sa.String(), nullable=False),
    sa.Column("display_order", sa.Float(), nullable=False, server_default="0"),
    sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
  )
  op.create_index("ix_projects_display_order", "projects", ["display_order"], unique=False)

  op.create_table(
    "tasks",
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("project_id", sa.Integer(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    sa.Column("name", sa.String(), nullable=False),
    sa.Column("start_date", sa.String(), nullable=False),
    sa.Column("end_date", sa.String(), nullable=False),
    sa.Column("display_order", sa.Float(), nullable=False, server_default="0"),
    sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
  )
  op.create_index("ix_tasks_project_display_order", "tasks", ["project_id", "display_order"], unique=False)


def downgrade() -> None:
  op.drop_index("ix_tasks_project_display_order", table_name="tasks")
  op.drop_table("tasks")
  op.drop_index("ix_projects_display_order", table_name="projects")
  op.drop_table("projects")
