"""Create projects and palettes.

- projects: unique name
- palettes: five color tokens, unique (name, project_id), FK to projects

The foreign key has no ON DELETE CASCADE; deleting a project removes its
palettes explicitly in the same transaction.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "c41d7a9e2b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_projects"),
        sa.UniqueConstraint("name", name="uq_projects_name"),
    )

    op.create_table(
        "palettes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("color1", sa.Text(), nullable=False),
        sa.Column("color2", sa.Text(), nullable=False),
        sa.Column("color3", sa.Text(), nullable=False),
        sa.Column("color4", sa.Text(), nullable=False),
        sa.Column("color5", sa.Text(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_palettes"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], name="fk_palettes_project_id_projects"),
        sa.UniqueConstraint("name", "project_id", name="uq_palettes_name_project_id"),
    )
    op.create_index("ix_palettes_project_id", "palettes", ["project_id"])


def downgrade() -> None:
    op.drop_index("ix_palettes_project_id", table_name="palettes")
    op.drop_table("palettes")
    op.drop_table("projects")
