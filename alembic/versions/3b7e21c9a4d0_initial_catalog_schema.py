"""initial catalog schema: components, categories, prompts

Revision ID: 3b7e21c9a4d0
Revises: 
Create Date: 2026-10-17 10:12:31.402118

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "3b7e21c9a4d0"
down_revision = None
branch_labels = None
depends_on = None


def _table_exists(bind, table_name: str) -> bool:
    """Check whether table_name exists in the current DB connection."""
    inspector = sa.inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade():
    bind = op.get_bind()

    # components
    if not _table_exists(bind, "components"):
        op.create_table(
            "components",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
        )

    # categories
    if not _table_exists(bind, "categories"):
        op.create_table(
            "categories",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.Column("slug", sa.Text(), nullable=False),
            sa.Column("description", sa.Text(), nullable=False),
            sa.Column("icon", sa.Text(), nullable=False),
            sa.Column("color", sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint("id"),
        )
        with op.batch_alter_table("categories", schema=None) as batch_op:
            batch_op.create_index(
                batch_op.f("ix_categories_slug"), ["slug"], unique=True
            )

    # prompts
    if not _table_exists(bind, "prompts"):
        op.create_table(
            "prompts",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("category_id", sa.Integer(), nullable=False),
            sa.Column("component_id", sa.Integer(), nullable=True),
            sa.Column("title", sa.Text(), nullable=False),
            sa.Column("description", sa.Text(), nullable=False),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("is_favorite", sa.Boolean(), nullable=True),
            sa.Column("metadata", sa.Text(), nullable=True),
            sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
            sa.ForeignKeyConstraint(["component_id"], ["components.id"]),
            sa.PrimaryKeyConstraint("id"),
        )
        with op.batch_alter_table("prompts", schema=None) as batch_op:
            batch_op.create_index(
                batch_op.f("ix_prompts_category_id"), ["category_id"], unique=False
            )
            batch_op.create_index(
                batch_op.f("ix_prompts_component_id"), ["component_id"], unique=False
            )


def downgrade():
    bind = op.get_bind()
    for table_name in ("prompts", "categories", "components"):
        if _table_exists(bind, table_name):
            op.drop_table(table_name)
