"""create kv_items table

Revision ID: 5b1e7c2d9a30
Revises:
Create Date: 2026-10-19 09:12:41.318207

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers…
revision = "5b1e7c2d9a30"
down_revision = None

def upgrade():
    op.create_table(
        "kv_items",
        sa.Column("namespace", sa.String(), nullable=False),
        sa.Column("item", sa.String(), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("namespace", "item"),
    )

def downgrade():
    op.drop_table("kv_items")
