from alembic import op
import sqlalchemy as sa

revision = "0001_records"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "records",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("collection", sa.String(length=64), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("created_on", sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column("modified_on", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_records_collection", "records", ["collection"], unique=False)

def downgrade():
    op.drop_index("ix_records_collection", table_name="records")
    op.drop_table("records")
