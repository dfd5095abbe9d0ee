"""create employees table"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_employees_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=50), nullable=False),
        sa.Column("address", sa.String(length=250), nullable=True),
        sa.Column("dob", sa.Date(), nullable=True),
        sa.Column("phone_number", sa.String(length=15), nullable=True),
        sa.Column("profile_pic", sa.String(length=200), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_date", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_employees"),
    )
    op.create_index("ix_employees_email", "employees", ["email"])
    op.create_index("ix_employees_is_deleted_id", "employees", ["is_deleted", "id"])


def downgrade() -> None:
    op.drop_index("ix_employees_is_deleted_id", table_name="employees")
    op.drop_index("ix_employees_email", table_name="employees")
    op.drop_table("employees")
