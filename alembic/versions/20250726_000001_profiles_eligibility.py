from alembic import op
import sqlalchemy as sa


revision = "20250726_000001_profiles_eligibility"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user_profiles",
        sa.Column("user_id", sa.String(length=64), primary_key=True),
        sa.Column("full_name", sa.String(length=255)),
        sa.Column("insurance_provider", sa.String(length=128)),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    )

    op.create_table(
        "eligibility_records",
        sa.Column("user_id", sa.String(length=64), sa.ForeignKey("user_profiles.user_id"), primary_key=True),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("eligibility_records")
    op.drop_table("user_profiles")
