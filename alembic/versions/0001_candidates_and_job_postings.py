"""create candidates and job postings

Revision ID: 0001_candidates_and_job_postings
Revises:
Create Date: 2026-10-18 09:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_candidates_and_job_postings"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "candidates",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("linkedin_url", sa.String(length=500), nullable=True),
        sa.Column("portfolio_url", sa.String(length=500), nullable=True),
        sa.Column("resume_url", sa.String(length=500), nullable=True),
        sa.Column("source", sa.String(length=50), nullable=True),
        sa.Column("years_of_experience", sa.Integer(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    )
    op.create_index("ix_candidates_id", "candidates", ["id"], unique=False)
    op.create_index("ix_candidates_email", "candidates", ["email"], unique=True)
    op.create_index("ix_candidates_source", "candidates", ["source"], unique=False)
    op.create_index("ix_candidates_deleted_at", "candidates", ["deleted_at"], unique=False)

    employment_type = sa.Enum("full_time", "part_time", "contract", "internship", name="employment_type")
    job_status = sa.Enum("draft", "published", "closed", name="job_status")

    op.create_table(
        "job_postings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("department", sa.String(length=100), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("employment_type", employment_type, nullable=False),
        sa.Column("status", job_status, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    )
    op.create_index("ix_job_postings_id", "job_postings", ["id"], unique=False)
    op.create_index("ix_job_postings_status", "job_postings", ["status"], unique=False)
    op.create_index("ix_job_postings_deleted_at", "job_postings", ["deleted_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_job_postings_deleted_at", table_name="job_postings")
    op.drop_index("ix_job_postings_status", table_name="job_postings")
    op.drop_index("ix_job_postings_id", table_name="job_postings")
    op.drop_table("job_postings")
    sa.Enum(name="job_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="employment_type").drop(op.get_bind(), checkfirst=True)

    op.drop_index("ix_candidates_deleted_at", table_name="candidates")
    op.drop_index("ix_candidates_source", table_name="candidates")
    op.drop_index("ix_candidates_email", table_name="candidates")
    op.drop_index("ix_candidates_id", table_name="candidates")
    op.drop_table("candidates")
