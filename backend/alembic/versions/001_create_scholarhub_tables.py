"""Create users, scholarships, apply_scholarships and reviews tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Initial schema: one table per collection of the web client.
How:   Portable column types only (runs on PostgreSQL and SQLite). Ids are
       24-character hex strings generated by the application.

No foreign keys and no unique constraints: applications and reviews keep
their scholarship/user ids as plain columns, and user email uniqueness is
checked by the application.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.String(24), primary_key=True, nullable=False)


def _created_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("photo", sa.Text(), nullable=True),
        # Free-form: "admin", "moderator" or anything a caller stored
        sa.Column("role", sa.Text(), nullable=True),
        _created_column("created_at"),
    )
    op.create_index("idx_users_email", "users", ["email"])

    op.create_table(
        "scholarships",
        _id_column(),
        sa.Column("scholarship_name", sa.String(255), nullable=True),
        sa.Column("scholarship_category", sa.String(100), nullable=True),
        sa.Column("subject_name", sa.String(255), nullable=True),
        sa.Column("subject_category", sa.String(100), nullable=True),
        sa.Column("degree", sa.String(100), nullable=True),
        sa.Column("scholarship_description", sa.Text(), nullable=True),
        sa.Column("university_name", sa.String(255), nullable=True),
        sa.Column("university_logo", sa.Text(), nullable=True),
        sa.Column("university_country", sa.String(100), nullable=True),
        sa.Column("university_city", sa.String(100), nullable=True),
        sa.Column("university_location", sa.String(255), nullable=True),
        sa.Column("university_world_rank", sa.Integer(), nullable=True),
        sa.Column("tuition_fees", sa.Float(), nullable=True),
        sa.Column("application_fees", sa.Float(), nullable=True),
        sa.Column("service_charge", sa.Float(), nullable=True),
        sa.Column("application_deadline", sa.Date(), nullable=True),
        sa.Column("post_date", sa.Date(), nullable=True),
        sa.Column("posted_user_email", sa.String(255), nullable=True),
    )

    op.create_table(
        "apply_scholarships",
        _id_column(),
        sa.Column("scholarship_id", sa.String(24), nullable=True),
        sa.Column("user_name", sa.String(255), nullable=True),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(24), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("photo", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("gender", sa.String(50), nullable=True),
        sa.Column("applying_degree", sa.String(100), nullable=True),
        sa.Column("ssc_result", sa.String(50), nullable=True),
        sa.Column("hsc_result", sa.String(50), nullable=True),
        sa.Column("study_gap", sa.String(50), nullable=True),
        sa.Column("university_name", sa.String(255), nullable=True),
        sa.Column("scholarship_category", sa.String(100), nullable=True),
        sa.Column("subject_category", sa.String(100), nullable=True),
        sa.Column("application_fees", sa.Float(), nullable=True),
        sa.Column("service_charge", sa.Float(), nullable=True),
        sa.Column(
            "status",
            sa.String(50),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        sa.Column("feedback", sa.Text(), nullable=True),
        _created_column("applied_date"),
    )
    op.create_index(
        "idx_apply_scholarships_user_email", "apply_scholarships", ["user_email"]
    )

    op.create_table(
        "reviews",
        _id_column(),
        sa.Column("scholarship_id", sa.String(24), nullable=True),
        sa.Column("scholarship_name", sa.String(255), nullable=True),
        sa.Column("university_name", sa.String(255), nullable=True),
        sa.Column("user_name", sa.String(255), nullable=True),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("user_image", sa.Text(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        _created_column("review_date"),
    )
    op.create_index("idx_reviews_user_email", "reviews", ["user_email"])


def downgrade() -> None:
    op.drop_index("idx_reviews_user_email", table_name="reviews")
    op.drop_table("reviews")
    op.drop_index("idx_apply_scholarships_user_email", table_name="apply_scholarships")
    op.drop_table("apply_scholarships")
    op.drop_table("scholarships")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
