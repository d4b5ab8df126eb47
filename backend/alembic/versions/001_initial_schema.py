"""Initial schema: exam_classifications and unique_exams.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "exam_classifications",
        sa.Column("exam_name", sa.String(255), primary_key=True),
        sa.Column("tube", sa.String(255), nullable=False),
        sa.Column("instructions", sa.Text, nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "unique_exams",
        sa.Column("exam_name", sa.String(255), primary_key=True),
        sa.Column("exam_code", sa.String(100), nullable=False, server_default="unknown"),
        sa.Column("added_by", sa.String(255), nullable=False, server_default="system"),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("unique_exams")
    op.drop_table("exam_classifications")
