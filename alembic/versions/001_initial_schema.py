"""Initial schema — countries, persons.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "countries",
        sa.Column("country_id", UUID(as_uuid=True), primary_key=True),
        sa.Column("country_name", sa.String(100), nullable=False),
        sa.UniqueConstraint("country_name", name="uq_countries_country_name"),
    )

    op.create_table(
        "persons",
        sa.Column("person_id", UUID(as_uuid=True), primary_key=True),
        sa.Column("person_name", sa.String(40), nullable=True),
        sa.Column("email", sa.String(40), nullable=True),
        sa.Column("date_of_birth", sa.Date, nullable=True),
        sa.Column("gender", sa.String(10), nullable=True),
        sa.Column("country_id", UUID(as_uuid=True), nullable=True),
        sa.Column("address", sa.String(200), nullable=True),
        sa.Column(
            "receive_news_letters", sa.Boolean, nullable=False,
            server_default=sa.false(),
        ),
    )
    op.create_index("ix_persons_country_id", "persons", ["country_id"])


def downgrade() -> None:
    op.drop_index("ix_persons_country_id", table_name="persons")
    op.drop_table("persons")
    op.drop_table("countries")
