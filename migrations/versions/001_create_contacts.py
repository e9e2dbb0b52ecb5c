"""Create contacts table with a case-insensitive unique email index."""

from typing import Sequence
from typing import Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_create_contacts"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the contacts table."""
    op.create_table(
        "contacts",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("first_name", sa.String(length=40), nullable=True),
        sa.Column("last_name", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=80), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_contacts"),
    )
    op.create_index(
        "uq_contacts_email_lower",
        "contacts",
        [sa.text("lower(email)")],
        unique=True,
    )
    op.create_index("ix_contacts_last_name_first_name", "contacts", ["last_name", "first_name"])


def downgrade() -> None:
    """Drop the contacts table."""
    op.drop_index("ix_contacts_last_name_first_name", table_name="contacts")
    op.drop_index("uq_contacts_email_lower", table_name="contacts")
    op.drop_table("contacts")
