"""Create tuiter tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates users, tuits, likes, follows, bookmarks and messages.
       Column meaning is documented on the models in tuiter/models/.

Rollback: downgrade() drops all six tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _document_columns():
    """id + created_at, present on every table."""
    return [
        sa.Column("id", sa.String(36), nullable=False, comment="Opaque record identifier"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="When this record was inserted (UTC)",
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        *_document_columns(),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column(
            "account_type",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'PERSONAL'"),
            comment="PERSONAL, ACADEMIC or PROFESSIONAL",
        ),
        sa.Column(
            "joined",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("uq_users_username", "users", ["username"], unique=True)

    op.create_table(
        "tuits",
        *_document_columns(),
        sa.Column("owner_id", sa.String(64), nullable=False, comment="Id of the authoring user"),
        sa.Column("text", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tuits_owner_id", "tuits", ["owner_id"])

    op.create_table(
        "likes",
        *_document_columns(),
        sa.Column("tuit_id", sa.String(64), nullable=False),
        sa.Column("liked_by", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tuit_id", "liked_by", name="uq_likes_tuit_user"),
    )
    op.create_index("idx_likes_liked_by", "likes", ["liked_by"])

    op.create_table(
        "follows",
        *_document_columns(),
        sa.Column("user_following", sa.String(64), nullable=False),
        sa.Column("user_followed", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_following", "user_followed", name="uq_follows_pair"),
    )
    op.create_index("idx_follows_user_followed", "follows", ["user_followed"])

    op.create_table(
        "bookmarks",
        *_document_columns(),
        sa.Column("bookmarked_tuit", sa.String(64), nullable=False),
        sa.Column("bookmarked_by", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("bookmarked_tuit", "bookmarked_by", name="uq_bookmarks_pair"),
    )
    op.create_index("idx_bookmarks_bookmarked_by", "bookmarks", ["bookmarked_by"])

    op.create_table(
        "messages",
        *_document_columns(),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("from_user", sa.String(64), nullable=False),
        sa.Column("to_user", sa.String(64), nullable=False),
        sa.Column(
            "sent_on",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_messages_from_user", "messages", ["from_user"])
    op.create_index("idx_messages_to_user", "messages", ["to_user"])


def downgrade() -> None:
    for table in ("messages", "bookmarks", "follows", "likes", "tuits", "users"):
        op.drop_table(table)
