"""initial concept collections

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _doc_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create one table per concept collection."""
    op.create_table(
        "users",
        *_doc_columns(),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_table(
        "sessions",
        *_doc_columns(),
        sa.Column("user_id", sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sessions_user_id", "sessions", ["user_id"])
    op.create_table(
        "posts",
        *_doc_columns(),
        sa.Column("author", sa.String(length=32), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_posts_author", "posts", ["author"])
    op.create_table(
        "comments",
        *_doc_columns(),
        sa.Column("author", sa.String(length=32), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comments_author", "comments", ["author"])
    op.create_index("ix_comments_parent", "comments", ["parent"])
    op.create_table(
        "reactions",
        *_doc_columns(),
        sa.Column("author", sa.String(length=32), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("item", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reactions_author", "reactions", ["author"])
    op.create_index("ix_reactions_item", "reactions", ["item"])
    op.create_table(
        "follows",
        *_doc_columns(),
        sa.Column("follower", sa.String(length=32), nullable=False),
        sa.Column("followee", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower", "followee", name="uq_follows_pair"),
        sa.CheckConstraint("follower <> followee", name="ck_follows_not_self"),
    )
    op.create_index("ix_follows_follower", "follows", ["follower"])
    op.create_index("ix_follows_followee", "follows", ["followee"])
    op.create_table(
        "friends",
        *_doc_columns(),
        sa.Column("user1", sa.String(length=32), nullable=False),
        sa.Column("user2", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user1", "user2", name="uq_friends_pair"),
        sa.CheckConstraint("user1 < user2", name="ck_friends_canonical"),
    )
    op.create_index("ix_friends_user1", "friends", ["user1"])
    op.create_index("ix_friends_user2", "friends", ["user2"])
    op.create_table(
        "friend_requests",
        *_doc_columns(),
        sa.Column("from_user", sa.String(length=32), nullable=False),
        sa.Column("to_user", sa.String(length=32), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_friend_requests_status",
        ),
    )
    op.create_index("ix_friend_requests_pair", "friend_requests", ["from_user", "to_user"])
    op.create_index("ix_friend_requests_to_user", "friend_requests", ["to_user"])
    op.create_table(
        "scores",
        *_doc_columns(),
        sa.Column("item", sa.String(length=32), nullable=False),
        sa.Column("score", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("item"),
    )


def downgrade() -> None:
    """Drop every concept collection."""
    for table in (
        "scores",
        "friend_requests",
        "friends",
        "follows",
        "reactions",
        "comments",
        "posts",
        "sessions",
        "users",
    ):
        op.drop_table(table)
