"""initial reviews, watchlist and auth tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a7d2b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "user",
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email_verified_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "authsession",
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("expires", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("token_hash"),
    )
    op.create_index("ix_authsession_user_id", "authsession", ["user_id"], unique=False)

    op.create_table(
        "verificationtoken",
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("identifier", sa.String(length=255), nullable=False),
        sa.Column("expires", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("token_hash"),
    )
    op.create_index(
        "ix_verificationtoken_identifier",
        "verificationtoken",
        ["identifier"],
        unique=False,
    )

    op.create_table(
        "review",
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("movie_title", sa.String(length=500), nullable=False),
        sa.Column("movie_poster_path", sa.String(length=500), nullable=True),
        sa.Column("movie_release_date", sa.String(length=32), nullable=True),
        sa.Column("comment", sa.String(), nullable=True),
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("story", sa.Integer(), nullable=False),
        sa.Column("acting", sa.Integer(), nullable=False),
        sa.Column("direction", sa.Integer(), nullable=False),
        sa.Column("cinematography", sa.Integer(), nullable=False),
        sa.Column("music", sa.Integer(), nullable=False),
        sa.Column("overall", sa.Integer(), nullable=False),
        sa.Column("overall_star_rating", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "movie_id", name="uq_review_user_id_movie_id"),
    )
    op.create_index("ix_review_movie_id", "review", ["movie_id"], unique=False)
    op.create_index("ix_review_user_id", "review", ["user_id"], unique=False)

    op.create_table(
        "watchlistitem",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("poster_path", sa.String(length=500), nullable=True),
        sa.Column("release_date", sa.String(length=32), nullable=True),
        sa.Column("overview", sa.String(), nullable=True),
        sa.Column(
            "media_type",
            sa.Enum("MOVIE", "TV", name="mediatype", native_enum=False),
            nullable=False,
        ),
        sa.Column("added_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "movie_id", name="uq_watchlistitem_user_id_movie_id"
        ),
    )
    op.create_index(
        "ix_watchlistitem_movie_id", "watchlistitem", ["movie_id"], unique=False
    )
    op.create_index(
        "ix_watchlistitem_user_id", "watchlistitem", ["user_id"], unique=False
    )


def downgrade():
    op.drop_index("ix_watchlistitem_user_id", table_name="watchlistitem")
    op.drop_index("ix_watchlistitem_movie_id", table_name="watchlistitem")
    op.drop_table("watchlistitem")
    op.drop_index("ix_review_user_id", table_name="review")
    op.drop_index("ix_review_movie_id", table_name="review")
    op.drop_table("review")
    op.drop_index("ix_verificationtoken_identifier", table_name="verificationtoken")
    op.drop_table("verificationtoken")
    op.drop_index("ix_authsession_user_id", table_name="authsession")
    op.drop_table("authsession")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
