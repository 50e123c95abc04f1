"""Create authors, books and book_authors tables

Revision ID: 3c9f0e1a7b52
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9f0e1a7b52'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, comment="Author's full name"),
        sa.Column('birth_date', sa.Date(), nullable=False, comment="Author's date of birth"),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'birth_date', name='uq_authors_name_birth_date'),
    )
    op.create_index(op.f('ix_authors_name'), 'authors', ['name'], unique=False)

    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=True, comment='Book price'),
        sa.Column(
            'status',
            sa.Enum('UNPUBLISHED', 'PUBLISHED', name='publication_status',
                    native_enum=False, create_constraint=True, length=32),
            nullable=True,
            comment='Publication status',
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)

    op.create_table('book_authors',
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('author_order', sa.Integer(), nullable=False,
                  comment='1-based position of the author within the book'),
        sa.CheckConstraint('author_order >= 1', name='ck_book_authors_author_order'),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id']),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('book_id', 'author_id'),
        sa.UniqueConstraint('book_id', 'author_order', name='uq_book_authors_book_id_author_order'),
        comment='Ordered association between books and their authors',
    )
    op.create_index(op.f('ix_book_authors_author_id'), 'book_authors', ['author_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_book_authors_author_id'), table_name='book_authors')
    op.drop_table('book_authors')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_authors_name'), table_name='authors')
    op.drop_table('authors')
