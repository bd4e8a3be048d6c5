"""create users, todolists and todos

Revision ID: 0001
Revises:
Create Date: 2026-10-17 09:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # No unique constraint on title: callers check for duplicates first.
    op.create_table(
        'todolists',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_todolists_username', 'todolists', ['username'])

    op.create_table(
        'todos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('todolist_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('done', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['todolist_id'], ['todolists.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('todolist_id', 'title', name='todos_todolist_id_title_key'),
    )
    op.create_index('ix_todos_todolist_id', 'todos', ['todolist_id'])
    op.create_index('ix_todos_username', 'todos', ['username'])


def downgrade() -> None:
    op.drop_index('ix_todos_username', table_name='todos')
    op.drop_index('ix_todos_todolist_id', table_name='todos')
    op.drop_table('todos')
    op.drop_index('ix_todolists_username', table_name='todolists')
    op.drop_table('todolists')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
