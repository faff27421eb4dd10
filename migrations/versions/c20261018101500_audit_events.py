"""audit events

Revision ID: c20261018101500
Revises: c20261018100000
Create Date: 2026-10-18 10:15:00

"""
from alembic import op
import sqlalchemy as sa


revision = 'c20261018101500'
down_revision = 'c20261018100000'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = set(inspector.get_table_names())
    if 'errors' in tables:
        return

    op.create_table(
        'errors',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), primary_key=True, autoincrement=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('error_type', sa.String(length=50), nullable=False),
        sa.Column('remark', sa.Text()),
        mysql_engine='InnoDB',
        mysql_charset='utf8mb4',
        mysql_collate='utf8mb4_unicode_ci',
    )
    op.create_index('ix_errors_timestamp', 'errors', ['timestamp'])
    op.create_index('ix_errors_error_type', 'errors', ['error_type'])


def downgrade():
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = set(inspector.get_table_names())
    if 'errors' not in tables:
        return
    op.drop_index('ix_errors_error_type', table_name='errors')
    op.drop_index('ix_errors_timestamp', table_name='errors')
    op.drop_table('errors')
