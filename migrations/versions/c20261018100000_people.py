"""people

Revision ID: c20261018100000
Revises:
Create Date: 2026-10-18 10:00:00

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision = 'c20261018100000'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if 'people' in set(inspector.get_table_names()):
        return

    op.create_table(
        'people',
        sa.Column('national_id', sa.String(length=50), primary_key=True),
        sa.Column('full_name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.Enum('student', 'staff', name='category'), nullable=False),
        sa.Column('remark', sa.Text().with_variant(mysql.LONGTEXT(), 'mysql')),
        mysql_engine='InnoDB',
        mysql_charset='utf8mb4',
        mysql_collate='utf8mb4_unicode_ci',
    )


def downgrade():
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if 'people' not in set(inspector.get_table_names()):
        return
    op.drop_table('people')
