"""Create language, domain, string and translation tables

Revision ID: create_translation_tables
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'create_translation_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'language',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('code', sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_language_code', 'language', ['code'], unique=True)

    op.create_table(
        'domain',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_domain_name', 'domain', ['name'], unique=True)

    op.create_table(
        'string',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('domain_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['domain_id'], ['domain.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'domain_id', name='unique_string_per_domain')
    )
    op.create_index('ix_string_domain_id', 'string', ['domain_id'])

    op.create_table(
        'translation',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('string_id', sa.Integer(), nullable=False),
        sa.Column('language_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['string_id'], ['string.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['language_id'], ['language.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('string_id', 'language_id', name='unique_translation_per_language')
    )
    op.create_index('ix_translation_string_id', 'translation', ['string_id'])


def downgrade():
    op.drop_index('ix_translation_string_id', table_name='translation')
    op.drop_table('translation')
    op.drop_index('ix_string_domain_id', table_name='string')
    op.drop_table('string')
    op.drop_index('ix_domain_name', table_name='domain')
    op.drop_table('domain')
    op.drop_index('ix_language_code', table_name='language')
    op.drop_table('language')
