"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create ENUM types
    op.execute("CREATE TYPE affiliate_status AS ENUM ('ACTIVE', 'INACTIVE', 'SUSPENDED')")
    op.execute("CREATE TYPE credit_application_status AS ENUM ('PENDING', 'APPROVED', 'REJECTED')")

    # Create affiliates table
    op.create_table(
        'affiliates',
        sa.Column('id', sa.BigInteger(), sa.Identity(), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('document', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('salary', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('registration_date', sa.Date(), nullable=False),
        sa.Column('status', postgresql.ENUM(name='affiliate_status', create_type=False), nullable=False),
        sa.CheckConstraint('salary > 0', name='ck_affiliates_salary_positive'),
    )
    op.create_index('ix_affiliates_document', 'affiliates', ['document'], unique=True)

    # Create credit_applications table
    op.create_table(
        'credit_applications',
        sa.Column('id', sa.BigInteger(), sa.Identity(), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('affiliate_id', sa.BigInteger(), sa.ForeignKey('affiliates.id'), nullable=False),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('term', sa.Integer(), nullable=False),
        sa.Column('status', postgresql.ENUM(name='credit_application_status', create_type=False), nullable=False),
        sa.Column('submission_date', sa.Date(), nullable=False),
        sa.Column('risk_score', sa.Integer(), nullable=True),
        sa.Column('risk_level', sa.String(length=100), nullable=True),
        sa.CheckConstraint('amount > 0', name='ck_credit_applications_amount_positive'),
        sa.CheckConstraint('term > 0', name='ck_credit_applications_term_positive'),
        sa.CheckConstraint('risk_score IS NULL OR risk_score >= 0', name='ck_credit_applications_risk_score'),
    )
    op.create_index('ix_credit_applications_affiliate_id', 'credit_applications', ['affiliate_id'])
    op.create_index('ix_credit_applications_status', 'credit_applications', ['status'])


def downgrade() -> None:
    op.drop_index('ix_credit_applications_status', table_name='credit_applications')
    op.drop_index('ix_credit_applications_affiliate_id', table_name='credit_applications')
    op.drop_table('credit_applications')

    op.drop_index('ix_affiliates_document', table_name='affiliates')
    op.drop_table('affiliates')

    # Drop ENUM types
    op.execute('DROP TYPE credit_application_status')
    op.execute('DROP TYPE affiliate_status')
