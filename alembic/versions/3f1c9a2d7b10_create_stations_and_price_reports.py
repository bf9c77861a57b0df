"""create stations and price reports

Revision ID: 3f1c9a2d7b10
Revises: 
Create Date: 2026-10-19 12:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

FUEL_TYPES = ('regular_gasoline', 'premium_gasoline', 'ethanol', 'diesel')


def upgrade() -> None:
    # Create stations table
    op.create_table(
        'stations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False, comment='Station name'),
        sa.Column('address', sa.String(length=300), nullable=False, comment='Street address'),
        sa.Column('latitude', sa.Float(), nullable=False, comment='Latitude in degrees'),
        sa.Column('longitude', sa.Float(), nullable=False, comment='Longitude in degrees'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_stations_id'), 'stations', ['id'], unique=False)
    op.create_index(op.f('ix_stations_name'), 'stations', ['name'], unique=False)
    op.create_index('idx_station_location', 'stations', ['latitude', 'longitude'], unique=False)

    # Create price_reports table
    op.create_table(
        'price_reports',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('station_id', sa.Integer(), nullable=False, comment='Reference to the fuel station'),
        sa.Column(
            'fuel_type',
            sa.Enum(*FUEL_TYPES, name='fuel_type', native_enum=False, length=32),
            nullable=False,
            comment='Fuel type the price refers to'
        ),
        sa.Column('price', sa.Numeric(precision=10, scale=3), nullable=False, comment='Reported price in BRL'),
        sa.Column('reported_at', sa.DateTime(timezone=True), nullable=False, comment='When the report was recorded'),
        sa.ForeignKeyConstraint(['station_id'], ['stations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_price_reports_id'), 'price_reports', ['id'], unique=False)
    op.create_index(op.f('ix_price_reports_station_id'), 'price_reports', ['station_id'], unique=False)
    op.create_index(op.f('ix_price_reports_reported_at'), 'price_reports', ['reported_at'], unique=False)
    op.create_index(
        'idx_price_station_fuel_reported',
        'price_reports',
        ['station_id', 'fuel_type', 'reported_at'],
        unique=False
    )


def downgrade() -> None:
    op.drop_index('idx_price_station_fuel_reported', table_name='price_reports')
    op.drop_index(op.f('ix_price_reports_reported_at'), table_name='price_reports')
    op.drop_index(op.f('ix_price_reports_station_id'), table_name='price_reports')
    op.drop_index(op.f('ix_price_reports_id'), table_name='price_reports')
    op.drop_table('price_reports')

    op.drop_index('idx_station_location', table_name='stations')
    op.drop_index(op.f('ix_stations_name'), table_name='stations')
    op.drop_index(op.f('ix_stations_id'), table_name='stations')
    op.drop_table('stations')
