"""Initial schema: users and athlete monitoring tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_BODY_COMPOSITION_FLOATS = (
    'weight_kg_min', 'weight_kg_max', 'body_fat_kg', 'body_fat_kg_min', 'body_fat_kg_max',
    'muscle_mass_kg', 'muscle_mass_kg_min', 'muscle_mass_kg_max', 'skeletal_muscle_kg',
    'target_weight_kg', 'basal_metabolic_rate_kcal', 'fat_free_body_weight_kg',
    'subcutaneous_fat_percent', 'smi_kg_m2', 'arm_mass_left_kg', 'arm_mass_right_kg',
    'leg_mass_left_kg', 'leg_mass_right_kg', 'trunk_mass_kg',
)

_BLOOD_ANALYTES = (
    'cortisol_nmol_l', 'testosterone', 'vitamin_d', 'ck', 'fasting_glucose', 'hba1c',
    'urea', 'creatinine', 'egfr', 's_alanine_transaminase', 's_aspartate_transaminase',
    's_glutamyl_transferase', 'lactate_dehydrogenase', 'calcium_adjusted', 'magnesium',
    'c_reactive_protein', 'hemoglobin', 'hematocrit', 'wbc', 'neutrophils', 'lymphocytes',
    'nlr', 'platelets',
)


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def _athlete_fk() -> sa.Column:
    return sa.Column('athlete_id', sa.Integer(), sa.ForeignKey('athletes.id'), nullable=False)


def upgrade() -> None:
    """Create users, athletes, biometric, genetics, body composition and blood tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False, server_default='Coach'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_superuser', sa.Boolean(), nullable=False, server_default='false'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('athletes', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_code', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('sport', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('team', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('gender', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=True),
        sa.Column('height_cm', sa.Float(), nullable=True),
        sa.Column('baseline_start_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_athletes_athlete_code'), 'athletes', ['athlete_code'], unique=True)
    op.create_index(op.f('ix_athletes_team'), 'athletes', ['team'], unique=False)

    op.create_table('biometric_data', sa.Column('id', sa.Integer(), nullable=False),
        _athlete_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        *[sa.Column(name, sa.Float(), nullable=False) for name in (
            'hrv_night', 'resting_hr', 'spo2_night', 'resp_rate_night', 'deep_sleep_pct',
            'rem_sleep_pct', 'light_sleep_pct', 'sleep_duration_h')],
        sa.Column('sleep_onset_time', sa.Time(), nullable=True),
        sa.Column('wake_time', sa.Time(), nullable=True),
        sa.Column('temp_trend_c', sa.Float(), nullable=False),
        sa.Column('training_load_pct', sa.Float(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'date', name='uq_biometric_athlete_date'))
    op.create_index(op.f('ix_biometric_data_athlete_id'), 'biometric_data', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_biometric_data_date'), 'biometric_data', ['date'], unique=False)

    op.create_table('genes', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=True),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_genes_name'), 'genes', ['name'], unique=True)
    op.create_index(op.f('ix_genes_category'), 'genes', ['category'], unique=False)

    op.create_table('genetic_profiles', sa.Column('id', sa.Integer(), nullable=False),
        _athlete_fk(),
        sa.Column('gene', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('genotype', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'gene', name='uq_genetic_athlete_gene'))
    op.create_index(op.f('ix_genetic_profiles_athlete_id'), 'genetic_profiles', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_genetic_profiles_gene'), 'genetic_profiles', ['gene'], unique=False)

    op.create_table('body_composition', sa.Column('id', sa.Integer(), nullable=False),
        _athlete_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=False),
        sa.Column('body_fat_rate', sa.Float(), nullable=False),
        sa.Column('bmi', sa.Float(), nullable=False),
        *[sa.Column(name, sa.Float(), nullable=False, server_default='0') for name in (
            'weight_control_kg', 'fat_control_kg', 'muscle_control_kg', 'visceral_fat_grade')],
        *[sa.Column(name, sa.Float(), nullable=True) for name in _BODY_COMPOSITION_FLOATS],
        sa.Column('body_age', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'date', name='uq_body_composition_athlete_date'))
    op.create_index(op.f('ix_body_composition_athlete_id'), 'body_composition', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_body_composition_date'), 'body_composition', ['date'], unique=False)

    op.create_table('blood_results', sa.Column('id', sa.Integer(), nullable=False),
        _athlete_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        *[sa.Column(name, sa.Float(), nullable=True) for name in _BLOOD_ANALYTES],
        sa.Column('lab_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'date', name='uq_blood_results_athlete_date'))
    op.create_index(op.f('ix_blood_results_athlete_id'), 'blood_results', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_blood_results_date'), 'blood_results', ['date'], unique=False)


def downgrade() -> None:
    """Drop every table."""
    for table in ('blood_results', 'body_composition', 'genetic_profiles', 'biometric_data'):
        op.drop_index(op.f(f'ix_{table}_athlete_id'), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f('ix_genes_category'), table_name='genes')
    op.drop_index(op.f('ix_genes_name'), table_name='genes')
    op.drop_table('genes')
    op.drop_index(op.f('ix_athletes_team'), table_name='athletes')
    op.drop_index(op.f('ix_athletes_athlete_code'), table_name='athletes')
    op.drop_table('athletes')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
