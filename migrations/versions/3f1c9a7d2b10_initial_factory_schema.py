"""initial factory schema

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 09:12:44.120381

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# SQLModel persists str Enums by member name
logistics_status = sa.Enum(
    'PENDING', 'IN_TRANSIT', 'COMPLETED', name='logisticsstatus')
work_order_status = sa.Enum(
    'PENDING', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED', name='workorderstatus')
work_order_priority = sa.Enum(
    'LOW', 'MEDIUM', 'HIGH', name='workorderpriority')


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('birthday', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('address', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('profile_picture', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'settings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('push_notifications', sa.Boolean(), nullable=False),
        sa.Column('dark_mode', sa.Boolean(), nullable=False),
        sa.Column('email_notifications', sa.Boolean(), nullable=False),
        sa.Column('auto_logout', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_settings_user_email'), 'settings', ['user_email'], unique=True)

    op.create_table(
        'logistics',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('module', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('requested_by', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('recipient', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('request_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('status', logistics_status, nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_logistics_module'), 'logistics', ['module'], unique=False)
    op.create_index(op.f('ix_logistics_recipient'), 'logistics', ['recipient'], unique=False)

    op.create_table(
        'tracking',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('log_id', sa.Uuid(), nullable=False),
        sa.Column('module', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('status', logistics_status, nullable=False),
        sa.Column('updated_by', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['log_id'], ['logistics.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_tracking_log_id'), 'tracking', ['log_id'], unique=True)

    op.create_table(
        'workorder',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('module', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_by', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('assigned_to', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('priority', work_order_priority, nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('status', work_order_status, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'production',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('work_order_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('date_requested', sa.DateTime(timezone=True), nullable=False),
        sa.Column('fulfilled_by', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('date_fulfilled', sa.DateTime(timezone=True), nullable=False),
        sa.Column('produced_qty', sa.Integer(), nullable=False),
        sa.Column('order_fulfilled', sa.Boolean(), nullable=False),
        sa.Column('order_on_time', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_production_work_order_id'), 'production', ['work_order_id'], unique=False)

    op.create_table(
        'notifications',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('message', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_notifications_created_at'), 'notifications', ['created_at'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_notifications_created_at'), table_name='notifications')
    op.drop_table('notifications')
    op.drop_index(op.f('ix_production_work_order_id'), table_name='production')
    op.drop_table('production')
    op.drop_table('workorder')
    op.drop_index(op.f('ix_tracking_log_id'), table_name='tracking')
    op.drop_table('tracking')
    op.drop_index(op.f('ix_logistics_recipient'), table_name='logistics')
    op.drop_index(op.f('ix_logistics_module'), table_name='logistics')
    op.drop_table('logistics')
    op.drop_index(op.f('ix_settings_user_email'), table_name='settings')
    op.drop_table('settings')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')

    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        # Enum types outlive their tables in PostgreSQL
        work_order_priority.drop(bind, checkfirst=True)
        work_order_status.drop(bind, checkfirst=True)
        logistics_status.drop(bind, checkfirst=True)
