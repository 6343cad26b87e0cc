"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _owned_columns() -> list[sa.Column]:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def _money(name: str, nullable: bool) -> sa.Column:
    return sa.Column(name, sa.Numeric(precision=12, scale=2), nullable=nullable)


# (table, extra indexed columns besides user_id)
INDEXES = {
    'livestock': [],
    'breeding_records': ['animal_id'],
    'feeding_records': ['animal_id'],
    'health_records': ['animal_id'],
    'production_records': ['animal_id'],
    'veterinary_records': ['animal_id'],
    'animal_sales': ['animal_id'],
    'product_sales': ['animal_id'],
    'inventory_items': [],
    'expenses': ['expense_date'],
    'income': ['income_date'],
    'employees': [],
    'tasks': ['due_date'],
    'attendance': ['employee_id'],
    'reminders': ['due_date'],
    'environmental_data': ['city'],
}


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=50), nullable=True),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=False)

    op.create_table(
        'livestock',
        *_owned_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('species', sa.String(length=100), nullable=False),
        sa.Column('breed', sa.String(length=100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(length=10), nullable=False),
        sa.Column('health_status', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_livestock'),
    )
    op.create_table(
        'breeding_records',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('partner_animal_id', sa.Uuid(), nullable=False),
        sa.Column('breeding_date', sa.Date(), nullable=False),
        sa.Column('outcome', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_records'),
    )
    op.create_table(
        'feeding_records',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('feed_type', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_feeding_records'),
    )
    op.create_table(
        'health_records',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('checkup_date', sa.Date(), nullable=False),
        sa.Column('diagnosis', sa.String(length=255), nullable=False),
        sa.Column('treatment', sa.String(length=255), nullable=False),
        sa.Column('vet_name', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_health_records'),
    )
    op.create_table(
        'production_records',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('product_type', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_production_records'),
    )
    op.create_table(
        'veterinary_records',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('appointment_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('vet_name', sa.String(length=255), nullable=False),
        sa.Column('vet_contact', sa.String(length=255), nullable=True),
        sa.Column('visit_type', sa.String(length=50), nullable=False),
        sa.Column('diagnosis', sa.String(length=255), nullable=False),
        sa.Column('treatment', sa.String(length=255), nullable=False),
        sa.Column('medication', sa.String(length=255), nullable=True),
        sa.Column('dosage', sa.String(length=100), nullable=True),
        sa.Column('next_visit_date', sa.DateTime(timezone=True), nullable=True),
        _money('cost', nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_veterinary_records'),
    )
    op.create_table(
        'animal_sales',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('sale_date', sa.Date(), nullable=False),
        sa.Column('buyer_name', sa.String(length=255), nullable=False),
        sa.Column('buyer_contact', sa.String(length=255), nullable=True),
        _money('sale_price', nullable=False),
        sa.Column('sale_reason', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_animal_sales'),
    )
    op.create_table(
        'product_sales',
        *_owned_columns(),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('sale_date', sa.Date(), nullable=False),
        sa.Column('product_type', sa.String(length=20), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        _money('unit_price', nullable=False),
        _money('total_price', nullable=False),
        sa.Column('buyer_name', sa.String(length=255), nullable=False),
        sa.Column('buyer_contact', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_product_sales'),
    )
    op.create_table(
        'inventory_items',
        *_owned_columns(),
        sa.Column('item_name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('current_stock', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.Column('minimum_stock', sa.Float(), nullable=False),
        _money('unit_cost', nullable=True),
        sa.Column('supplier', sa.String(length=255), nullable=True),
        sa.Column('supplier_contact', sa.String(length=255), nullable=True),
        sa.Column('expiry_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_inventory_items'),
    )
    op.create_table(
        'expenses',
        *_owned_columns(),
        sa.Column('expense_date', sa.Date(), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        _money('amount', nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('supplier', sa.String(length=255), nullable=True),
        sa.Column('payment_method', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_expenses'),
    )
    op.create_table(
        'income',
        *_owned_columns(),
        sa.Column('income_date', sa.Date(), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        _money('amount', nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('buyer', sa.String(length=255), nullable=True),
        sa.Column('payment_method', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_income'),
    )
    op.create_table(
        'employees',
        *_owned_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('position', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('hire_date', sa.Date(), nullable=False),
        _money('salary', nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_employees'),
    )
    op.create_table(
        'tasks',
        *_owned_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('assigned_to', sa.Uuid(), nullable=True),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('task_type', sa.String(length=30), nullable=False),
        sa.Column('priority', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('estimated_duration', sa.Integer(), nullable=True),
        sa.Column('actual_duration', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_tasks'),
    )
    op.create_table(
        'attendance',
        *_owned_columns(),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('check_in', sa.DateTime(timezone=True), nullable=True),
        sa.Column('check_out', sa.DateTime(timezone=True), nullable=True),
        sa.Column('hours_worked', sa.Float(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_attendance'),
    )
    op.create_table(
        'reminders',
        *_owned_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('animal_id', sa.Uuid(), nullable=True),
        sa.Column('reminder_type', sa.String(length=30), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('priority', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('is_recurring', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('recurring_interval', sa.String(length=20), nullable=True),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_reminders'),
    )
    op.create_table(
        'environmental_data',
        *_owned_columns(),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=False),
        sa.Column('humidity', sa.Float(), nullable=False),
        sa.Column('water_level', sa.Float(), nullable=True),
        sa.Column('rainfall', sa.Float(), nullable=True),
        sa.Column('wind_speed', sa.Float(), nullable=True),
        sa.Column('weather_condition', sa.String(length=20), nullable=False),
        sa.Column('air_quality', sa.String(length=20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_environmental_data'),
    )

    for table, columns in INDEXES.items():
        for column in ['user_id', *columns]:
            op.create_index(f'ix_{table}_{column}', table, [column], unique=False)


def downgrade() -> None:
    for table, columns in reversed(list(INDEXES.items())):
        for column in reversed(['user_id', *columns]):
            op.drop_index(f'ix_{table}_{column}', table_name=table)
        op.drop_table(table)
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
