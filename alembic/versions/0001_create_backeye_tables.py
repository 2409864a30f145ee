"""create backeye tables

Revision ID: 0001_backeye
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001_backeye'
down_revision = None
branch_labels = None
depends_on = None

person_type = sa.Enum('STUDENT', 'TEACHER', name='persontype')

def upgrade() -> None:
    op.create_table('persons',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('birth_id', sa.String(length=50), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=True),
        sa.Column('type', person_type, nullable=False),
        sa.Column('token', sa.String(length=1024), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_persons_id'), 'persons', ['id'])
    op.create_index(op.f('ix_persons_email'), 'persons', ['email'])
    op.create_index(op.f('ix_persons_password'), 'persons', ['password'])

    op.create_table('lessons',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('platform', sa.String(length=100), nullable=True),
        sa.Column('link', sa.String(length=1024), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('day_of_week', sa.String(length=20), nullable=True),
        sa.Column('class_code', sa.String(length=50), nullable=True),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('break_start', sa.DateTime(), nullable=True),
        sa.Column('break_end', sa.DateTime(), nullable=True),
        sa.Column('max_late', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['person_id'], ['persons.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_lessons_id'), 'lessons', ['id'])
    op.create_index(op.f('ix_lessons_person_id'), 'lessons', ['person_id'])

    op.create_table('measurements',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=True),
        sa.Column('lesson_id', sa.Integer(), nullable=True),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('face_recognition', sa.Boolean(), nullable=False),
        sa.Column('face_detector', sa.Boolean(), nullable=False),
        sa.Column('head_pose', sa.Boolean(), nullable=False),
        sa.Column('object_detection', sa.Boolean(), nullable=False),
        sa.Column('on_top', sa.Boolean(), nullable=False),
        sa.Column('sleep_detector', sa.Boolean(), nullable=False),
        sa.Column('sound_check', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['lesson_id'], ['lessons.id'], ),
        sa.ForeignKeyConstraint(['person_id'], ['persons.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_measurements_id'), 'measurements', ['id'])
    op.create_index(op.f('ix_measurements_person_id'), 'measurements', ['person_id'])
    op.create_index(op.f('ix_measurements_lesson_id'), 'measurements', ['lesson_id'])
    op.create_index('idx_measurement_lesson_time', 'measurements', ['lesson_id', 'date_time'])

    op.create_table('logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=False),
        sa.Column('creation_date', sa.DateTime(), nullable=False),
        sa.Column('data', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['person_id'], ['persons.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_logs_id'), 'logs', ['id'])
    op.create_index(op.f('ix_logs_person_id'), 'logs', ['person_id'])

    op.create_table('student_lessons',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('lesson_id', sa.Integer(), nullable=True),
        sa.Column('person_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['lesson_id'], ['lessons.id'], ),
        sa.ForeignKeyConstraint(['person_id'], ['persons.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('lesson_id', 'person_id', name='uq_student_lesson_pair')
    )
    op.create_index(op.f('ix_student_lessons_id'), 'student_lessons', ['id'])
    op.create_index(op.f('ix_student_lessons_lesson_id'), 'student_lessons', ['lesson_id'])
    op.create_index(op.f('ix_student_lessons_person_id'), 'student_lessons', ['person_id'])

def downgrade() -> None:
    op.drop_table('student_lessons')
    op.drop_table('logs')
    op.drop_table('measurements')
    op.drop_table('lessons')
    op.drop_table('persons')
    person_type.drop(op.get_bind(), checkfirst=True)
