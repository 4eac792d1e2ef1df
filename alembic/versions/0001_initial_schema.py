"""initial agromano schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'usuario',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre_usuario', sa.String(length=255), nullable=False),
        sa.Column('nombre_empresa', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('contrasena_hash', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_usuario'),
    )
    op.create_index('ix_usuario_email', 'usuario', ['email'], unique=True)

    op.create_table(
        'sesion',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('id_usuario', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['id_usuario'], ['usuario.id'], name='fk_sesion_id_usuario_usuario', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_sesion'),
    )
    op.create_index('ix_sesion_id_usuario', 'sesion', ['id_usuario'])

    op.create_table(
        'titular',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre', sa.String(length=255), nullable=False),
        sa.Column('nif', sa.String(length=32), nullable=False),
        sa.Column('domicilio', sa.String(length=255), nullable=True),
        sa.Column('localidad', sa.String(length=128), nullable=True),
        sa.Column('provincia', sa.String(length=128), nullable=True),
        sa.Column('codigo_postal', sa.String(length=16), nullable=True),
        sa.Column('telefono', sa.String(length=32), nullable=True),
        sa.Column('id_usuario', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_usuario'], ['usuario.id'], name='fk_titular_id_usuario_usuario', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_titular'),
        sa.UniqueConstraint('nif', name='ux_titular_nif'),
    )
    op.create_index('ix_titular_id_usuario', 'titular', ['id_usuario'])

    op.create_table(
        'explotacion',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('codigo', sa.String(length=64), nullable=False),
        sa.Column('nombre', sa.String(length=255), nullable=False),
        sa.Column('direccion', sa.String(length=255), nullable=True),
        sa.Column('localidad', sa.String(length=128), nullable=True),
        sa.Column('provincia', sa.String(length=128), nullable=True),
        sa.Column('codigo_postal', sa.String(length=16), nullable=True),
        sa.Column('especies', sa.String(length=255), nullable=True),
        sa.Column('coordenadas', sa.String(length=255), nullable=True),
        sa.Column('id_titular', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_titular'], ['titular.id'], name='fk_explotacion_id_titular_titular', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_explotacion'),
    )
    op.create_index('ix_explotacion_id_titular', 'explotacion', ['id_titular'])

    op.create_table(
        'parcela',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('coordenadas', sa.String(length=255), nullable=True),
        sa.Column('extension', sa.Numeric(12, 4), nullable=True),
        sa.Column('id_explotacion', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_explotacion'], ['explotacion.id'], name='fk_parcela_id_explotacion_explotacion', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_parcela'),
    )
    op.create_index('ix_parcela_id_explotacion', 'parcela', ['id_explotacion'])

    op.create_table(
        'animal',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('identificacion', sa.String(length=64), nullable=False),
        sa.Column('especie', sa.String(length=64), nullable=True),
        sa.Column('estado', sa.String(length=64), nullable=True),
        sa.Column('fecha_nacimiento', sa.Date(), nullable=True),
        sa.Column('fecha_alta', sa.Date(), nullable=True),
        sa.Column('id_explotacion', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_explotacion'], ['explotacion.id'], name='fk_animal_id_explotacion_explotacion', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_animal'),
        sa.UniqueConstraint('identificacion', name='ux_animal_identificacion'),
    )
    op.create_index('ix_animal_id_explotacion', 'animal', ['id_explotacion'])

    op.create_table(
        'movimiento',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('tipo', sa.String(length=32), nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('motivo', sa.String(length=255), nullable=True),
        sa.Column('procedencia_destino', sa.String(length=255), nullable=True),
        sa.Column('id_animal', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_animal'], ['animal.id'], name='fk_movimiento_id_animal_animal', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_movimiento'),
    )
    op.create_index('ix_movimiento_id_animal', 'movimiento', ['id_animal'])

    op.create_table(
        'incidencia',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('codigo_anterior', sa.String(length=64), nullable=True),
        sa.Column('codigo_actual', sa.String(length=64), nullable=True),
        sa.Column('id_animal', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_animal'], ['animal.id'], name='fk_incidencia_id_animal_animal', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_incidencia'),
    )
    op.create_index('ix_incidencia_id_animal', 'incidencia', ['id_animal'])

    op.create_table(
        'alimentacion',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('tipo', sa.String(length=128), nullable=False),
        sa.Column('cantidad', sa.Numeric(12, 2), nullable=True),
        sa.Column('lote', sa.String(length=64), nullable=True),
        sa.Column('factura', sa.String(length=64), nullable=False),
        sa.Column('id_explotacion', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_explotacion'], ['explotacion.id'], name='fk_alimentacion_id_explotacion_explotacion', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_alimentacion'),
        sa.UniqueConstraint('factura', 'id_explotacion', name='ux_alimentacion_factura_explotacion'),
    )
    op.create_index('ix_alimentacion_id_explotacion', 'alimentacion', ['id_explotacion'])

    op.create_table(
        'medicamento',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('receta', sa.String(length=128), nullable=True),
        sa.Column('medicamento', sa.String(length=255), nullable=False),
        sa.Column('factura', sa.String(length=64), nullable=False),
        sa.Column('id_explotacion', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_explotacion'], ['explotacion.id'], name='fk_medicamento_id_explotacion_explotacion', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_medicamento'),
        sa.UniqueConstraint('factura', 'id_explotacion', name='ux_medicamento_factura_explotacion'),
    )
    op.create_index('ix_medicamento_id_explotacion', 'medicamento', ['id_explotacion'])

    op.create_table(
        'vacunacion',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('tipo', sa.String(length=128), nullable=False),
        sa.Column('dosis', sa.String(length=64), nullable=True),
        sa.Column('nombre_comercial', sa.String(length=255), nullable=True),
        sa.Column('veterinario', sa.String(length=255), nullable=True),
        sa.Column('id_explotacion', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_explotacion'], ['explotacion.id'], name='fk_vacunacion_id_explotacion_explotacion', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_vacunacion'),
        sa.UniqueConstraint('fecha', 'tipo', 'id_explotacion', name='ux_vacunacion_fecha_tipo_explotacion'),
    )
    op.create_index('ix_vacunacion_id_explotacion', 'vacunacion', ['id_explotacion'])

    op.create_table(
        'vacunacion_animal',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('id_vacunacion', sa.Integer(), nullable=False),
        sa.Column('id_animal', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_vacunacion'], ['vacunacion.id'], name='fk_vacunacion_animal_id_vacunacion_vacunacion', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['id_animal'], ['animal.id'], name='fk_vacunacion_animal_id_animal_animal', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_vacunacion_animal'),
    )
    op.create_index('ix_vacunacion_animal_id_vacunacion', 'vacunacion_animal', ['id_vacunacion'])
    op.create_index('ix_vacunacion_animal_id_animal', 'vacunacion_animal', ['id_animal'])

    op.create_table(
        'inspeccion',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fecha', sa.Date(), nullable=False),
        sa.Column('oficial', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('tipo', sa.String(length=128), nullable=True),
        sa.Column('numero_acta', sa.String(length=64), nullable=False),
        sa.Column('id_explotacion', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_explotacion'], ['explotacion.id'], name='fk_inspeccion_id_explotacion_explotacion', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_inspeccion'),
        sa.UniqueConstraint('numero_acta', 'id_explotacion', name='ux_inspeccion_acta_explotacion'),
    )
    op.create_index('ix_inspeccion_id_explotacion', 'inspeccion', ['id_explotacion'])


def downgrade() -> None:
    for table in (
        'inspeccion',
        'vacunacion_animal',
        'vacunacion',
        'medicamento',
        'alimentacion',
        'incidencia',
        'movimiento',
        'animal',
        'parcela',
        'explotacion',
        'titular',
        'sesion',
        'usuario',
    ):
        op.drop_table(table)
