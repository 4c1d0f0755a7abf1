"""create users, photos, albums and publishing tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-18 10:12:44.208113

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7d2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('uuid', sa.String(length=32), nullable=False, unique=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100)),
        sa.Column('subscription_expires', sa.Date()),
        sa.Column('joined', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'password_resets',
        sa.Column('uuid', sa.String(length=32), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_password_resets_user_id', 'password_resets', ['user_id'])

    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('uuid', sa.String(length=32), nullable=False),
        sa.Column('owner', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('present', sa.Boolean()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_photos_uuid', 'photos', ['uuid'], unique=True)
    op.create_index('ix_photos_owner', 'photos', ['owner'])

    op.create_table(
        'photo_attrs',
        sa.Column('photo_id', sa.Integer(), sa.ForeignKey('photos.id'), primary_key=True),
        sa.Column('key', sa.String(length=30), primary_key=True),
        sa.Column('value', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'photo_albums',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.Text()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_photo_albums_user_id', 'photo_albums', ['user_id'])

    op.create_table(
        'album_membership',
        sa.Column('photo_id', sa.Integer(), sa.ForeignKey('photos.id'), primary_key=True),
        sa.Column('album_id', sa.Integer(), sa.ForeignKey('photo_albums.id'), primary_key=True),
        sa.Column('ordering', sa.SmallInteger()),
        sa.Column('caption', sa.Text()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_album_membership_album_id', 'album_membership', ['album_id'])

    op.create_table(
        'published_albums',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('album_id', sa.Integer(), sa.ForeignKey('photo_albums.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_published_albums_album_id', 'published_albums', ['album_id'])
    op.create_index('ix_published_albums_user_id', 'published_albums', ['user_id'])


def downgrade():
    op.drop_table('published_albums')
    op.drop_table('album_membership')
    op.drop_table('photo_albums')
    op.drop_table('photo_attrs')
    op.drop_table('photos')
    op.drop_table('password_resets')
    op.drop_table('users')
