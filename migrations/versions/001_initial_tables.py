"""Create Clubbera tables

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _image_columns(prefix: str) -> list:
    return [
        sa.Column(f'{prefix}_provider', sa.String(20), nullable=True),
        sa.Column(f'{prefix}_key', sa.String(500), nullable=True),
        sa.Column(f'{prefix}_url', sa.String(1000), nullable=True),
    ]


def _place_columns() -> list:
    return [
        sa.Column('location_place_id', sa.String(255), nullable=True),
        sa.Column('location_address', sa.String(500), nullable=True),
        sa.Column('location_name', sa.String(255), nullable=True),
        sa.Column('location_types', sa.JSON(), nullable=True),
        sa.Column('location_lat', sa.Float(), nullable=True),
        sa.Column('location_lng', sa.Float(), nullable=True),
    ]


def upgrade() -> None:
    """Create user, group, content and event tables"""

    # 1. Accounts
    op.create_table('users',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('full_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('unique_url', sa.String(160), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('gender', sa.String(20), nullable=False, server_default='prefer not to say'),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_email_confirmed', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_image_columns('photo'),
        sa.Column('location_city', sa.String(120), nullable=True),
        sa.Column('location_lat', sa.Float(), nullable=True),
        sa.Column('location_lng', sa.Float(), nullable=True),
        sa.Column('birthday', sa.Date(), nullable=True),
        sa.Column('email_confirm_token', sa.String(512), nullable=True),
        sa.Column('password_reset_token', sa.String(512), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_unique_url', 'users', ['unique_url'], unique=True)

    op.create_table('user_tokens',
        sa.Column('token_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('token', sa.String(512), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('token_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
    )
    op.create_index('ix_user_tokens_user_id', 'user_tokens', ['user_id'])
    op.create_index('ix_user_tokens_token', 'user_tokens', ['token'], unique=True)

    # 2. Categories and interests
    op.create_table('categories',
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(60), nullable=False),
        sa.Column('creator_id', sa.Uuid(), nullable=True),

        sa.PrimaryKeyConstraint('category_id'),
        sa.UniqueConstraint('name'),
        sa.ForeignKeyConstraint(['creator_id'], ['users.user_id'], ondelete='SET NULL'),
    )

    op.create_table('user_interests',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),

        sa.PrimaryKeyConstraint('user_id', 'category_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.category_id'], ondelete='CASCADE'),
    )

    # 3. Groups and membership
    op.create_table('groups',
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('unique_url', sa.String(120), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(50), nullable=False),
        sa.Column('tagline', sa.String(150), nullable=True),
        sa.Column('description', sa.String(500), nullable=True),
        *_image_columns('banner'),
        *_place_columns(),
        sa.Column('permission_required', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('deactivated', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('group_id'),
        sa.UniqueConstraint('title'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.user_id'], ondelete='CASCADE'),
    )
    op.create_index('ix_groups_unique_url', 'groups', ['unique_url'], unique=True)
    op.create_index('ix_groups_owner_id', 'groups', ['owner_id'])
    op.create_index('ix_groups_created_at', 'groups', ['created_at'])
    op.create_index('ix_groups_location', 'groups', ['location_lat', 'location_lng'])

    op.create_table('group_topics',
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('topic', sa.String(60), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),

        sa.PrimaryKeyConstraint('group_id', 'topic'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.group_id'], ondelete='CASCADE'),
    )

    op.create_table('group_memberships',
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('state', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('group_id', 'user_id'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.group_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.CheckConstraint(
            "state IN ('requested', 'member', 'moderator', 'banned')",
            name='ck_group_memberships_state',
        ),
    )
    op.create_index('ix_group_memberships_user_id', 'group_memberships', ['user_id'])
    op.create_index('ix_group_memberships_group_state', 'group_memberships', ['group_id', 'state'])

    op.create_table('moderator_invitations',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('user_id', 'group_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.group_id'], ondelete='CASCADE'),
    )

    # 4. Comment threads
    op.create_table('comments',
        sa.Column('comment_id', sa.Uuid(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('target_type', sa.String(20), nullable=False),
        sa.Column('target_id', sa.Uuid(), nullable=False),
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('comment_id'),
        sa.ForeignKeyConstraint(['author_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.group_id'], ondelete='CASCADE'),
        sa.CheckConstraint("target_type IN ('Group', 'Comment')", name='ck_comments_target_type'),
    )
    op.create_index('ix_comments_author_id', 'comments', ['author_id'])
    op.create_index('ix_comments_group_id', 'comments', ['group_id'])
    op.create_index('ix_comments_target_created', 'comments', ['target_type', 'target_id', 'created_at'])

    # 5. Events
    op.create_table('events',
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('unique_url', sa.String(120), nullable=False),
        sa.Column('creator_id', sa.Uuid(), nullable=False),
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        *_image_columns('banner'),
        *_place_columns(),
        sa.Column('event_date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.String(20), nullable=False),
        sa.Column('end_time', sa.String(20), nullable=False),
        sa.Column('slots', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('event_id'),
        sa.ForeignKeyConstraint(['creator_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.group_id'], ondelete='CASCADE'),
        sa.CheckConstraint('slots >= 1', name='ck_events_slots'),
    )
    op.create_index('ix_events_unique_url', 'events', ['unique_url'], unique=True)
    op.create_index('ix_events_group_date', 'events', ['group_id', 'event_date'])

    op.create_table('event_attendees',
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('attended', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('registered_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('event_id', 'user_id'),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
    )

    # 6. Audit trail
    op.create_table('activity_logs',
        sa.Column('log_id', sa.Uuid(), nullable=False),
        sa.Column('group_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('action', sa.String(40), nullable=False),
        sa.Column('comment_id', sa.Uuid(), nullable=True),
        sa.Column('event_id', sa.Uuid(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('log_id'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.group_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['comment_id'], ['comments.comment_id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='SET NULL'),
    )
    op.create_index(
        'ix_activity_logs_group_action_user', 'activity_logs', ['group_id', 'action', 'user_id']
    )


def downgrade() -> None:
    """Drop every Clubbera table"""
    op.drop_table('activity_logs')
    op.drop_table('event_attendees')
    op.drop_table('events')
    op.drop_table('comments')
    op.drop_table('moderator_invitations')
    op.drop_table('group_memberships')
    op.drop_table('group_topics')
    op.drop_table('groups')
    op.drop_table('user_interests')
    op.drop_table('categories')
    op.drop_table('user_tokens')
    op.drop_table('users')
